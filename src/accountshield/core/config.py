from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, field_validator
from functools import lru_cache

from accountshield.schemas.rulesets import PAGE_LIMIT_MAX

class Settings(BaseSettings):
    app_name: str = Field(
        default="accountshield",
        validation_alias=AliasChoices("APP_NAME"),
    )
    environment: str = Field(default="local", validation_alias=AliasChoices("DEPLOYMENT_ENV"))

    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))

    # Envelope status used when rendering rejected input / integrity errors.
    # The surrounding service historically answers with "fail".
    error_status: str = Field(
        default="fail",
        validation_alias=AliasChoices("ERROR_STATUS"),
        description="Status tag placed in error envelopes (e.g. 'fail' or 'error').",
    )
    default_page_limit: int = Field(
        default=10,
        validation_alias=AliasChoices("DEFAULT_PAGE_LIMIT"),
        description="Page size applied when a paged query omits 'limit'.",
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("default_page_limit")
    @classmethod
    def _page_limit_bounds(cls, v: int) -> int:
        # must itself satisfy the paged query limit rule
        if not 1 <= v <= PAGE_LIMIT_MAX:
            raise ValueError(f"default_page_limit must be between 1 and {PAGE_LIMIT_MAX}")
        return v

@lru_cache
def get_settings():
    return Settings()
