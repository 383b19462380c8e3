import uuid
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from fastapi import Body, FastAPI, Request
from httpx import AsyncClient, ASGITransport

from accountshield.core import config as _config
from accountshield.api.errors import register_error_handlers
from accountshield.core.validation import validate
from accountshield.models.user import UserRecord, UserRole
from accountshield.schemas.rulesets import PAGED_QUERY, REGISTER_USER, ROLE_UPDATE
from accountshield.services import (
    message_response,
    project,
    project_all,
    resolve_paging,
    user_list_response,
)

T1 = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
T2 = datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Every test starts from default settings (no leaked env overrides)."""
    for var in ("ERROR_STATUS", "DEFAULT_PAGE_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    _config.get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    _config.get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def ann() -> UserRecord:
    return UserRecord(
        id="u1",
        name="Ann",
        email="ann@example.com",
        password="$argon2id$v=19$secret-hash",
        role=UserRole.ADMIN,
        verified=True,
        created_at=T1,
        updated_at=T2,
    )


@pytest.fixture()
def records() -> list[UserRecord]:
    return [
        UserRecord(
            id=uuid.uuid4(),
            name=f"user-{i}",
            email=f"user{i}@example.com",
            password=f"hash-{i}",
            role=UserRole.USER if i % 2 else UserRole.MODERATOR,
            verified=bool(i % 2),
            created_at=T1,
            updated_at=T2,
        )
        for i in range(5)
    ]


@pytest.fixture()
def app(records) -> FastAPI:
    """Minimal app wiring validate/project calls the way a router would."""
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/auth/register")
    async def register(payload: dict = Body(...)):
        dto = validate(REGISTER_USER, payload)
        return message_response(f"Registered {dto.email}").model_dump(by_alias=True)

    @app.patch("/users/role")
    async def update_role(payload: dict = Body(...)):
        dto = validate(ROLE_UPDATE, payload)
        return message_response(f"Role set to {dto.role.value}").model_dump(by_alias=True)

    @app.get("/users")
    async def list_users(request: Request):
        query = validate(PAGED_QUERY, dict(request.query_params))
        window = resolve_paging(query)
        page = records[window.offset:window.offset + window.limit]
        return user_list_response(project_all(page), results=len(records)).model_dump(
            by_alias=True, mode="json"
        )

    @app.get("/users/broken")
    async def broken_user():
        record = UserRecord(id="u9", name="Bad", email="bad@example.com", password="x", created_at=T1)
        return project(record).model_dump(by_alias=True, mode="json")

    return app


@pytest_asyncio.fixture()
async def client(app):
    # httpx >=0.28 removed the 'app=' shortcut; use ASGITransport explicitly
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
