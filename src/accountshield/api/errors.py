"""FastAPI exception handlers for boundary errors.

Routers call ``validate`` / ``project`` explicitly; when those raise, the
handlers registered here turn the error into an envelope:

* UnsupportedRoleError -> 400, role-specific message
* InputValidationError -> 400, every field error listed
* ProjectionIntegrityError -> 500, details kept in the logs only
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from accountshield.core.config import get_settings
from accountshield.core.logging import configure_logging
from accountshield.core.errors import (
    InputValidationError,
    ProjectionIntegrityError,
    UnsupportedRoleError,
)
from accountshield.services.envelope import message_response

logger = logging.getLogger("accountshield.api")


def register_error_handlers(app: FastAPI, configure_logs: bool = False) -> None:
    """Register the boundary error handlers on a FastAPI app.

    With ``configure_logs`` the root logger is also switched to JSON lines at
    ``LOG_LEVEL``; leave it off when the host application owns logging.
    """
    if configure_logs:
        configure_logging(get_settings().log_level)
    _register_input_error_handler(app)
    _register_role_error_handler(app)
    _register_integrity_error_handler(app)


def _error_body(message: str, **extra) -> dict:
    body = message_response(message, status=get_settings().error_status).model_dump(by_alias=True)
    body.update(extra)
    return body


def _register_role_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UnsupportedRoleError)
    async def role_error_handler(request: Request, exc: UnsupportedRoleError):
        logger.warning(
            "api.unsupported_role",
            extra={"path": request.url.path, "role": exc.role},
        )
        role = exc.role if exc.role is not None else "<missing>"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(
                f"Role '{role}' cannot be assigned; allowed roles are admin and user",
                errors=exc.to_dict(),
            ),
        )


def _register_input_error_handler(app: FastAPI) -> None:

    @app.exception_handler(InputValidationError)
    async def input_error_handler(request: Request, exc: InputValidationError):
        logger.info(
            "api.input_rejected",
            extra={"path": request.url.path, "schema": exc.schema, "fields": exc.fields},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(exc.message, errors=exc.to_dict()),
        )


def _register_integrity_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProjectionIntegrityError)
    async def integrity_error_handler(request: Request, exc: ProjectionIntegrityError):
        logger.error(
            f"ProjectionIntegrityError: {exc}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Something went wrong, please try again later"),
        )
