# Re-export primary service layer entry points for convenience.
from .projection import (
    project,
    project_all,
)
from .envelope import (
    SUCCESS,
    ERROR,
    FAIL,
    user_response,
    user_list_response,
    message_response,
    login_response,
)
from .paging import (
    PageWindow,
    resolve_paging,
)

__all__ = [
    # projection
    "project",
    "project_all",
    # envelope
    "SUCCESS",
    "ERROR",
    "FAIL",
    "user_response",
    "user_list_response",
    "message_response",
    "login_response",
    # paging
    "PageWindow",
    "resolve_paging",
]
