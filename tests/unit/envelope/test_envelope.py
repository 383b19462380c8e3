import pytest

from accountshield.services import (
    ERROR,
    FAIL,
    login_response,
    message_response,
    project,
    project_all,
    user_list_response,
    user_response,
)


@pytest.mark.unit
def test_single_user_envelope(ann):
    body = user_response(project(ann)).model_dump(by_alias=True, mode="json")
    assert body["status"] == "success"
    assert body["data"]["user"]["id"] == "u1"
    assert body["data"]["user"]["updatedAt"] == "2024-02-03T04:05:06Z"
    assert "password" not in body["data"]["user"]


@pytest.mark.unit
def test_list_envelope_counts_users(records):
    body = user_list_response(project_all(records)).model_dump(by_alias=True)
    assert body["status"] == "success"
    assert body["results"] == len(records)
    assert [u["name"] for u in body["users"]] == [r.name for r in records]


@pytest.mark.unit
def test_list_envelope_explicit_total(records):
    page = project_all(records[:2])
    body = user_list_response(page, results=42).model_dump()
    assert len(body["users"]) == 2
    assert body["results"] == 42


@pytest.mark.unit
def test_list_envelope_empty():
    assert user_list_response([]).model_dump() == {"status": "success", "users": [], "results": 0}


@pytest.mark.unit
@pytest.mark.parametrize("status", [ERROR, FAIL, "success"])
def test_message_envelope_passes_status_through(status):
    assert message_response("Password updated", status=status).model_dump() == {
        "status": status,
        "message": "Password updated",
    }


@pytest.mark.unit
def test_login_envelope():
    assert login_response("jwt.token.value").model_dump() == {"status": "success", "token": "jwt.token.value"}
