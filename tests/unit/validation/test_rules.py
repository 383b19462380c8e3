import dataclasses

import pytest

from accountshield.core.rules import (
    AssignableRole,
    Custom,
    EmailFormat,
    EqualsField,
    Length,
    Membership,
    Range,
    Required,
    Violation,
)
from accountshield.models.user import UserRole

NO_CONTEXT: dict = {}


@pytest.mark.unit
def test_required_rejects_empty_and_accepts_content():
    rule = Required("Name is required")
    assert rule.check("", NO_CONTEXT) == Violation(code="required", message="Name is required")
    assert rule.check("Ann", NO_CONTEXT) is None


@pytest.mark.unit
def test_required_honours_min_len():
    rule = Required("too short", min_len=3)
    assert rule.check("ab", NO_CONTEXT) is not None
    assert rule.check("abc", NO_CONTEXT) is None


@pytest.mark.unit
@pytest.mark.parametrize("value,ok", [("1234567", False), ("12345678", True), ("ünïcødé!", True)])
def test_length_min_counts_characters(value, ok):
    rule = Length("Password must be at least 8 characters", min=8)
    assert (rule.check(value, NO_CONTEXT) is None) is ok


@pytest.mark.unit
def test_length_max():
    rule = Length("too long", min=1, max=3)
    assert rule.check("abcd", NO_CONTEXT).code == "length"
    assert rule.check("abc", NO_CONTEXT) is None


@pytest.mark.unit
@pytest.mark.parametrize("value,ok", [(0, False), (1, True), (50, True), (51, False), (-3, False), (None, True)])
def test_range_bounds_inclusive_and_skips_none(value, ok):
    rule = Range("Limit must be between 1 and 50", min=1, max=50)
    assert (rule.check(value, NO_CONTEXT) is None) is ok


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,ok",
    [
        ("ann@example.com", True),
        ("first.last+tag@sub.example.org", True),
        ("ann@host", True),
        ("", False),
        ("ann", False),
        ("ann@", False),
        ("@example.com", False),
        ("ann@@example.com", False),
    ],
)
def test_email_format(value, ok):
    rule = EmailFormat("Email is invalid")
    assert (rule.check(value, NO_CONTEXT) is None) is ok


@pytest.mark.unit
def test_equals_field_compares_with_sibling():
    rule = EqualsField("Passwords do not match", other="password")
    assert rule.check("longpass1", {"password": "longpass1"}) is None
    violation = rule.check("longpass2", {"password": "longpass1"})
    assert violation == Violation(code="must_match", message="Passwords do not match")


@pytest.mark.unit
def test_equals_field_skips_when_sibling_unparsed():
    rule = EqualsField("Passwords do not match", other="password")
    assert rule.check("anything", {}) is None


@pytest.mark.unit
def test_membership_and_custom():
    member = Membership("not allowed", allowed={"a", "b"})
    assert member.check("a", NO_CONTEXT) is None
    assert member.check("c", NO_CONTEXT).code == "membership"

    even = Custom("must be even", predicate=lambda v: v % 2 == 0)
    assert even.check(4, NO_CONTEXT) is None
    assert even.check(3, NO_CONTEXT) == Violation(code="custom", message="must be even")


@pytest.mark.unit
def test_assignable_role_uses_its_own_code():
    rule = AssignableRole("Role must be either admin or user")
    assert rule.check(UserRole.ADMIN, NO_CONTEXT) is None
    assert rule.check(UserRole.USER, NO_CONTEXT) is None
    assert rule.check(UserRole.MODERATOR, NO_CONTEXT) == Violation(
        code="invalid_role", message="Role must be either admin or user"
    )


@pytest.mark.unit
def test_rules_are_immutable():
    rule = Required("Name is required")
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.message = "changed"  # type: ignore[misc]
