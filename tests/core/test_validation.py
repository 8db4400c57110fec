"""Input Validation — tests for the uid predicate and parent-reference checks.

Tests cover:
    - RegexUidValidator accepts 1-32 char alphanumeric/hyphen uids
    - Rejects leading/trailing hyphens, overlong, empty, whitespace, non-str
    - Trailing newline is not accepted as end-of-string
    - check_uid raises ValidationError("invalid uid") with field "uid"
    - check_parent_id rejects the root sentinel, accepts None and real ids
    - check_parent_update forbids parent_id combined with clear_parent
"""

import pytest

from organizer.core.errors import ErrorCategory, ValidationError
from organizer.core.validation import (
    UID_PATTERN, RegexUidValidator,
    check_parent_id, check_parent_update, check_uid,
)


# ─── RegexUidValidator ───────────────────────────────────────────

@pytest.mark.parametrize("uid", [
    "a", "Z9", "work", "side-projects", "a-b-c", "x" * 32, "2024-q1",
])
def test_validator_accepts_well_formed_uids(uid):
    assert RegexUidValidator().is_valid(uid)


@pytest.mark.parametrize("uid", [
    "", "-lead", "trail-", "x" * 33, "has space", "under_score", "dot.ted",
    "abc\n", "ümlaut",
])
def test_validator_rejects_malformed_uids(uid):
    assert not RegexUidValidator().is_valid(uid)


def test_validator_rejects_non_string():
    assert not RegexUidValidator().is_valid(None)
    assert not RegexUidValidator().is_valid(42)


def test_validator_accepts_custom_pattern():
    validator = RegexUidValidator(r"^[a-z]{3}$")
    assert validator.is_valid("abc")
    assert not validator.is_valid("abcd")


def test_default_pattern_is_exported():
    assert RegexUidValidator(UID_PATTERN).is_valid("inbox")


# ─── check_uid ───────────────────────────────────────────────────

def test_check_uid_passes_valid_uid():
    check_uid(RegexUidValidator(), "inbox", "area")


def test_check_uid_raises_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        check_uid(RegexUidValidator(), "bad uid", "folder")
    err = exc_info.value
    assert err.message == "invalid uid"
    assert err.field == "uid"
    assert err.category == ErrorCategory.VALIDATION
    assert err.context.entity == "folder"
    assert err.context.uid == "bad uid"


# ─── parent checks ───────────────────────────────────────────────

def test_check_parent_id_accepts_none_and_real_ids():
    check_parent_id(None, "area")
    check_parent_id(7, "area")


def test_check_parent_id_rejects_root_sentinel():
    with pytest.raises(ValidationError) as exc_info:
        check_parent_id(0, "area")
    assert exc_info.value.field == "parent_id"


def test_check_parent_update_rejects_parent_with_clear():
    with pytest.raises(ValidationError) as exc_info:
        check_parent_update(5, True, "folder", 1)
    assert exc_info.value.field == "clear_parent"
    assert exc_info.value.context.entity_id == 1


def test_check_parent_update_allows_either_alone():
    check_parent_update(5, False, "folder", 1)
    check_parent_update(None, True, "folder", 1)
    check_parent_update(None, False, "folder", 1)


def test_check_parent_update_rejects_root_sentinel():
    with pytest.raises(ValidationError):
        check_parent_update(0, False, "area", 1)
