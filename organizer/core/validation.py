"""Input Validation — the identifier-format predicate and parent-reference checks.

Invariants:
    - UID_PATTERN: 1-32 chars, alphanumeric first/last, hyphens allowed inside
    - check_uid raises ValidationError("invalid uid"); it never touches IO
    - check_parent_id rejects ROOT_PARENT as a stored parent value
    - check_parent_update forbids parent_id together with clear_parent

Design Decisions:
    - Validator is an object (UidValidator protocol), injected into façades
      instead of a module-level matcher, so tests can swap it
"""

import re

from organizer.core.domain_types import ROOT_PARENT
from organizer.core.errors import ErrorContext, ValidationError
from organizer.core.repository_protocols import UidValidator


UID_PATTERN: str = r"^[a-zA-Z0-9]([a-zA-Z0-9-]{0,30}[a-zA-Z0-9])?$"


class RegexUidValidator:
    """Default UidValidator: full-match against a compiled regex."""

    def __init__(self, pattern: str = UID_PATTERN):
        self._matcher = re.compile(pattern)

    def is_valid(self, uid: str) -> bool:
        return isinstance(uid, str) and self._matcher.fullmatch(uid) is not None


def check_uid(validator: UidValidator, uid: str, entity: str) -> None:
    """Raise ValidationError unless uid satisfies the validator."""
    if not validator.is_valid(uid):
        raise ValidationError(
            "invalid uid", "uid",
            ErrorContext(entity=entity, uid=uid if isinstance(uid, str) else None),
        )


def check_parent_id(parent_id: int | None, entity: str) -> None:
    """Zero is the root sentinel of filters, never a real parent id."""
    if parent_id is not None and parent_id == ROOT_PARENT:
        raise ValidationError(
            "parent_id 0 is reserved; use clear_parent to make a root",
            "parent_id", ErrorContext(entity=entity),
        )


def check_parent_update(
    parent_id: int | None, clear_parent: bool, entity: str, entity_id: int,
) -> None:
    """An update either sets a parent or clears it, never both."""
    check_parent_id(parent_id, entity)
    if clear_parent and parent_id is not None:
        raise ValidationError(
            "parent_id and clear_parent are mutually exclusive",
            "clear_parent", ErrorContext(entity=entity, entity_id=entity_id),
        )
