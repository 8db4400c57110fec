"""Clause Builder — declarative WHERE / SET composition from optional-field structs.

Invariants:
    - A FilterRule contributes a clause only when its condition holds for the
      struct's field value; None never contributes
    - member_of rules treat an empty list as absent
    - parent_of maps ROOT_PARENT to `IS NULL`, any other value to equality
    - compose_values only emits assignments for non-None fields
    - Values are always bound parameters, never interpolated into SQL text
    - Rows with an unknown row_status decode to StoreError("scan"), not ValueError

Design Decisions:
    - Rules are data (field name, condition, clause factory): one table per
      entity type, one composition loop shared by every driver
    - Callers AND the returned clauses; an empty list means "every row"
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from sqlalchemy import ColumnElement
from sqlalchemy.orm import InstrumentedAttribute

from organizer.core.domain_types import ROOT_PARENT, RowStatus
from organizer.core.errors import StoreError


def _is_present(value: Any) -> bool:
    return value is not None


def _is_non_empty(value: Any) -> bool:
    return bool(value)


def _identity(value: Any) -> Any:
    return value


def encode_enum(value: Any) -> Any:
    """Store str Enums by value."""
    return getattr(value, "value", value)


@dataclass(frozen=True)
class FilterRule:
    """(condition, clause, bound value) for one optional find field."""
    field: str
    clause: Callable[[Any], ColumnElement[bool]]
    applies: Callable[[Any], bool] = _is_present


@dataclass(frozen=True)
class SetRule:
    """Assignment for one optional update field."""
    field: str
    column: InstrumentedAttribute
    encode: Callable[[Any], Any] = _identity


# ─── Filter factories ────────────────────────────────────────────

def equals(
    field: str, column: InstrumentedAttribute,
    encode: Callable[[Any], Any] = _identity,
) -> FilterRule:
    return FilterRule(field, lambda v: column == encode(v))


def member_of(field: str, column: InstrumentedAttribute) -> FilterRule:
    return FilterRule(field, lambda v: column.in_(list(v)), _is_non_empty)


def parent_of(field: str, column: InstrumentedAttribute) -> FilterRule:
    def clause(value: int) -> ColumnElement[bool]:
        if value == ROOT_PARENT:
            return column.is_(None)
        return column == value
    return FilterRule(field, clause)


# ─── Composition ─────────────────────────────────────────────────

def compose_where(
    rules: Iterable[FilterRule], find: object,
) -> list[ColumnElement[bool]]:
    """Clauses for every rule whose condition holds on `find`."""
    clauses = []
    for rule in rules:
        value = getattr(find, rule.field)
        if rule.applies(value):
            clauses.append(rule.clause(value))
    return clauses


def compose_values(rules: Sequence[SetRule], update: object) -> dict[str, Any]:
    """Column assignments for every non-None field on `update`."""
    values = {}
    for rule in rules:
        value = getattr(update, rule.field)
        if value is not None:
            values[rule.column.key] = rule.encode(value)
    return values


# ─── Row decoding ────────────────────────────────────────────────

def decode_row_status(value: Any) -> RowStatus:
    """Row status text -> RowStatus; unknown text is a malformed row."""
    try:
        return RowStatus(value)
    except ValueError as e:
        raise StoreError(f"unknown row_status {value!r}", "scan", e) from e


def decode_parent_id(value: Any) -> int | None:
    """Nullable integer column -> optional parent id."""
    return None if value is None else int(value)
