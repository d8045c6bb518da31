# app/services/query_filters.py
"""
Typed filter model for table queries.

Callers never hand SQL text to a table service. They name columns, which are
resolved against the table's own column list, and pick an operator from a
fixed set. Values are always bound parameters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence

from sqlalchemy import Column, Table, and_, true


class InvalidQueryError(ValueError):
    """Caller referenced an unknown column/operator or gave an unusable value."""


class Operator(str, Enum):
    EQ = "="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    LIKE = "like"

    @classmethod
    def parse(cls, value) -> "Operator":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(op.value for op in cls)
            raise InvalidQueryError(f"Unknown operator '{value}'. Allowed: {allowed}")


@dataclass(frozen=True)
class Filter:
    column: str
    operator: Operator
    value: Any

    @classmethod
    def of(cls, column: str, operator="=", value=None) -> "Filter":
        return cls(column=column, operator=Operator.parse(operator), value=value)


def resolve_column(table: Table, name: str) -> Column:
    """Look a caller-supplied column name up in the table's allow-list."""
    if name not in table.c:
        allowed = ", ".join(table.c.keys())
        raise InvalidQueryError(f"Unknown column '{name}' for {table.name}. Allowed: {allowed}")
    return table.c[name]


def resolve_columns(table: Table, names: Sequence[str]) -> List[Column]:
    if not names:
        raise InvalidQueryError(f"No columns selected from {table.name}")
    return [resolve_column(table, name) for name in names]


def _comparison(column: Column, operator: Operator, value):
    if value is None:
        if operator is Operator.EQ:
            return column.is_(None)
        if operator is Operator.NE:
            return column.is_not(None)
        raise InvalidQueryError(f"Operator '{operator.value}' cannot compare {column.name} with null")

    if operator is Operator.EQ:
        return column == value
    if operator is Operator.NE:
        return column != value
    if operator is Operator.LT:
        return column < value
    if operator is Operator.LE:
        return column <= value
    if operator is Operator.GT:
        return column > value
    if operator is Operator.GE:
        return column >= value
    return column.like(value)


def build_where(
    table: Table,
    filters: Iterable[Filter],
    coerce: Optional[Callable[[Column, Any], Any]] = None,
):
    """
    AND together every filter into one parameterised clause.
    coerce(column, value) converts wire values (e.g. ISO dates) to column types;
    a ValueError from it is reported as InvalidQueryError.
    """
    clauses = []
    for f in filters:
        column = resolve_column(table, f.column)
        value = f.value
        if coerce is not None and value is not None and f.operator is not Operator.LIKE:
            try:
                value = coerce(column, value)
            except (TypeError, ValueError) as e:
                raise InvalidQueryError(f"Bad value for {column.name}: {e}")
        clauses.append(_comparison(column, f.operator, value))
    return and_(true(), *clauses)
