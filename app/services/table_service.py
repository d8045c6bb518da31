# app/services/table_service.py
"""
Generic table access service.

One subclass per entity sets `model` (a declarative class from app.models)
and optionally `seeds`. Every operation borrows a pooled connection through
ConnectionPool.run() and builds parameterised SQLAlchemy Core statements.

Result conventions (callers rely on these):
  - mutations return True only if at least one row was affected, False on
    any validation or driver error
  - fixed-shape reads return a list of rows (each a list of column values in
    schema order, dates as "YYYY-MM-DD"), or [] on driver error
  - unknown column / operator names raise InvalidQueryError
"""

import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union

from sqlalchemy import Date, Float, Integer, Numeric, String, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from app.database import ConnectionPool
from app.services.query_filters import Filter, InvalidQueryError, build_where, resolve_column
from app.utils.logger import get_logger

logger = get_logger(__name__)

Key = Union[str, Sequence[str], Mapping[str, Any]]

CLOCK_TIME = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def render_value(value):
    """Convert a DB value to its JSON-friendly boundary form."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def render_row(row) -> list:
    return [render_value(v) for v in row]


class TableService:
    model = None
    seeds: Sequence[Dict[str, Any]] = ()
    # "HH:MM" columns, checked on insert and update
    clock_columns: Sequence[str] = ()

    def __init__(self, pool: ConnectionPool):
        self.pool = pool
        self.table = self.model.__table__
        self.label = self.table.name.replace("table", "").upper()

    # ── Schema ────────────────────────────────────────────────────────────

    @property
    def key_columns(self):
        return list(self.table.primary_key.columns)

    def dependent_tables(self):
        """Tables holding a foreign key into this one, directly or transitively. Children first."""
        ordered = self.table.metadata.sorted_tables
        found = set()
        frontier = [self.table]
        while frontier:
            parent = frontier.pop()
            for other in ordered:
                if other is self.table or other in found:
                    continue
                if any(fk.column.table is parent for fk in other.foreign_keys):
                    found.add(other)
                    frontier.append(other)
        return [t for t in reversed(ordered) if t in found]

    def initialize(self) -> bool:
        """Drop dependents and this table, recreate it, insert seed rows."""
        def work(conn):
            for table in self.dependent_tables() + [self.table]:
                try:
                    # a failed DROP must not abort the outer transaction
                    with conn.begin_nested():
                        table.drop(conn, checkfirst=True)
                except SQLAlchemyError as e:
                    logger.info(f"[{self.label}] could not drop {table.name}, proceeding: {e}")
            self.table.create(conn)
            for seed in self.seeds:
                conn.execute(insert(self.table).values(**self.prepare(seed)))

        try:
            self.pool.run(work)
        except (SQLAlchemyError, ValueError) as e:
            logger.warning(f"[{self.label}] initialize failed: {e}")
            return False
        logger.info(f"[{self.label}] table ready with {len(self.seeds)} seed row(s)")
        return True

    # ── Coercion & validation ─────────────────────────────────────────────

    def coerce(self, column, value, enforce_length: bool = True):
        """
        Convert a boundary value to the column's Python type. Raises ValueError.
        Filters pass enforce_length=False: an over-long comparison value simply matches nothing.
        """
        if value is None:
            return None
        col_type = column.type
        if isinstance(col_type, Date):
            if isinstance(value, datetime):
                return value.date()
            if isinstance(value, date):
                return value
            return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
        if isinstance(col_type, Integer):
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(f"{column.name} expects a whole number, got {value}")
            return int(value)
        if isinstance(col_type, (Float, Numeric)):
            return float(value)
        if isinstance(col_type, String):
            value = str(value)
            if enforce_length and col_type.length is not None and len(value) > col_type.length:
                raise ValueError(f"{column.name} is limited to {col_type.length} characters")
            return value
        return value

    def validate(self, values: Dict[str, Any]):
        """Entity-level checks on coerced values. Raise ValueError to reject."""
        for name in self.clock_columns:
            value = values.get(name)
            if value is not None and not CLOCK_TIME.match(value):
                raise ValueError(f"{name} must be HH:MM, got '{value}'")

    def prepare(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """Resolve, coerce and validate a full row for INSERT."""
        prepared = {}
        for name, value in values.items():
            column = resolve_column(self.table, name)
            prepared[name] = self.coerce(column, value)
        for column in self.table.columns:
            if not column.nullable and prepared.get(column.name) is None:
                raise ValueError(f"{column.name} is required")
        self.validate(prepared)
        return prepared

    def key_clause(self, key: Key):
        columns = self.key_columns
        if isinstance(key, Mapping):
            missing = [c.name for c in columns if c.name not in key]
            if missing:
                raise InvalidQueryError(f"Key for {self.table.name} is missing {', '.join(missing)}")
            values = [key[c.name] for c in columns]
        elif isinstance(key, (list, tuple)):
            values = list(key)
        else:
            values = [key]
        if len(values) != len(columns):
            names = ", ".join(c.name for c in columns)
            raise InvalidQueryError(f"Key for {self.table.name} needs {len(columns)} value(s): {names}")
        return build_where(self.table, [Filter.of(c.name, "=", v) for c, v in zip(columns, values)])

    # ── Operations ────────────────────────────────────────────────────────

    def insert(self, values: Mapping[str, Any]) -> bool:
        try:
            row = self.prepare(values)
            affected = self.pool.run(lambda conn: conn.execute(insert(self.table).values(**row)).rowcount)
        except InvalidQueryError:
            raise
        except (SQLAlchemyError, ValueError, TypeError) as e:
            logger.warning(f"[{self.label}] insert failed: {e}")
            return False
        return bool(affected and affected > 0)

    def fetch_all(self) -> List[list]:
        stmt = select(*self.table.columns).order_by(*self.key_columns)
        return self._fetch(stmt, "fetch")

    def select_where(self, filters: Iterable[Filter]) -> List[list]:
        """Rows matching every filter. Bad column/operator/value raises InvalidQueryError."""
        where = build_where(
            self.table, filters, lambda column, value: self.coerce(column, value, enforce_length=False)
        )
        stmt = select(*self.table.columns).where(where).order_by(*self.key_columns)
        return self._fetch(stmt, "select")

    def update(self, key: Key, attribute: str, new_value) -> bool:
        column = resolve_column(self.table, attribute)
        where = self.key_clause(key)

        def work(conn):
            current = conn.execute(select(*self.table.columns).where(where)).mappings().first()
            if current is None:
                return 0
            # rules spanning several columns see the row as it will be stored
            row = dict(current)
            row[column.name] = value
            self.validate(row)
            return conn.execute(update(self.table).where(where).values({column.name: value})).rowcount

        try:
            value = self.coerce(column, new_value)
            if value is None and not column.nullable:
                raise ValueError(f"{column.name} is required")
            affected = self.pool.run(work)
        except (SQLAlchemyError, ValueError, TypeError) as e:
            logger.warning(f"[{self.label}] update of {attribute} failed: {e}")
            return False
        return bool(affected and affected > 0)

    def delete(self, key: Key) -> bool:
        where = self.key_clause(key)
        try:
            affected = self.pool.run(lambda conn: conn.execute(delete(self.table).where(where)).rowcount)
        except SQLAlchemyError as e:
            logger.warning(f"[{self.label}] delete failed: {e}")
            return False
        return bool(affected and affected > 0)

    def count(self) -> int:
        try:
            return self.pool.run(
                lambda conn: conn.execute(select(func.count()).select_from(self.table)).scalar_one()
            )
        except SQLAlchemyError as e:
            logger.warning(f"[{self.label}] count failed: {e}")
            return -1

    def _fetch(self, stmt, action: str) -> List[list]:
        try:
            rows = self.pool.run(lambda conn: conn.execute(stmt).all())
        except SQLAlchemyError as e:
            logger.warning(f"[{self.label}] {action} failed: {e}")
            return []
        return [render_row(row) for row in rows]
