# app/schemas/common.py
"""Request bodies shared by every table endpoint."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Union

from app.services.query_filters import Operator

# A single key value, or {column: value} for composite-key tables
TableKey = Union[str, Dict[str, str]]


class CamelModel(BaseModel):
    """Python snake_case fields, camelCase on the wire (matches column names)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UpdateRequest(CamelModel):
    key: TableKey
    attribute: str
    new_value: Any = None


class DeleteRequest(CamelModel):
    key: TableKey


class FilterClause(CamelModel):
    column: str
    operator: Operator = Operator.EQ
    value: Any = None


class SelectRequest(CamelModel):
    filters: List[FilterClause] = []
