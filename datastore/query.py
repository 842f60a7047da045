"""Parameterized SQL statements for the readings table.

Statement text is assembled only from the fixed column names in
:mod:`datastore.schema`; every caller-supplied value travels as a bind
parameter. Placeholders are named ``:p0``, ``:p1``, ... in the order they
appear in the text, and :attr:`BoundStatement.params` holds the values in
that same order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from sqlalchemy import TextClause, text

from datastore.schema import (
    ID_COLUMN,
    LOCATION_COLUMN,
    NUMERIC_COLUMNS,
    READINGS_TABLE,
    RECORDED_AT_COLUMN,
)

TimeBound = Union[str, datetime]

SELECT_COLUMNS: Tuple[str, ...] = (
    ID_COLUMN,
    LOCATION_COLUMN,
    RECORDED_AT_COLUMN,
    *NUMERIC_COLUMNS.values(),
)
INSERT_COLUMNS: Tuple[str, ...] = (LOCATION_COLUMN, *NUMERIC_COLUMNS.values())


class Comparison(str, Enum):
    at_least = ">="
    at_most = "<="


@dataclass(frozen=True)
class Predicate:
    """A ``column <op> value`` condition whose value is always bound."""

    column: str
    operator: Comparison
    value: Any


@dataclass(frozen=True)
class BoundStatement:
    sql: str
    params: Tuple[Any, ...] = ()

    def bind_params(self) -> Dict[str, Any]:
        return {_placeholder_name(index): value for index, value in enumerate(self.params)}

    def to_clause(self) -> TextClause:
        return text(self.sql)


def _placeholder_name(index: int) -> str:
    return f"p{index}"


class _ParamCollector:
    def __init__(self) -> None:
        self.values: List[Any] = []

    def add(self, value: Any) -> str:
        placeholder = f":{_placeholder_name(len(self.values))}"
        self.values.append(value)
        return placeholder


@dataclass
class ReadingQuery:
    """Builder for the most-recent-first readings query."""

    predicates: List[Predicate] = field(default_factory=list)
    row_limit: Optional[int] = None

    def since(self, start: TimeBound) -> "ReadingQuery":
        self.predicates.append(Predicate(RECORDED_AT_COLUMN, Comparison.at_least, start))
        return self

    def until(self, end: TimeBound) -> "ReadingQuery":
        self.predicates.append(Predicate(RECORDED_AT_COLUMN, Comparison.at_most, end))
        return self

    def limit(self, count: int) -> "ReadingQuery":
        self.row_limit = count
        return self

    def build(self) -> BoundStatement:
        if self.row_limit is None:
            raise ValueError("A row limit is required to build the readings query.")

        collector = _ParamCollector()
        parts = [f"SELECT {', '.join(SELECT_COLUMNS)} FROM {READINGS_TABLE}"]

        if self.predicates:
            conditions = [
                f"{predicate.column} {predicate.operator.value} {collector.add(predicate.value)}"
                for predicate in self.predicates
            ]
            parts.append("WHERE " + " AND ".join(conditions))

        parts.append(f"ORDER BY {RECORDED_AT_COLUMN} DESC")
        parts.append(f"LIMIT {collector.add(self.row_limit)}")

        return BoundStatement(sql=" ".join(parts), params=tuple(collector.values))


def build_fetch_statement(
    limit: int,
    start: Optional[TimeBound] = None,
    end: Optional[TimeBound] = None,
) -> BoundStatement:
    """Readings between the optional inclusive bounds, newest first."""
    query = ReadingQuery()
    if start is not None:
        query.since(start)
    if end is not None:
        query.until(end)
    return query.limit(limit).build()


def build_insert_statement(zone_id: int, values: Sequence[float]) -> BoundStatement:
    """Insert of one reading; ``values`` follow the order of ``NUMERIC_COLUMNS``."""
    if len(values) != len(NUMERIC_COLUMNS):
        raise ValueError(
            f"Expected {len(NUMERIC_COLUMNS)} numeric values, got {len(values)}."
        )
    collector = _ParamCollector()
    placeholders = [collector.add(zone_id)]
    placeholders.extend(collector.add(value) for value in values)
    sql = (
        f"INSERT INTO {READINGS_TABLE} ({', '.join(INSERT_COLUMNS)}) "
        f"VALUES ({', '.join(placeholders)})"
    )
    return BoundStatement(sql=sql, params=tuple(collector.values))
