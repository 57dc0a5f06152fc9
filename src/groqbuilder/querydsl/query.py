"""Fluent wrapper around the functional builder.

``Query`` holds the current ``QueryState`` or ``QueryError`` and exposes the
builder steps as chainable methods. Every method returns a new ``Query``, so
a partially built query can be reused as the base of several others.

Typical usage:

- Build: `Query.new().filter({"_type": "'post'"}).project(["title"]).build()`
- Raise on bad input: `Query.new().qualify(0).build_or_throw()`
"""

from __future__ import annotations

from typing import Any, Optional, Union

from . import builder
from .state import QueryError, QueryResult, QueryState


class Query:
    """Chainable GROQ query under construction."""

    def __init__(self, result: Optional[QueryResult] = None) -> None:
        self._result: QueryResult = result if result is not None else builder.new()

    @classmethod
    def new(cls, include_drafts: Optional[bool] = None, base_query: Optional[str] = None) -> "Query":
        return cls(builder.new(include_drafts=include_drafts, base_query=base_query))

    @property
    def result(self) -> QueryResult:
        return self._result

    @property
    def ok(self) -> bool:
        return isinstance(self._result, QueryState)

    @property
    def state(self) -> QueryState:
        """Current state; for a failed chain, the last good state."""
        if isinstance(self._result, QueryError):
            return self._result.state
        return self._result

    @property
    def error(self) -> Optional[QueryError]:
        return self._result if isinstance(self._result, QueryError) else None

    def filter(self, filters: Any) -> "Query":
        return Query(builder.filter(self._result, filters))

    def project(self, projections: Any) -> "Query":
        return Query(builder.project(self._result, projections))

    def qualify(self, qualifier: Any) -> "Query":
        return Query(builder.qualify(self._result, qualifier))

    def set_order(self, order: Any) -> "Query":
        return Query(builder.set_order(self._result, order))

    def set_limit(self, limit: Any) -> "Query":
        return Query(builder.set_limit(self._result, limit))

    def build(self) -> Union[str, QueryError]:
        return builder.build(self._result)

    def build_or_throw(self) -> str:
        return builder.build_or_throw(self._result)

    def __str__(self) -> str:
        result = self.build()
        if isinstance(result, QueryError):
            return f"<invalid query: {result.message}>"
        return result

    def __repr__(self) -> str:
        if isinstance(self._result, QueryError):
            return f"<Query error={self._result.message!r}>"
        return f"<Query: {self.build()}>"
