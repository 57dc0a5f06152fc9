"""Query state and the error value threaded through builder chains."""

from __future__ import annotations

from enum import Enum
from typing import NoReturn, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict

from groqbuilder.exceptions import (
    InvalidFilterError,
    InvalidLimitError,
    InvalidOrderError,
    InvalidProjectionError,
    InvalidQualifierError,
    ValidationError,
)

from .nodes import FilterNode, ProjectionNode

__all__ = ("QueryState", "QueryError", "QueryErrorKind", "QueryResult", "Limit")

Limit = Optional[Union[int, Tuple[int, int]]]


class QueryState(BaseModel):
    """Immutable snapshot of a query under construction.

    Each builder step returns a new instance via ``model_copy``; ``filters``
    and ``projections`` only ever grow.
    """

    model_config = ConfigDict(frozen=True)

    base_query: str = "*"
    filters: Tuple[FilterNode, ...] = ()
    projections: Tuple[ProjectionNode, ...] = ()
    scope_qualifier: str = ""
    order: Tuple[str, ...] = ()
    limit: Limit = None


class QueryErrorKind(str, Enum):
    FILTER = "filter"
    PROJECTION = "projection"
    QUALIFIER = "qualifier"
    ORDER = "order"
    LIMIT = "limit"


_EXCEPTIONS = {
    QueryErrorKind.FILTER: InvalidFilterError,
    QueryErrorKind.PROJECTION: InvalidProjectionError,
    QueryErrorKind.QUALIFIER: InvalidQualifierError,
    QueryErrorKind.ORDER: InvalidOrderError,
    QueryErrorKind.LIMIT: InvalidLimitError,
}


class QueryError(BaseModel):
    """Input error carried through a builder chain instead of being raised.

    Attributes:
        kind: Which builder step rejected its input
        message: Fixed, human-readable description of the accepted shapes
        state: Last good state before the failing call
    """

    model_config = ConfigDict(frozen=True)

    kind: QueryErrorKind
    message: str
    state: QueryState

    @property
    def exception_class(self) -> Type[ValidationError]:
        return _EXCEPTIONS[self.kind]

    def raise_error(self) -> NoReturn:
        raise self.exception_class(self.message)


QueryResult = Union[QueryState, QueryError]
