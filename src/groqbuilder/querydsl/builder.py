"""Functional GROQ query builder.

Each step takes the previous result (a ``QueryState`` or a ``QueryError``)
and returns a new one. Errors are values: once a step rejects its input,
every later step hands the same error along untouched, and only
``build_or_throw`` turns it into an exception.

Typical usage:

    state = new()
    state = filter(state, {"_type": "'post'"})
    state = project(state, ["title", "body"])
    state = qualify(state, "[0]")
    build(state)
    # "*[!(_id in path('drafts.**')) && _type == 'post']{title, body}[0]"
"""

from typing import Any, Optional, Sequence, Tuple, Union

from groqbuilder.constants import ErrorMessage
from groqbuilder.logger import Logger
from groqbuilder.settings import settings

from .compilers.filters import groq_filter_compiler
from .compilers.projections import groq_projection_compiler
from .inputs import normalize_filter_input, normalize_projection_input
from .nodes import FieldName, FilterNode, PairWithOperator, ProjectionNode
from .state import Limit, QueryError, QueryErrorKind, QueryResult, QueryState

__all__ = (
    "new",
    "draft_exclusion_clause",
    "filter",
    "project",
    "qualify",
    "set_order",
    "set_limit",
    "build",
    "build_or_throw",
)

logger = Logger("builder")


def new(include_drafts: Optional[bool] = None, base_query: Optional[str] = None) -> QueryState:
    """Start a query.

    Args:
        include_drafts: Keep draft documents in the results. Defaults to
            ``settings.GROQ_INCLUDE_DRAFTS``.
        base_query: Source expression the query starts from. Defaults to
            ``settings.GROQ_BASE_QUERY`` (``"*"``).

    Unless drafts are included or the base query is empty, the first filter
    clause excludes documents under the drafts path.
    """
    if include_drafts is None:
        include_drafts = settings.GROQ_INCLUDE_DRAFTS
    if base_query is None:
        base_query = settings.GROQ_BASE_QUERY

    filters: Tuple[FilterNode, ...] = ()
    if not include_drafts and base_query != "":
        filters = (draft_exclusion_clause(),)
    return QueryState(base_query=base_query, filters=filters)


def draft_exclusion_clause(path: Optional[str] = None) -> PairWithOperator:
    """Return the ``!(_id in path('<drafts path>'))`` clause."""
    return PairWithOperator(
        key="_id",
        operator="in",
        value=f"path('{path or settings.GROQ_DRAFTS_PATH}')",
        negate=True,
    )


def filter(query: QueryResult, filters: Any) -> QueryResult:
    """Append filter clauses; top-level clauses are AND-ed together.

    Accepts a ``[key, value]`` pair, a map, a typed filter node, or a list of
    maps, nested lists and typed nodes. Nested lists become parenthesized
    groups joined by ``||`` unless a ``{JOIN: "&&"}`` marker says otherwise;
    a ``{NEGATE: True}`` marker negates the group.
    """
    if _is_error(query):
        return query
    try:
        nodes = normalize_filter_input(filters)
    except (TypeError, ValueError):
        return _reject(query, QueryErrorKind.FILTER, ErrorMessage.FILTER, filters)
    return query.model_copy(update={"filters": query.filters + nodes})


def project(query: QueryResult, projections: Any) -> QueryResult:
    """Append projection items.

    A list is appended element-wise; a string, map or typed node is one item.
    Use ``[key, value]`` to alias, ``[key, value, FOLLOW]`` to dereference and
    ``{alias: [...]}`` for a nested object.
    """
    if _is_error(query):
        return query
    try:
        nodes = normalize_projection_input(projections)
    except (TypeError, ValueError):
        return _reject(query, QueryErrorKind.PROJECTION, ErrorMessage.PROJECTION, projections)
    return query.model_copy(update={"projections": query.projections + nodes})


def qualify(query: QueryResult, qualifier: Any) -> QueryResult:
    """Set the raw suffix appended after the projection, e.g. ``"[0]"``."""
    if _is_error(query):
        return query
    if not isinstance(qualifier, str):
        return _reject(query, QueryErrorKind.QUALIFIER, ErrorMessage.QUALIFIER, qualifier)
    return query.model_copy(update={"scope_qualifier": qualifier})


def set_order(query: QueryResult, order: Any) -> QueryResult:
    """Replace the ordering terms, e.g. ``"_createdAt desc"`` or a list of terms."""
    if _is_error(query):
        return query
    if isinstance(order, str):
        terms: Tuple[str, ...] = (order,)
    elif isinstance(order, (list, tuple)) and all(isinstance(term, str) for term in order):
        terms = tuple(order)
    else:
        return _reject(query, QueryErrorKind.ORDER, ErrorMessage.ORDER, order)
    return query.model_copy(update={"order": terms})


def set_limit(query: QueryResult, limit: Any) -> QueryResult:
    """Slice the results.

    ``n`` keeps the first ``n`` documents and ``(offset, count)`` keeps
    ``count`` documents starting at ``offset``. ``0`` and ``(0, 0)`` leave
    the query unchanged.
    """
    if _is_error(query):
        return query
    if _is_int(limit):
        if limit == 0:
            return query
        if limit > 0:
            return query.model_copy(update={"limit": limit})
    elif isinstance(limit, (list, tuple)) and len(limit) == 2 and all(_is_int(x) for x in limit):
        offset, count = limit
        if offset == 0 and count == 0:
            return query
        if offset >= 0 and count > 0:
            return query.model_copy(update={"limit": (offset, count)})
    return _reject(query, QueryErrorKind.LIMIT, ErrorMessage.LIMIT, limit)


def build(query: QueryResult) -> Union[str, QueryError]:
    """Compile the query into a GROQ string, or return the carried error."""
    if _is_error(query):
        return query
    query_str = _build_filters(query.base_query, query.filters)
    query_str = _build_projections(query_str, query.projections)
    query_str = query_str + query.scope_qualifier
    query_str = _build_order(query_str, query.order)
    query_str = _build_limit(query_str, query.limit)
    logger.debug("Built query=%s", query_str)
    return query_str


def build_or_throw(query: QueryResult) -> str:
    """Compile the query into a GROQ string.

    Raises:
        ValidationError: The subclass matching the failed step, with the
            carried error message
    """
    result = build(query)
    if isinstance(result, QueryError):
        result.raise_error()
    return result


# -------------------
# Helpers
# -------------------


def _is_error(query: Any) -> bool:
    if isinstance(query, QueryError):
        return True
    if isinstance(query, QueryState):
        return False
    raise TypeError(f"query must be a QueryState or QueryError, got {type(query).__name__}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _reject(query: QueryState, kind: QueryErrorKind, message: str, value: Any) -> QueryError:
    logger.warning("Rejected %s input of type %s", kind.value, type(value).__name__)
    return QueryError(kind=kind, message=message, state=query)


def _build_filters(query_str: str, filters: Sequence[FilterNode]) -> str:
    filters_str = groq_filter_compiler.compile(filters)
    if not filters_str:
        return query_str
    return f"{query_str}[{filters_str}]"


def _build_projections(query_str: str, projections: Sequence[ProjectionNode]) -> str:
    if not projections:
        return query_str
    # A lone bare field after a filter reads as attribute access: *[...].title
    if len(projections) == 1 and isinstance(projections[0], FieldName) and len(query_str) > 1:
        return f"{query_str}.{projections[0].name}"
    return f"{query_str}{{{groq_projection_compiler.compile(projections)}}}"


def _build_order(query_str: str, order: Sequence[str]) -> str:
    if not order:
        return query_str
    return f"{query_str} | order({', '.join(order)})"


def _build_limit(query_str: str, limit: Limit) -> str:
    if limit is None:
        return query_str
    if isinstance(limit, tuple):
        offset, count = limit
        return f"{query_str} [{offset}...{offset + count}]"
    return f"{query_str} [0...{limit}]"
