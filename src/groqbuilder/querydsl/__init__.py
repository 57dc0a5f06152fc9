"""Query DSL module.

Exports the functional builder steps, the fluent `Query` wrapper and the IR
node types. Rendering is handled by the `compilers` subpackage.
"""

from .builder import build, build_or_throw, draft_exclusion_clause, filter, new, project, qualify, set_limit, set_order
from .nodes import (
    FieldName,
    FilterNode,
    FilterPair,
    FollowPair,
    Group,
    Nest,
    NestedGroup,
    PairWithOperator,
    ProjectionNode,
    ProjectionPair,
    Raw,
)
from .query import Query
from .state import QueryError, QueryErrorKind, QueryResult, QueryState

__all__ = (
    "Query",
    "QueryState",
    "QueryError",
    "QueryErrorKind",
    "QueryResult",
    "new",
    "draft_exclusion_clause",
    "filter",
    "project",
    "qualify",
    "set_order",
    "set_limit",
    "build",
    "build_or_throw",
    "FilterNode",
    "FilterPair",
    "PairWithOperator",
    "Group",
    "Raw",
    "Nest",
    "ProjectionNode",
    "FieldName",
    "ProjectionPair",
    "FollowPair",
    "NestedGroup",
)
