"""
groqbuilder assembles GROQ document queries from plain Python values.

The `querydsl` subpackage holds the builder, the typed query IR and the
compilers; this top-level package re-exports the everyday entry points.
"""

from .constants import FOLLOW, JOIN, NEGATE, NEST, Marker
from .exceptions import CompilerError, GroqBuilderError, ValidationError
from .querydsl import (
    Query,
    QueryError,
    QueryState,
    build,
    build_or_throw,
    filter,
    new,
    project,
    qualify,
    set_limit,
    set_order,
)

__version__ = "0.1.0"

__all__ = [
    "Query",
    "QueryState",
    "QueryError",
    "new",
    "filter",
    "project",
    "qualify",
    "set_order",
    "set_limit",
    "build",
    "build_or_throw",
    "Marker",
    "FOLLOW",
    "JOIN",
    "NEGATE",
    "NEST",
    "GroqBuilderError",
    "ValidationError",
    "CompilerError",
]
