"""Typed intermediate representation for GROQ queries.

Every node is a frozen pydantic model tagged with a ``kind`` literal. The
builder converts raw dict/list input into these nodes, and the compilers
dispatch on the node class. Nested sequences are tuples so a node, once
built, can be shared between query states.
"""

from __future__ import annotations

from typing import Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from groqbuilder.constants import ALIAS_JOINER, Joiner

__all__ = (
    "FilterPair",
    "PairWithOperator",
    "Group",
    "Raw",
    "Nest",
    "FilterNode",
    "FieldName",
    "ProjectionPair",
    "FollowPair",
    "NestedGroup",
    "ProjectionNode",
)


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# -------------------
# Filter nodes
# -------------------


class FilterPair(_Node):
    """Equality test: ``key == value``."""

    kind: Literal["pair"] = "pair"
    key: str
    value: str


class PairWithOperator(_Node):
    """Comparison with an explicit operator, optionally negated."""

    kind: Literal["operator"] = "operator"
    key: str
    operator: str
    value: str
    negate: bool = False


class Group(_Node):
    """Parenthesized sub-expression joining its children with ``&&`` or ``||``."""

    kind: Literal["group"] = "group"
    children: Tuple[FilterNode, ...] = Field(min_length=1)
    join: Literal["&&", "||"] = Joiner.OR
    negate: bool = False


class Raw(_Node):
    """Literal expression text emitted as-is."""

    kind: Literal["raw"] = "raw"
    text: str


class Nest(_Node):
    """Function-style clause rendered as ``key(value)``.

    Kept for compatibility with older filter maps that carried a ``NEST``
    marker; new code should prefer ``Raw``.
    """

    kind: Literal["nest"] = "nest"
    key: str
    value: str


FilterNode = Union[FilterPair, PairWithOperator, Group, Raw, Nest]


# -------------------
# Projection nodes
# -------------------


class FieldName(_Node):
    kind: Literal["field"] = "field"
    name: str


class ProjectionPair(_Node):
    """``key:value`` alias; the value may itself be a projection node."""

    kind: Literal["pair"] = "pair"
    key: str
    value: Union[str, ProjectionNode]


class FollowPair(_Node):
    """``key->value`` when ``follow`` is set, ``key:value`` otherwise.

    A tuple value is rendered as a brace-wrapped sub-projection.
    """

    kind: Literal["follow"] = "follow"
    key: str
    value: Union[str, Tuple[ProjectionNode, ...]]
    follow: bool = True


class NestedGroup(_Node):
    """Sub-object projection published under ``alias``."""

    kind: Literal["nested"] = "nested"
    alias: str
    children: Tuple[ProjectionNode, ...]
    joiner: str = ALIAS_JOINER


ProjectionNode = Union[FieldName, ProjectionPair, FollowPair, NestedGroup]


Group.model_rebuild()
ProjectionPair.model_rebuild()
FollowPair.model_rebuild()
NestedGroup.model_rebuild()
