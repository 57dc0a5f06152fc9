"""Normalization of raw builder input into typed IR nodes.

Filters and projections can be written with plain dicts and lists, the way
GROQ reads:

- ``{"_type": "'post'"}`` is ``_type == 'post'``
- ``{"_id": ["in", "path('drafts.**')", NEGATE]}`` is ``!(_id in path('drafts.**'))``
- ``[{"a": "1"}, {"b": "2"}, {JOIN: "&&"}]`` is ``(a == 1 && b == 2)``
- ``["'name'", ["author", "name", FOLLOW]]`` is ``'name':author->name``

Every function here raises ``TypeError`` on a shape it does not recognise;
the builder turns that into a ``QueryError``.
"""

from typing import Any, Dict, List, Sequence, Tuple

from groqbuilder.constants import ALIAS_JOINER, FOLLOW, GROUP_JOINERS, JOIN, NEGATE, NEST, Joiner, Marker

from .compilers.utils import format_value, is_literal
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

__all__ = ("normalize_filter_input", "normalize_projection_input")

_FILTER_NODES = (FilterPair, PairWithOperator, Group, Raw, Nest)
_PROJECTION_NODES = (FieldName, ProjectionPair, FollowPair, NestedGroup)


# -------------------
# Filters
# -------------------


def normalize_filter_input(filters: Any) -> Tuple[FilterNode, ...]:
    """Convert the argument of ``filter()`` into top-level filter nodes.

    Accepts a ``[key, value]`` pair, a single map, a typed filter node, or a
    list of maps, nested lists (groups) and typed nodes.

    Raises:
        TypeError: If any part of the input has an unsupported shape
    """
    if isinstance(filters, _FILTER_NODES):
        return (filters,)
    if isinstance(filters, dict):
        return tuple(_map_entries(filters))
    if not isinstance(filters, (list, tuple)):
        raise TypeError(f"filters must be a map or a list, got {type(filters).__name__}")

    if len(filters) == 2 and isinstance(filters[0], str):
        key, value = filters
        return (_entry(key, value, nest=False),)

    nodes: List[FilterNode] = []
    for item in filters:
        if isinstance(item, dict):
            # Top-level clauses are already AND-ed, so a multi-key map flattens
            nodes.extend(_map_entries(item))
        else:
            nodes.append(_group_child(item))
    return tuple(nodes)


def _map_entries(mapping: Dict[Any, Any]) -> List[FilterNode]:
    nest = bool(mapping.get(NEST, False))
    nodes: List[FilterNode] = []
    for key, value in mapping.items():
        if isinstance(key, Marker):
            continue
        if not isinstance(key, str):
            raise TypeError(f"filter keys must be strings, got {type(key).__name__}")
        nodes.append(_entry(key, value, nest=nest))
    if not nodes:
        raise TypeError("filter map has no field entries")
    return nodes


def _entry(key: str, value: Any, nest: bool) -> FilterNode:
    if nest:
        if not is_literal(value):
            raise TypeError("nested filter values must be literals")
        return Nest(key=key, value=format_value(value))
    if isinstance(value, (list, tuple)):
        return _comparison(key, value)
    if is_literal(value):
        return FilterPair(key=key, value=format_value(value))
    raise TypeError(f"unsupported filter value for {key!r}: {type(value).__name__}")


def _comparison(key: str, parts: Sequence[Any]) -> PairWithOperator:
    if len(parts) < 2 or not isinstance(parts[0], str) or not is_literal(parts[1]):
        raise TypeError(f"comparison for {key!r} must be [operator, value, *markers]")
    operator, value, *opts = parts
    if not all(isinstance(opt, Marker) for opt in opts):
        raise TypeError(f"comparison options for {key!r} must be markers")
    return PairWithOperator(key=key, operator=operator, value=format_value(value), negate=NEGATE in opts)


def _group_child(item: Any) -> FilterNode:
    if isinstance(item, _FILTER_NODES):
        return item
    if isinstance(item, dict):
        entries = _map_entries(item)
        if len(entries) == 1:
            return entries[0]
        return Group(children=tuple(entries), join=Joiner.AND)
    if isinstance(item, (list, tuple)):
        return _group(item)
    raise TypeError(f"filter groups may only contain maps and lists, got {type(item).__name__}")


def _group(items: Sequence[Any]) -> Group:
    join = None
    negate = None
    children: List[FilterNode] = []
    for item in items:
        if isinstance(item, dict) and (JOIN in item or NEGATE in item):
            if any(not isinstance(k, Marker) for k in item):
                raise TypeError("join/negate markers must be given in their own map")
            if join is None and item.get(JOIN):
                join = item[JOIN]
            if negate is None and item.get(NEGATE):
                negate = True
            continue
        children.append(_group_child(item))

    join = join or Joiner.OR
    if join not in GROUP_JOINERS:
        raise TypeError(f"group join must be one of {GROUP_JOINERS}, got {join!r}")
    if not children:
        raise TypeError("filter group has no clauses")
    return Group(children=tuple(children), join=join, negate=bool(negate))


# -------------------
# Projections
# -------------------


def normalize_projection_input(projections: Any) -> Tuple[ProjectionNode, ...]:
    """Convert the argument of ``project()`` into projection nodes.

    Lists are taken element-wise; a string, a map or a typed node is a single
    item.

    Raises:
        TypeError: If the input or any item has an unsupported shape
    """
    if isinstance(projections, (list, tuple)):
        items: Sequence[Any] = projections
    elif isinstance(projections, (str, dict) + _PROJECTION_NODES):
        items = [projections]
    else:
        raise TypeError(f"projections must be a string, list or map, got {type(projections).__name__}")

    nodes: List[ProjectionNode] = []
    for item in items:
        nodes.extend(_projection_items(item))
    return tuple(nodes)


def _projection_items(item: Any) -> List[ProjectionNode]:
    if isinstance(item, _PROJECTION_NODES):
        return [item]
    if isinstance(item, str):
        return [FieldName(name=item)]
    if isinstance(item, dict):
        return _nested_groups(item)
    if isinstance(item, (list, tuple)):
        return [_projection_pair(item)]
    raise TypeError(f"unsupported projection item: {type(item).__name__}")


def _projection_pair(item: Sequence[Any]) -> ProjectionNode:
    if len(item) not in (2, 3) or not isinstance(item[0], str):
        raise TypeError("projection pairs must be [key, value] or [key, value, FOLLOW]")

    if len(item) == 2:
        key, value = item
        if isinstance(value, _PROJECTION_NODES):
            return ProjectionPair(key=key, value=value)
        if isinstance(value, (list, tuple)):
            return ProjectionPair(key=key, value=_projection_pair(value))
        if is_literal(value):
            return ProjectionPair(key=key, value=format_value(value))
        raise TypeError(f"unsupported projection value for {key!r}")

    key, value, flag = item
    follow = flag is FOLLOW
    if isinstance(value, (list, tuple)):
        children: List[ProjectionNode] = []
        for child in value:
            children.extend(_projection_items(child))
        return FollowPair(key=key, value=tuple(children), follow=follow)
    if is_literal(value):
        return FollowPair(key=key, value=format_value(value), follow=follow)
    raise TypeError(f"unsupported projection value for {key!r}")


def _nested_groups(mapping: Dict[Any, Any]) -> List[ProjectionNode]:
    joiner = mapping.get(JOIN) or ALIAS_JOINER
    if not isinstance(joiner, str):
        raise TypeError("projection join must be a string")

    groups: List[ProjectionNode] = []
    for alias, value in mapping.items():
        if isinstance(alias, Marker):
            continue
        if not isinstance(alias, str):
            raise TypeError(f"projection aliases must be strings, got {type(alias).__name__}")
        items = value if isinstance(value, (list, tuple)) else [value]
        children: List[ProjectionNode] = []
        for child in items:
            children.extend(_projection_items(child))
        groups.append(NestedGroup(alias=alias, children=tuple(children), joiner=joiner))
    if not groups:
        raise TypeError("projection map has no aliased entries")
    return groups
