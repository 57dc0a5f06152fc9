"""
Markers and fixed strings shared by the builder and the compilers.
"""

from enum import Enum


class Marker(Enum):
    """Control markers mixed into raw filter/projection input.

    Members are plain enum values rather than strings so they never collide
    with a document field literally named ``join`` or ``follow``.
    """

    JOIN = "join"
    NEGATE = "negate"
    NEST = "nest"
    FOLLOW = "follow"


JOIN = Marker.JOIN
NEGATE = Marker.NEGATE
NEST = Marker.NEST
FOLLOW = Marker.FOLLOW


class Joiner:
    AND = "&&"
    OR = "||"


GROUP_JOINERS = (Joiner.AND, Joiner.OR)

ALIAS_JOINER = ":"
FOLLOW_JOINER = "->"


class ErrorMessage:
    FILTER = "Filters must be a list of maps or nested lists of maps"
    PROJECTION = "Projections must be a string, list of strings, or nested maps"
    QUALIFIER = "Qualifier must be a string"
    ORDER = "Order must be a string or a list of strings"
    LIMIT = "Limit must be a positive integer or a tuple of {offset, limit} where both are > 0"
