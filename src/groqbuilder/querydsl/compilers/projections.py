"""GROQ projection compiler.

Transforms projection IR nodes into the items of a GROQ projection object.
The braces and the single-field ``.field`` shorthand are the assembler's
business; this compiler only renders the comma separated items.
"""

from typing import Sequence

from groqbuilder.constants import ALIAS_JOINER, FOLLOW_JOINER

from ..nodes import FieldName, FollowPair, NestedGroup, ProjectionNode, ProjectionPair
from .base import BaseCompiler
from .utils import invalid_node

__all__ = (
    "GroqProjectionCompiler",
    "groq_projection_compiler",
)


class GroqProjectionCompiler(BaseCompiler):
    """Compile projection nodes into GROQ projection items."""

    SEPARATOR = ", "

    def compile(self, nodes: Sequence[ProjectionNode]) -> str:
        return self.SEPARATOR.join(self.to_expr(node) for node in nodes)

    def to_expr(self, node: ProjectionNode) -> str:
        if isinstance(node, FieldName):
            return node.name
        if isinstance(node, ProjectionPair):
            if isinstance(node.value, str):
                return f"{node.key}{ALIAS_JOINER}{node.value}"
            return f"{node.key}{ALIAS_JOINER}{self.to_expr(node.value)}"
        if isinstance(node, FollowPair):
            joiner = FOLLOW_JOINER if node.follow else ALIAS_JOINER
            if isinstance(node.value, str):
                return f"{node.key}{joiner}{node.value}"
            return f"{node.key}{joiner}{{{self.compile(node.value)}}}"
        if isinstance(node, NestedGroup):
            return f"{node.alias}{node.joiner}{{{self.compile(node.children)}}}"
        invalid_node("projection", node)


groq_projection_compiler = GroqProjectionCompiler()
