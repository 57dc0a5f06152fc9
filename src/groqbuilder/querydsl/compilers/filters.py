"""GROQ filter compiler.

Transforms filter IR nodes into the boolean expression placed between the
brackets of a GROQ filter clause.

Rendering rules:
- Top-level nodes form an implicit AND group: ``a && b``
- Equality: ``key == value``
- Operator comparison: ``key op value`` or ``!(key op value)``
- Groups: ``(a || b)``, ``(a && b)``, ``!(a || b)``
- Raw text and ``key(value)`` nest clauses are emitted as-is
"""

from typing import Sequence

from groqbuilder.constants import Joiner

from ..nodes import FilterNode, FilterPair, Group, Nest, PairWithOperator, Raw
from .base import BaseCompiler
from .utils import invalid_node

__all__ = (
    "GroqFilterCompiler",
    "groq_filter_compiler",
)


class GroqFilterCompiler(BaseCompiler):
    """Compile filter nodes into a GROQ boolean expression."""

    TOP_LEVEL_JOIN = Joiner.AND

    def compile(self, nodes: Sequence[FilterNode]) -> str:
        """Render top-level filter nodes joined by ``&&``.

        Returns an empty string when there are no nodes; the assembler then
        omits the filter clause entirely.
        """
        return f" {self.TOP_LEVEL_JOIN} ".join(self.to_expr(node) for node in nodes)

    def to_expr(self, node: FilterNode) -> str:
        """Recursively transform one node into a GROQ expression."""
        if isinstance(node, FilterPair):
            return f"{node.key} == {node.value}"
        if isinstance(node, PairWithOperator):
            expr = f"{node.key} {node.operator} {node.value}"
            return f"!({expr})" if node.negate else expr
        if isinstance(node, Group):
            inner = f" {node.join} ".join(self.to_expr(child) for child in node.children)
            prefix = "!" if node.negate else ""
            return f"{prefix}({inner})"
        if isinstance(node, Raw):
            return node.text
        if isinstance(node, Nest):
            return f"{node.key}({node.value})"
        invalid_node("filter", node)


groq_filter_compiler = GroqFilterCompiler()
