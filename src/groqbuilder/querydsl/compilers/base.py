"""Base compiler interface.

Defines the abstract contract the filter and projection compilers follow.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

__all__ = ("BaseCompiler",)


class BaseCompiler(ABC):
    """Abstract base class for GROQ clause compilers.

    Subclasses implement `compile` for a sequence of IR nodes and `to_expr`
    for a single node.
    """

    @abstractmethod
    def compile(self, nodes: Sequence[Any]) -> str:
        """Render a sequence of nodes into the body of one query clause."""
        raise NotImplementedError

    @abstractmethod
    def to_expr(self, node: Any) -> str:
        """Render a single node."""
        raise NotImplementedError
