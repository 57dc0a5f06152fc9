"""Compiler utility functions.

Helpers for formatting literal values and reporting malformed IR.
"""

from typing import Any, NoReturn, Union

from groqbuilder.exceptions import CompilerError


def format_value(v: Union[None, str, int, float, bool]) -> str:
    """Format a Python scalar as GROQ literal text.

    Strings are passed through untouched: callers write GROQ literals
    themselves (``"'post'"``, ``"path('drafts.**')"``, a field reference).
    """
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "true" if v else "false"
    return str(v)


def is_literal(v: Any) -> bool:
    """Whether ``format_value`` can render ``v``."""
    return v is None or isinstance(v, (str, int, float, bool))


def invalid_node(kind: str, node: Any) -> NoReturn:
    raise CompilerError(f"Invalid {kind} node", node=node)
