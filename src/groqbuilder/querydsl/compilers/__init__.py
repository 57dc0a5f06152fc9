from .base import BaseCompiler
from .filters import GroqFilterCompiler, groq_filter_compiler
from .projections import GroqProjectionCompiler, groq_projection_compiler

__all__ = (
    "BaseCompiler",
    "GroqFilterCompiler",
    "groq_filter_compiler",
    "GroqProjectionCompiler",
    "groq_projection_compiler",
)
