"""Custom exceptions for the groqbuilder library.

Mutation calls on the builder never raise: they return a ``QueryError`` value.
The classes below are raised at the boundary (``build_or_throw``), by the
compilers when the IR is malformed, and by the settings layer.
"""

from typing import Any, Dict


# Base exception
class GroqBuilderError(Exception):
    """Base exception for all groqbuilder errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., config_key, node)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Validation exceptions
class ValidationError(GroqBuilderError):
    """Raised by ``build_or_throw`` when the query chain carried an input error.

    Example:
        >>> raise ValidationError("Qualifier must be a string")
    """


class InvalidFilterError(ValidationError):
    """Raised when a filter input had an unsupported shape."""


class InvalidProjectionError(ValidationError):
    """Raised when a projection input had an unsupported shape."""


class InvalidQualifierError(ValidationError):
    """Raised when a scope qualifier was not a string."""


class InvalidOrderError(ValidationError):
    """Raised when an order clause was not a string or a list of strings."""


class InvalidLimitError(ValidationError):
    """Raised when a limit was negative, non-numeric or an invalid offset/count pair."""


# Compiler exceptions
class CompilerError(GroqBuilderError):
    """Raised when a compiler meets a node it cannot render.

    The builder validates every input before it reaches the IR, so this signals
    an internal invariant break rather than bad user input.

    Example:
        >>> raise CompilerError("Invalid filter node", node=object())
    """


# Configuration exceptions
class ConfigurationError(GroqBuilderError):
    """Raised when configuration is invalid or missing.

    Example:
        >>> raise ConfigurationError("Invalid configuration", setting="LOG_LEVEL", value="LOUD")
    """


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid.

    Example:
        >>> raise InvalidConfigError("Invalid config value", config_key="GROQ_DRAFTS_PATH", value="")
    """
