"""
Custom exception classes for parambricks.

Every failure is a local, non-retryable validation error raised where it is
detected. Callers decide whether the surrounding remote operation is retried.
"""

from typing import Any, Dict, Optional


class ParambricksException(Exception):
    """Base exception class for all parambricks exceptions.

    Carries a human-readable ``reason`` plus optional structured ``details``
    that are appended to the message.

    Example:
        >>> raise TypeMismatchError(
        ...     reason="Type FLOAT64 incompatible with bool",
        ...     details={"type": "FLOAT64", "native": "bool"},
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)


class InvalidParameterError(ParambricksException):
    """Raised when a typed value violates a cross-field invariant at build time."""

    pass


class UnsupportedTypeError(ParambricksException):
    """Raised when a native or logical type has no defined mapping or encoding."""

    pass


class TypeMismatchError(ParambricksException):
    """Raised when a native value's runtime kind disagrees with the declared logical type."""

    pass


class MalformedLiteralError(ParambricksException):
    """Raised when a string literal does not match the pattern of its temporal type."""

    pass


class UnknownTypeError(ParambricksException):
    """Raised when a wire type descriptor names a type outside the closed enumeration."""

    pass


class EncoderRegistryError(ParambricksException):
    """Raised on duplicate or missing scalar encoder registrations."""

    pass
