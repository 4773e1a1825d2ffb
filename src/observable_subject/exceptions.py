"""Domain exception hierarchy for the observable subject."""

from __future__ import annotations

from enum import Enum


class ArgumentErrorKind(str, Enum):
    """Closed set of argument validation failures."""

    EVENT_KEY = "Event name must be a string"
    CALLBACK = "Callback must be callable"
    CONTEXT = "Context of callback function must be an object"


class ObservableError(RuntimeError):
    """Base class for all observable errors."""


class InvalidArgumentError(ObservableError, TypeError):
    """Raised when a public Subject operation receives an invalid argument."""

    kind: ArgumentErrorKind

    def __init__(self, kind: ArgumentErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)


class InvalidEventKeyError(InvalidArgumentError):
    """Raised when an event key is not a string (or has an empty name in strict mode)."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(ArgumentErrorKind.EVENT_KEY, message)


class InvalidCallbackError(InvalidArgumentError):
    """Raised when a listener callback is not callable."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(ArgumentErrorKind.CALLBACK, message)


class InvalidContextError(InvalidArgumentError):
    """Raised when a listener context is a scalar rather than an object."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(ArgumentErrorKind.CONTEXT, message)


class ConfigValidationError(ObservableError):
    """Raised when configuration cannot be validated safely."""
