"""Top-level package for observable-subject."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import SubjectConfig, load_config
    from .events import EventKey, Listener, Subject, parse_event_key
    from .exceptions import (
        ArgumentErrorKind,
        ConfigValidationError,
        InvalidArgumentError,
        InvalidCallbackError,
        InvalidContextError,
        InvalidEventKeyError,
        ObservableError,
    )

__all__ = [
    "ArgumentErrorKind",
    "ConfigValidationError",
    "EventKey",
    "InvalidArgumentError",
    "InvalidCallbackError",
    "InvalidContextError",
    "InvalidEventKeyError",
    "Listener",
    "ObservableError",
    "Subject",
    "SubjectConfig",
    "load_config",
    "parse_event_key",
]

_EVENT_EXPORTS = {"EventKey", "Listener", "Subject", "parse_event_key"}
_CONFIG_EXPORTS = {"SubjectConfig", "load_config"}
_EXCEPTION_EXPORTS = {
    "ArgumentErrorKind",
    "ConfigValidationError",
    "InvalidArgumentError",
    "InvalidCallbackError",
    "InvalidContextError",
    "InvalidEventKeyError",
    "ObservableError",
}


def __getattr__(name: str) -> Any:
    """Lazily import symbols so ``import observable_subject`` stays cheap."""
    if name in _EVENT_EXPORTS:
        from . import events

        return getattr(events, name)
    if name in _CONFIG_EXPORTS:
        from . import config

        return getattr(config, name)
    if name in _EXCEPTION_EXPORTS:
        from . import exceptions

        return getattr(exceptions, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
