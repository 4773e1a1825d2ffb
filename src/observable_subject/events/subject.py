"""Observable subject: named listener lists notified synchronously.

Usage:
    subject = Subject()

    def on_saved(path):
        print(f"saved {path}")

    subject.subscribe("document.saved", on_saved)
    subject.subscribe("document.saved:draft", on_saved)

    # Reaches both listeners
    subject.publish("document.saved", "/tmp/a.txt")
    # Reaches only the ":draft" listener
    subject.publish("document.saved:draft", "/tmp/b.txt")

A listener that returns ``False`` (exactly ``False``, not just falsy) stops
delivery to the listeners after it for that publish call.

Subjects are not thread-safe; callers that share one across threads must
synchronize access themselves.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

from ..config import SubjectConfig
from ..exceptions import InvalidCallbackError, InvalidContextError
from .key import EventKey, parse_event_key

LOGGER = logging.getLogger(__name__)

# Values that cannot act as a callback receiver.
_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex)


@dataclass(eq=False)
class Listener:
    """A registered callback with its attribute filter and receiver."""

    attribute: str | None
    callback: Callable[..., Any]
    context: object | None = None

    def invoke(self, args: tuple[Any, ...]) -> Any:
        # The context plays the receiver role, like ``self`` for a plain function.
        if self.context is None:
            return self.callback(*args)
        return self.callback(self.context, *args)

    def matches(
        self,
        attribute: str | None,
        callback: Callable[..., Any] | None = None,
        context: object | None = None,
    ) -> bool:
        """Return True when every supplied filter agrees with this listener."""
        if attribute is not None and self.attribute != attribute:
            return False
        # Equality rather than identity so a fresh ``obj.method`` matches.
        if callback is not None and self.callback != callback:
            return False
        if context is not None and self.context is not context:
            return False
        return True


class Subject:
    """Owns a registry of event name -> ordered listeners.

    Every public operation returns the subject itself so calls can be chained.
    """

    def __init__(self, config: SubjectConfig | None = None) -> None:
        self._config = config or SubjectConfig()
        self._registry: dict[str, list[Listener]] = {}

    @property
    def config(self) -> SubjectConfig:
        return self._config

    def _parse(self, event_key: Any) -> EventKey:
        return parse_event_key(
            event_key, reject_empty_names=self._config.reject_empty_names
        )

    def subscribe(
        self,
        event_key: str,
        callback: Callable[..., Any],
        context: object | None = None,
    ) -> Subject:
        """Register a listener.

        Args:
            event_key: ``"name"`` or ``"name:attribute"``
            callback: Called with the published arguments; receives
                ``context`` first when one is given
            context: Optional receiver object for ``callback``

        Raises:
            InvalidCallbackError: ``callback`` is not callable
            InvalidContextError: ``context`` is a scalar value
            InvalidEventKeyError: ``event_key`` is not a string
        """
        if not callable(callback):
            raise InvalidCallbackError()
        if context is not None and isinstance(context, _SCALAR_TYPES):
            raise InvalidContextError()
        key = self._parse(event_key)

        listeners = self._registry.setdefault(key.name, [])
        listeners.append(Listener(key.attribute, callback, context))
        LOGGER.debug(
            "subject.subscribe",
            extra={
                "event": "subject.subscribe",
                "event_name": key.name,
                "event_attribute": key.attribute,
                "listener_count": len(listeners),
            },
        )
        return self

    def unsubscribe(
        self,
        event_key: str,
        callback: Callable[..., Any] | None = None,
        context: object | None = None,
    ) -> Subject:
        """Remove every listener matching all of the supplied filters.

        With a bare event name and no callback or context, every listener
        under that name is removed.
        """
        key = self._parse(event_key)
        listeners = self._registry.get(key.name)
        if listeners is None:
            return self

        removed = 0
        # Walk backwards so deleting an entry never shifts one not yet visited.
        for index in range(len(listeners) - 1, -1, -1):
            if listeners[index].matches(key.attribute, callback, context):
                del listeners[index]
                removed += 1

        LOGGER.debug(
            "subject.unsubscribe",
            extra={
                "event": "subject.unsubscribe",
                "event_name": key.name,
                "event_attribute": key.attribute,
                "removed": removed,
            },
        )
        return self

    def publish(self, event_key: str, *args: Any) -> Subject:
        """Deliver ``args`` to matching listeners in registration order.

        A key without an attribute reaches every listener under the name; a
        key with an attribute reaches only listeners registered with that
        same attribute. Listener exceptions propagate to the caller.
        """
        key = self._parse(event_key)
        listeners = self._registry.get(key.name)
        if listeners is None:
            LOGGER.debug(f"No listeners for event: {key.name}")
            return self

        if self._config.dispatch == "snapshot":
            listeners = list(listeners)

        LOGGER.debug(
            "subject.publish",
            extra={
                "event": "subject.publish",
                "event_name": key.name,
                "event_attribute": key.attribute,
                "listener_count": len(listeners),
            },
        )

        # Index walk: in "live" mode the length is re-read on every step.
        index = 0
        while index < len(listeners):
            listener = listeners[index]
            index += 1
            if key.attribute is not None and listener.attribute != key.attribute:
                continue
            if listener.invoke(args) is False:
                LOGGER.debug(
                    "subject.publish.short_circuit",
                    extra={
                        "event": "subject.publish.short_circuit",
                        "event_name": key.name,
                        "position": index - 1,
                    },
                )
                break
        return self

    def listeners(self, event_key: str) -> tuple[Listener, ...]:
        """Listeners ``publish(event_key)`` would consider, in dispatch order."""
        key = self._parse(event_key)
        return tuple(
            listener
            for listener in self._registry.get(key.name, [])
            if key.attribute is None or listener.attribute == key.attribute
        )

    def has_listeners(self, event_key: str) -> bool:
        return bool(self.listeners(event_key))

    def event_names(self) -> tuple[str, ...]:
        return tuple(self._registry)

    def clear(self) -> Subject:
        """Drop every registered name and listener."""
        self._registry.clear()
        return self

    add_event_listener = subscribe
    remove_event_listener = unsubscribe
    trigger = publish
