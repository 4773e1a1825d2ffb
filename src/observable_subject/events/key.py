"""Event key parsing.

An event key addresses a listener list and optionally narrows it:

    "saved"          -> name="saved", attribute=None
    "saved:title"    -> name="saved", attribute="title"
    "saved:a:b"      -> name="saved", attribute="a"  (extra parts dropped)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import InvalidEventKeyError

ATTR_DELIMITER = ":"


@dataclass(frozen=True)
class EventKey:
    """Parsed ``name[:attribute]`` pair."""

    name: str
    attribute: str | None = None

    def __str__(self) -> str:
        if self.attribute is None:
            return self.name
        return f"{self.name}{ATTR_DELIMITER}{self.attribute}"


def parse_event_key(event_key: Any, *, reject_empty_names: bool = False) -> EventKey:
    """Split an event key string into its name and optional attribute.

    Args:
        event_key: Raw key such as ``"changed"`` or ``"changed:title"``
        reject_empty_names: Raise instead of accepting ``""`` or ``":attr"``

    Raises:
        InvalidEventKeyError: ``event_key`` is not a string, or its name is
            empty while ``reject_empty_names`` is set.
    """
    if not isinstance(event_key, str):
        raise InvalidEventKeyError()

    parts = event_key.split(ATTR_DELIMITER)
    name = parts[0]
    # An empty attribute ("evt:") constrains nothing.
    attribute = parts[1] if len(parts) > 1 and parts[1] else None

    if reject_empty_names and not name:
        raise InvalidEventKeyError(f"Event name must not be empty: {event_key!r}")
    return EventKey(name=name, attribute=attribute)
