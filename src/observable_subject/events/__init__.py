"""Event subject components.

Listener registration and synchronous dispatch keyed by ``name[:attribute]``.
"""

from .key import ATTR_DELIMITER, EventKey, parse_event_key
from .subject import Listener, Subject

__all__ = ["ATTR_DELIMITER", "EventKey", "Listener", "Subject", "parse_event_key"]
