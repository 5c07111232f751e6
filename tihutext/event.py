"""An event attached to a word, such as a bookmark or a rate change."""

from __future__ import annotations

from dataclasses import dataclass

from .helper import EventType


@dataclass
class Event:
    """Kind of event and its textual value."""

    type: EventType = EventType.UNKNOWN
    value: str = ""