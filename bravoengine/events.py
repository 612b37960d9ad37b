"""Event types and a publish/subscribe event manager."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, DefaultDict, Iterable, List

from .inputs import Key, Mouse


class EventType(IntEnum):
    KEY_UP = 0
    KEY_DOWN = 1
    MOUSE_BUTTON_UP = 2
    MOUSE_BUTTON_DOWN = 3
    MOUSE_MOVE = 4
    QUIT = 5
    UNDEFINED = 6


@dataclass
class Event:
    """An input event with the mouse state and key it carries."""

    type: EventType = EventType.UNDEFINED
    mouse: Mouse = field(default_factory=Mouse)
    key: Key = Key.UNKNOWN


EventCallback = Callable[[Event], None]


class EventManager:
    """Delivers events to the callbacks subscribed to their type, in subscription order."""

    def __init__(self) -> None:
        self._subscribers: DefaultDict[EventType, List[EventCallback]] = defaultdict(list)

    def subscribe(self, callback: EventCallback, event_type: EventType) -> None:
        self._subscribers[event_type].append(callback)

    def dispatch(self, event: Event) -> None:
        for callback in list(self._subscribers.get(event.type, ())):
            callback(event)

    def handle_events(self, events: Iterable[Event]) -> None:
        """Dispatch every pending event in order."""
        for event in events:
            self.dispatch(event)