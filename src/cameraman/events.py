"""Event system for decoupled camera notifications.

The driver publishes an event when the camera first engages on a level and
when its path completes, so host code (recorders, overlays, demo tools) can
react without polling the session every tic.

Example usage:
    event_bus = EventBus()

    def on_completed(event: CameraCompletedEvent):
        print(f"Camera finished at level tic {event.level_time}")

    event_bus.subscribe(CameraCompletedEvent, on_completed)
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from cameraman.profile import CameraPose

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """Base event class."""


@dataclass
class CameraActivatedEvent(Event):
    """Fired on the first active tic of a level.

    Attributes:
        level_time: Level tic the camera engaged on.
        pose: First pose of the path.
    """

    level_time: int
    pose: CameraPose


@dataclass
class CameraCompletedEvent(Event):
    """Fired on the first tic the path reports progress >= 1.

    Attributes:
        level_time: Level tic the path completed on.
        exit_requested: Whether completion also requested process exit.
    """

    level_time: int
    exit_requested: bool = False


class EventBus:
    """Delivers camera events to the handlers registered for their type.

    Handlers run synchronously on the thread that calls Cameraman.ticker(),
    in registration order, before the tic's host calls finish.
    """

    def __init__(self) -> None:
        """Create a bus with no handlers."""
        self.listeners: defaultdict[type[Event], list[Callable[[Event], None]]] = defaultdict(list)

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Call `handler` for every published event of exactly `event_type`."""
        self.listeners[event_type].append(handler)

    def publish(self, event: Event) -> None:
        """Hand `event` to its handlers. A handler exception propagates to the driver."""
        handlers = self.listeners.get(type(event), [])
        logger.debug("Publishing %s to %d handler(s)", type(event).__name__, len(handlers))
        for handler in handlers:
            handler(event)
