"""
Event system for the card matching game.

The engine narrates what happens through an event bus so that the game
logic never writes to the console itself.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class EventType(Enum):
    """Types of events that can be emitted by the game."""

    # Game lifecycle events
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"
    CARDS_DEALT = "cards_dealt"

    # Turn events
    TURN_STARTED = "turn_started"
    CARD_PLAYED = "card_played"
    CARD_DRAWN = "card_drawn"
    HAND_SHOWN = "hand_shown"
    DECK_RESHUFFLED = "deck_reshuffled"


@dataclass
class GameEvent:
    """Represents a game event with associated data.

    Attributes:
        event_type: The type of event
        data: Event-specific data
        timestamp: When the event occurred (optional)
        source: Source of the event (optional)
    """

    event_type: EventType
    data: Dict[str, Any]
    timestamp: Optional[float] = None
    source: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = time.time()


EventListener = Callable[[GameEvent], None]


class EventBus:
    """Event bus for managing game events and listeners.

    Components subscribe to specific event types and are called back,
    in subscription order, whenever such an event is emitted.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_history: int = 1000):
        """Initialize the event bus.

        Args:
            logger: Optional logger for debugging events
            max_history: Number of past events kept for inspection
        """
        self._listeners: Dict[EventType, List[EventListener]] = {}
        self._logger = logger or logging.getLogger(__name__)
        self._event_history: List[GameEvent] = []
        self._max_history = max_history

    def subscribe(self, event_type: EventType, listener: EventListener) -> None:
        """Subscribe a listener to an event type."""
        self._listeners.setdefault(event_type, []).append(listener)
        self._logger.debug(f"Subscribed listener to {event_type.value}")

    def subscribe_all(self, listener: EventListener) -> None:
        """Subscribe a listener to every event type."""
        for event_type in EventType:
            self.subscribe(event_type, listener)

    def unsubscribe(self, event_type: EventType, listener: EventListener) -> bool:
        """Unsubscribe a listener from an event type.

        Returns:
            True if the listener was found and removed, False otherwise
        """
        try:
            self._listeners.get(event_type, []).remove(listener)
        except ValueError:
            return False
        self._logger.debug(f"Unsubscribed listener from {event_type.value}")
        return True

    def emit(self, event: GameEvent) -> None:
        """Emit an event to all subscribed listeners.

        A failing listener is logged and does not stop the others. An OSError
        from a listener (for example a closed output stream) is re-raised.
        """
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history.pop(0)

        listeners = self._listeners.get(event.event_type, [])
        self._logger.debug(f"Emitting {event.event_type.value} to {len(listeners)} listeners")

        for listener in listeners:
            try:
                listener(event)
            except OSError:
                raise
            except Exception as e:
                self._logger.error(f"Error in event listener for {event.event_type.value}: {e}")

    def emit_simple(self, event_type: EventType, source: Optional[str] = None, **data) -> None:
        """Emit an event with data given as keyword arguments."""
        self.emit(GameEvent(event_type=event_type, data=data, source=source))

    def get_listeners_count(self, event_type: EventType) -> int:
        return len(self._listeners.get(event_type, []))

    def clear_listeners(self, event_type: Optional[EventType] = None) -> None:
        """Clear listeners for one event type, or for all when None."""
        if event_type is None:
            self._listeners.clear()
        else:
            self._listeners[event_type] = []

    def get_event_history(self, event_type: Optional[EventType] = None,
                          limit: Optional[int] = None) -> List[GameEvent]:
        """Get event history, optionally filtered by type and limited.

        Args:
            event_type: Optional event type to filter by
            limit: Optional limit on number of events to return (most recent)

        Returns:
            List of events from history
        """
        events = self._event_history
        if event_type is not None:
            events = [e for e in events if e.event_type == event_type]
        if limit is not None:
            events = events[-limit:]
        return list(events)

    def clear_history(self) -> None:
        self._event_history.clear()
