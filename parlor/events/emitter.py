"""
Event system for the parlor engines.

Engines announce what happens at the table (cards dealt, actions taken,
rounds won) on an event bus. Observers such as transcripts or tests subscribe
to it without reaching into engine state.
"""

from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, Union
import logging
import threading

logger = logging.getLogger("parlor.events")


class EventPriority(Enum):
    """Priority levels for event handlers."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class EventEmitter:
    """
    Event emitter with priority-ordered subscriptions.

    Handlers are called in priority order, highest first. An exception in a
    handler is logged and does not stop the remaining handlers or the game.
    """

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners = defaultdict(list)
        self._global_listeners = []
        self._listener_lock = threading.RLock()

    @staticmethod
    def _insert(handlers: list, handler: dict) -> None:
        # Keep higher priorities first, first-come first-served within a level
        for i, existing in enumerate(handlers):
            if existing["priority"] < handler["priority"]:
                handlers.insert(i, handler)
                return
        handlers.append(handler)

    def on(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)
            priority: Priority level for this handler

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        handler = {"callback": callback, "priority": priority.value}
        with self._listener_lock:
            self._insert(self._listeners[event_type], handler)

        def unsubscribe():
            with self._listener_lock:
                handlers = self._listeners[event_type]
                if handler in handlers:
                    handlers.remove(handler)

        return unsubscribe

    def once(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type for a single occurrence.

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        unsubscribe_ref = []

        def one_time_handler(event_data):
            try:
                callback(event_data)
            finally:
                unsubscribe_ref[0]()

        unsubscribe_ref.append(self.on(event_type, one_time_handler, priority))
        return unsubscribe_ref[0]

    def on_any(
        self, callback: Callable, priority: EventPriority = EventPriority.NORMAL
    ) -> Callable:
        """
        Subscribe to all events.

        Args:
            callback: Function to call for any event, signature: fn((event_type, event_data))
            priority: Priority level for this handler
        """
        handler = {"callback": callback, "priority": priority.value}
        with self._listener_lock:
            self._insert(self._global_listeners, handler)

        def unsubscribe():
            with self._listener_lock:
                if handler in self._global_listeners:
                    self._global_listeners.remove(handler)

        return unsubscribe

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        with self._listener_lock:
            handlers_to_call = [
                (handler["callback"], data)
                for handler in self._listeners.get(event_type, [])
            ]
            handlers_to_call.extend(
                (handler["callback"], (event_type, data))
                for handler in self._global_listeners
            )

        # Call handlers outside of the lock to avoid deadlocks
        for callback, args in handlers_to_call:
            try:
                callback(args)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event_type}: {e}", exc_info=True
                )

    def remove_all_listeners(self, event_type: Union[str, Enum, None] = None) -> None:
        """
        Remove all listeners for a specific event type or all events.
        """
        with self._listener_lock:
            if event_type is None:
                self._listeners.clear()
                self._global_listeners.clear()
            else:
                if isinstance(event_type, Enum):
                    event_type = event_type.name
                self._listeners[event_type].clear()


class EventBus:
    """
    Global event bus for the application.

    This singleton class provides a centralized event bus that can be accessed
    from anywhere in the application.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        """
        Get the singleton instance of the EventBus.

        Returns:
            EventEmitter instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance


class EngineEventType(Enum):
    """
    Event types emitted by the parlor engines.
    """

    # Game lifecycle
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"
    ROUND_STARTED = "round_started"
    ROUND_ENDED = "round_ended"
    MATCH_ENDED = "match_ended"

    # Twenty-one
    CARD_DEALT = "card_dealt"
    PLAYER_ACTION = "player_action"
    DEALER_ACTION = "dealer_action"
    HAND_BUSTED = "hand_busted"

    # Rock-paper-scissors-lizard-spock
    MOVE_CHOSEN = "move_chosen"
    SCORE_UPDATED = "score_updated"
