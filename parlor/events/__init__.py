"""
Event system for the parlor engines.

This package provides the event bus the game engines announce play on.
"""

from parlor.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    EngineEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "EngineEventType"]
