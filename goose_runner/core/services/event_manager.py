"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets audio, logging and persistence react to the simulation without the core
depending on them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from goose_runner.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class RunStartedEvent(BaseEvent):
    """Dispatched when a run starts or restarts."""
    high_score: int


@dataclass(frozen=True)
class JumpEvent(BaseEvent):
    """Dispatched when an accepted jump leaves the ground."""
    position: tuple


@dataclass(frozen=True)
class PowerUpCollectedEvent(BaseEvent):
    """Dispatched when the actor collects a power-up."""
    position: tuple
    kind: str
    shield_end_ms: float


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched on the tick an unshielded collision ends the run."""
    obstacle_kind: str
    frame: int


@dataclass(frozen=True)
class HighScoreEvent(BaseEvent):
    """Dispatched once per run when the final score beats the stored best."""
    high_score: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []

        if callback in self._subscribers[event_type]:
            return

        self._subscribers[event_type].append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.trace(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="system"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped; it never stops the
        remaining callbacks or the caller.
        """
        event_type = type(event)

        if event_type not in self._subscribers:
            return

        for callback in list(self._subscribers[event_type]):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """
        Get count of subscribers.

        Args:
            event_type: Specific event type, or None for total
        """
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
