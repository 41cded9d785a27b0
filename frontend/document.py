# =============================================================================
# frontend/document.py - Document Stand-In
# =============================================================================
# The slice of a browser document that components touch: keyboard listeners
# and the body's inline style. A UI toolkit feeds real key presses in through
# dispatch(); tests do the same.
# =============================================================================

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


@dataclass(frozen=True)
class KeyboardEvent:
    key: str
    type: str = "keydown"


@dataclass
class Body:
    style: Dict[str, str] = field(default_factory=dict)


class Document:
    """Event listener registry plus a body with inline styles."""

    def __init__(self):
        self.body = Body()
        self._listeners: Dict[str, List[Listener]] = {}

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            self._listeners.pop(event_type, None)

    def dispatch(self, event: KeyboardEvent) -> int:
        """Deliver an event to its listeners. Returns how many were called."""
        # Listeners may unregister themselves while handling the event
        listeners = list(self._listeners.get(event.type, []))
        for listener in listeners:
            listener(event)
        return len(listeners)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))


# Shared document for components created without an explicit one
document = Document()
