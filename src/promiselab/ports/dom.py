"""Document port - element lookup and event registration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

EventHandler = Callable[[str], Any]


class ElementNotFoundError(KeyError):
    """Raised when no element has the requested id."""


class Element(Protocol):
    """A UI element that accepts event listeners."""

    def add_event_listener(self, event: str, handler: EventHandler) -> None: ...


class Document(Protocol):
    """A UI document supporting lookup by id."""

    def get_element_by_id(self, element_id: str) -> Element: ...


class InMemoryElement:
    """
    In-memory implementation of Element.
    Handlers run synchronously in registration order on dispatch.
    """

    def __init__(self, element_id: str) -> None:
        self.id = element_id
        self._listeners: dict[str, list[EventHandler]] = {}

    def add_event_listener(self, event: str, handler: EventHandler) -> None:
        self._listeners.setdefault(event, []).append(handler)

    def dispatch(self, event: str) -> int:
        """Run every handler registered for event.

        Returns:
            The number of handlers invoked
        """
        handlers = list(self._listeners.get(event, ()))
        for handler in handlers:
            handler(event)
        return len(handlers)

    def click(self) -> int:
        return self.dispatch("click")


class InMemoryDocument:
    """In-memory implementation of Document."""

    def __init__(self, element_ids: list[str] | None = None) -> None:
        self._elements: dict[str, InMemoryElement] = {}
        for element_id in element_ids or []:
            self.add_element(element_id)

    def add_element(self, element_id: str) -> InMemoryElement:
        element = InMemoryElement(element_id)
        self._elements[element_id] = element
        return element

    def get_element_by_id(self, element_id: str) -> InMemoryElement:
        if element_id not in self._elements:
            raise ElementNotFoundError(f"Element '{element_id}' not found in document")
        return self._elements[element_id]
