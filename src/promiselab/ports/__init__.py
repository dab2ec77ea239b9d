from promiselab.ports.dom import (
    Document,
    Element,
    ElementNotFoundError,
    InMemoryDocument,
    InMemoryElement,
)

__all__ = [
    "Document",
    "Element",
    "ElementNotFoundError",
    "InMemoryDocument",
    "InMemoryElement",
]
