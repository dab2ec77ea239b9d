"""Click counting bound to a UI element."""

from __future__ import annotations

import logging

from promiselab.ports.dom import Document

logger = logging.getLogger(__name__)


def setup_button(button_id: str, document: Document) -> None:
    """Count clicks on the element with id ``button_id``.

    The count lives in the handler's closure and is logged on every click.

    Raises:
        ElementNotFoundError: If the document has no such element
    """
    click_count = 0

    def on_click(_event: str) -> None:
        nonlocal click_count
        click_count += 1
        logger.info("Button %s clicked %d times.", button_id, click_count)

    button = document.get_element_by_id(button_id)
    button.add_event_listener("click", on_click)
