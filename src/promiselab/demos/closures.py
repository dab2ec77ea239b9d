"""Closure demos."""

from __future__ import annotations

from promiselab.closures import create_counter, setup_button
from promiselab.ports import InMemoryDocument


def counter_demo() -> list[int]:
    counter = create_counter()
    return [
        counter.increment(),  # 1
        counter.increment(),  # 2
        counter.decrement(),  # 1
        counter.reset(),  # 0
    ]


def button_demo(document: InMemoryDocument | None = None, clicks: int = 3) -> None:
    if document is None:
        document = InMemoryDocument(["myButton"])
    setup_button("myButton", document)
    button = document.get_element_by_id("myButton")
    for _ in range(clicks):
        button.click()


def run_closure_demos() -> None:
    counter_demo()
    button_demo()
