"""Settlement outcomes - the tagged result of a deferred operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class Outcome(Generic[V]):
    """
    The settled result of a deferred operation.

    Kinds:
    - fulfilled: The operation completed successfully, ``value`` holds its payload
    - rejected: The operation failed, ``reason`` holds a plain string explaining why
    """

    status: Literal["fulfilled", "rejected"]
    value: V | None = None
    reason: str | None = None

    @staticmethod
    def Fulfilled(value: Any) -> Outcome[Any]:
        return Outcome(status="fulfilled", value=value)

    @staticmethod
    def Rejected(reason: Any) -> Outcome[Any]:
        return Outcome(status="rejected", reason=str(reason))

    @property
    def fulfilled(self) -> bool:
        return self.status == "fulfilled"

    @property
    def rejected(self) -> bool:
        return self.status == "rejected"

    def unwrap(self, label: str = "") -> V:
        """Return the value, raising RejectedError for a rejected outcome."""
        if self.rejected:
            raise RejectedError(self.reason or "", label)
        return self.value  # type: ignore[return-value]


class RejectedError(Exception):
    """Raised when awaiting a deferred operation that was rejected.

    The reason stays a plain string; ``label`` names the operation
    that failed, when known.
    """

    def __init__(self, reason: str, label: str = "") -> None:
        self.reason = reason
        self.label = label
        super().__init__(reason)

    def __repr__(self) -> str:
        return f"RejectedError({self.reason!r}, label={self.label!r})"
