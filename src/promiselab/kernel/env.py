"""Settings and environment for promiselab."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator

from promiselab.kernel.trace import Trace

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Runtime settings.

    ``time_unit`` converts the delays used throughout the demos into
    seconds. The default reads delays as milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    time_unit: float = Field(default=0.001, gt=0)
    log_level: str = "INFO"
    trace: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


@dataclass
class Env:
    """Environment aggregation - settings plus optional trace."""

    settings: Settings = field(default_factory=Settings)
    trace: Trace | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> Env:
        return cls(settings=settings, trace=Trace() if settings.trace else None)

    def seconds(self, delay: float) -> float:
        """Convert a delay in time units to seconds."""
        return delay * self.settings.time_unit


def default_env() -> Env:
    return Env.from_settings(Settings())
