"""Limiter settings read from the environment (and ``.env`` when present)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "y", "on"}


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a {cast.__name__}, got {raw!r}") from None


@dataclass
class LimiterSettings:
    capacity: int = 10
    refill_rate: float = 1.0
    clock: str = "monotonic"  # monotonic | wall
    carry_fraction: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "LimiterSettings":
        if dotenv:
            load_dotenv()
        clock = (os.getenv("ADMISSION_CLOCK") or cls.clock).strip().lower()
        if clock not in ("monotonic", "wall"):
            raise ValueError(f"ADMISSION_CLOCK must be 'monotonic' or 'wall', got {clock!r}")
        return cls(
            capacity=_env_number("ADMISSION_CAPACITY", cls.capacity, int),
            refill_rate=_env_number("ADMISSION_REFILL_RATE", cls.refill_rate, float),
            clock=clock,
            carry_fraction=(os.getenv("ADMISSION_CARRY_FRACTION") or "").strip().lower() in _TRUE,
            log_level=os.getenv("ADMISSION_LOG_LEVEL") or cls.log_level,
        )
