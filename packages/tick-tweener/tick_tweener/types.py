"""Shared names, error types, and configuration for tick-tweener."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

EasingFn = Callable[[float], float]

# Easing kinds
LINEAR = "linear"
QUADRATIC = "quadratic"
CUBIC = "cubic"
QUARTIC = "quartic"
QUINTIC = "quintic"
SINE = "sine"
CIRCULAR = "circular"
EXPONENTIAL = "exponential"
BACK = "back"
ELASTIC = "elastic"
BOUNCE = "bounce"
CUSTOM = "custom"

# Directions
EASE_IN = "ease_in"
EASE_OUT = "ease_out"
EASE_IN_OUT = "ease_in_out"

DIRECTIONS: tuple[str, ...] = (EASE_IN, EASE_OUT, EASE_IN_OUT)

# Lifecycle states
IDLE = "idle"
DELAYING = "delaying"
RUNNING = "running"
COMPLETED = "completed"


class MissingEasingFunctionError(LookupError):
    """Raised when the custom easing kind is selected without a function."""


@dataclass(frozen=True)
class TweenDefaults:
    """Immutable defaults applied by ``TweenRunner.create``.

    Attributes:
        duration: Seconds per cycle.
        easing: Easing kind name.
        direction: Direction name.
        delay: Seconds before timing begins.
    """

    duration: float = 1.0
    easing: str = LINEAR
    direction: str = EASE_OUT
    delay: float = 0.0
