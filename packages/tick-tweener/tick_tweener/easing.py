"""Easing functions for tween interpolation.

Every curve maps a progress fraction in [0, 1] to an eased fraction. Outputs
are not clamped: ``back`` and ``elastic`` dip or overshoot in the interior, so
callers should interpolate with the unclamped ``lerp``.
"""
from __future__ import annotations

import logging
import math

from tick_tweener.types import (
    BACK,
    BOUNCE,
    CIRCULAR,
    CUBIC,
    CUSTOM,
    EASE_IN,
    EASE_IN_OUT,
    EASE_OUT,
    ELASTIC,
    EXPONENTIAL,
    LINEAR,
    QUADRATIC,
    QUARTIC,
    QUINTIC,
    SINE,
    EasingFn,
    MissingEasingFunctionError,
)

logger = logging.getLogger(__name__)


def linear(p: float) -> float:
    return p


def quadratic(p: float) -> float:
    return p ** 2


def cubic(p: float) -> float:
    return p ** 3


def quartic(p: float) -> float:
    return p ** 4


def quintic(p: float) -> float:
    return p ** 5


def sine(p: float) -> float:
    return 1.0 - math.cos(p * math.pi / 2.0)


def circular(p: float) -> float:
    return 1.0 - math.sqrt(max(0.0, 1.0 - p * p))


def exponential(p: float) -> float:
    return 2.0 ** (10.0 * (p - 1.0))


def back(p: float) -> float:
    return p ** 3 - p * math.sin(p * math.pi)


def elastic(p: float) -> float:
    return math.sin(6.5 * math.pi * p) * 2.0 ** (10.0 * (p - 1.0))


def bounce(p: float) -> float:
    return abs(elastic(p))


EASINGS: dict[str, EasingFn] = {
    LINEAR: linear,
    QUADRATIC: quadratic,
    CUBIC: cubic,
    QUARTIC: quartic,
    QUINTIC: quintic,
    SINE: sine,
    CIRCULAR: circular,
    EXPONENTIAL: exponential,
    BACK: back,
    ELASTIC: elastic,
    BOUNCE: bounce,
}


def resolve_easing(kind: str, custom: EasingFn | None = None) -> EasingFn:
    """Return the curve for ``kind``.

    Raises MissingEasingFunctionError for ``custom`` without a function and
    KeyError for an unknown kind.
    """
    if kind == CUSTOM:
        if custom is None:
            raise MissingEasingFunctionError(
                "easing 'custom' selected but no custom easing function supplied"
            )
        return custom
    return EASINGS[kind]


def ease(kind: str, p: float, custom: EasingFn | None = None) -> float:
    """Apply the ``kind`` curve to ``p``. Never raises for bad configuration.

    Built-in curves return 0.0 and 1.0 unchanged so every curve lands on its
    endpoints exactly. Custom functions are always called.
    """
    try:
        fn = resolve_easing(kind, custom)
    except MissingEasingFunctionError as exc:
        logger.warning("%s; using linear", exc)
        return p
    except KeyError:
        logger.warning("unknown easing %r; using linear", kind)
        return p

    if kind != CUSTOM and (p == 0.0 or p == 1.0):
        return p
    return fn(p)


def compose_direction(
    ratio: float,
    kind: str,
    direction: str,
    custom: EasingFn | None = None,
) -> float:
    """Compose the ``kind`` curve with ``direction``."""
    if direction == EASE_IN:
        return ease(kind, ratio, custom)

    if direction == EASE_IN_OUT:
        # first half forwards, second half mirrored
        if ratio < 0.5:
            return ease(kind, ratio * 2.0, custom) / 2.0
        return 1.0 - ease(kind, (1.0 - ratio) * 2.0, custom) / 2.0

    if direction != EASE_OUT:
        logger.warning("unknown easing direction %r; using %r", direction, EASE_OUT)
    return 1.0 - ease(kind, 1.0 - ratio, custom)


def ping_pong(ratio: float) -> float:
    """Fold a cycle ratio so the first half plays forward and the second back."""
    if ratio < 0.5:
        return ratio * 2.0
    return (1.0 - ratio) * 2.0


def lerp(start: float, end: float, t: float) -> float:
    """Unclamped linear interpolation between ``start`` and ``end``."""
    return start + (end - start) * t
