"""tick-tweener - Eased progress timers driven by a host update loop."""
from __future__ import annotations

from tick_tweener.clock import ManualClock
from tick_tweener.easing import EASINGS, compose_direction, ease, lerp, ping_pong, resolve_easing
from tick_tweener.runner import TweenRunner, create
from tick_tweener.systems import make_tween_system
from tick_tweener.tween import Tween
from tick_tweener.types import DIRECTIONS, MissingEasingFunctionError, TweenDefaults

__all__ = [
    "Tween",
    "TweenRunner",
    "TweenDefaults",
    "ManualClock",
    "MissingEasingFunctionError",
    "EASINGS",
    "DIRECTIONS",
    "create",
    "ease",
    "compose_direction",
    "ping_pong",
    "lerp",
    "resolve_easing",
    "make_tween_system",
]
