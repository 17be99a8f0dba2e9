"""Tween - a self-retiring timer that reports eased progress each tick."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from tick_tweener.easing import EASINGS, compose_direction, ping_pong
from tick_tweener.types import (
    COMPLETED,
    CUSTOM,
    DELAYING,
    DIRECTIONS,
    EASE_OUT,
    IDLE,
    LINEAR,
    RUNNING,
    EasingFn,
)

logger = logging.getLogger(__name__)

UpdateFn = Callable[[float], None]
EventFn = Callable[[], None]


@dataclass(eq=False)
class Tween:
    """Timer and easing state machine driven by ``tick(now)``.

    ``now`` is any monotonic reading in seconds supplied by the host; the
    tween never reads a clock itself. ``start_time`` is captured from the
    first tick when left unset.

    States: ``idle`` (chained, waiting on its source), ``delaying``,
    ``running`` and ``completed``. A non-looping tween completes exactly once;
    a looping tween restarts instead and never completes on its own.

    Configuration fields may be changed between ticks. Invalid values are
    clamped to defaults with a logged warning rather than raised, so one
    misconfigured tween cannot interrupt the host loop.
    """

    duration: float = 1.0
    delay: float = 0.0
    loop: bool = False
    ping_pong: bool = False
    easing: str = LINEAR
    direction: str = EASE_OUT
    custom_easing: EasingFn | None = None
    start_time: float | None = None
    started: bool = field(default=False, init=False)
    chained: list[Tween] = field(default_factory=list, init=False, repr=False)
    _state: str = field(default=RUNNING, init=False, repr=False)
    _cancelled: bool = field(default=False, init=False, repr=False)
    _warned_missing_custom: bool = field(default=False, init=False, repr=False)
    _start_handlers: list[EventFn] = field(default_factory=list, init=False, repr=False)
    _update_handlers: list[UpdateFn] = field(default_factory=list, init=False, repr=False)
    _complete_handlers: list[EventFn] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._sanitize()
        if self.delay > 0:
            self._state = DELAYING

    # --- Listeners ---

    def on_start(self, fn: EventFn) -> None:
        """Register a listener fired once, on the first tick past the delay.

        ``started`` is set on that tick whether or not a listener exists, so a
        listener registered after the tween is underway never fires.
        """
        self._start_handlers.append(fn)

    def on_update(self, fn: UpdateFn) -> None:
        """Register a listener receiving the eased value every running tick."""
        self._update_handlers.append(fn)

    def on_complete(self, fn: EventFn) -> None:
        """Register a listener fired once when a non-looping tween finishes."""
        self._complete_handlers.append(fn)

    # --- Queries ---

    @property
    def state(self) -> str:
        return self._state

    @property
    def is_alive(self) -> bool:
        """False once completed or cancelled; hosts drop the tween then."""
        return self._state != COMPLETED

    @property
    def is_idle(self) -> bool:
        return self._state == IDLE

    @property
    def is_complete(self) -> bool:
        return self._state == COMPLETED

    def eased(self, ratio: float) -> float:
        """Value reported to update listeners for an in-progress ``ratio``."""
        if self.ping_pong:
            ratio = ping_pong(ratio)
        easing = self.easing
        if easing == CUSTOM and self.custom_easing is None:
            easing = LINEAR
        return compose_direction(ratio, easing, self.direction, self.custom_easing)

    # --- Chaining ---

    def chain(self, target: Tween) -> None:
        """Start ``target`` when this tween completes.

        The target is suspended until then. Several targets may be chained;
        they activate in the order they were added. Cycles are not detected.

        A finished target is left finished. Chaining onto a tween that already
        completed leaves the target running on its own schedule; chaining onto
        a cancelled tween cancels the target.
        """
        self.chained.append(target)
        if target.is_complete:
            return
        if self._cancelled:
            target.cancel()
        elif not self.is_complete:
            target._state = IDLE

    def activate(self, now: float) -> None:
        """Release an idle tween, timing it from ``now``."""
        if self._state != IDLE:
            return
        self.start_time = now
        self._state = DELAYING if self.delay > 0 else RUNNING
        logger.debug("tween %#x activated at %s", id(self), now)

    def cancel(self) -> None:
        """Stop without firing complete listeners or activating chains.

        Chained targets still waiting on this tween are cancelled too.
        """
        if self._state == COMPLETED:
            return
        self._state = COMPLETED
        self._cancelled = True
        logger.debug("tween %#x cancelled", id(self))

        for tween in self.chained:
            if tween.is_idle:
                tween.cancel()

    # --- Ticking ---

    def tick(self, now: float) -> None:
        if self._state in (IDLE, COMPLETED):
            return

        self._sanitize()
        if (
            self.easing == CUSTOM
            and self.custom_easing is None
            and not self._warned_missing_custom
        ):
            self._warned_missing_custom = True
            logger.warning(
                "easing 'custom' selected without a custom easing function; using %r",
                LINEAR,
            )

        if self.start_time is None:
            self.start_time = now

        elapsed = now - self.start_time - self.delay
        if elapsed < 0:
            self._state = DELAYING
            return

        ratio = elapsed / self.duration if self.duration > 0 else 1.0
        if ratio >= 1.0:
            self._end(now)
            return

        self._state = RUNNING
        if ratio <= 0.0:
            return

        if not self.started:
            self.started = True
            for fn in self._start_handlers:
                fn()

        self._emit_update(self.eased(ratio))

    def _end(self, now: float) -> None:
        # final update to finish neatly
        self._emit_update(0.0 if self.ping_pong else 1.0)

        if self.loop:
            self.start_time = now
            self._state = DELAYING if self.delay > 0 else RUNNING
            return

        self._state = COMPLETED
        logger.debug("tween %#x completed at %s", id(self), now)

        # chains are live before complete listeners run
        for tween in self.chained:
            tween.activate(now)

        for fn in self._complete_handlers:
            fn()

    def _emit_update(self, value: float) -> None:
        for fn in self._update_handlers:
            fn(value)

    def _sanitize(self) -> None:
        if self.easing != CUSTOM and self.easing not in EASINGS:
            logger.warning("unknown easing %r; using %r", self.easing, LINEAR)
            self.easing = LINEAR

        if self.direction not in DIRECTIONS:
            logger.warning("unknown easing direction %r; using %r", self.direction, EASE_OUT)
            self.direction = EASE_OUT

        if self.duration < 0:
            logger.warning("negative duration %r; using 0.0", self.duration)
            self.duration = 0.0

        if self.delay < 0:
            logger.warning("negative delay %r; using 0.0", self.delay)
            self.delay = 0.0
