"""TweenRunner - host-side registry that ticks tweens and releases finished ones."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from tick_tweener.tween import Tween
from tick_tweener.types import TweenDefaults

logger = logging.getLogger(__name__)


class TweenRunner:
    """Owns a set of tweens on behalf of a host update loop.

    ``clock`` is an optional monotonic time provider. When present, tweens
    built with ``create`` are timed from the moment of creation; otherwise
    they are timed from their first tick.
    """

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        defaults: TweenDefaults | None = None,
    ) -> None:
        self.clock = clock
        self.defaults: TweenDefaults = defaults if defaults is not None else TweenDefaults()
        self._tweens: list[Tween] = []

    def __len__(self) -> int:
        return len(self._tweens)

    def __contains__(self, tween: object) -> bool:
        return any(t is tween for t in self._tweens)

    def __iter__(self) -> Iterator[Tween]:
        return iter(list(self._tweens))

    @property
    def tweens(self) -> list[Tween]:
        return list(self._tweens)

    def create(
        self,
        duration: float | None = None,
        easing: str | None = None,
        direction: str | None = None,
        **config: Any,
    ) -> Tween:
        """Build a tween from the runner defaults and register it."""
        config.setdefault("delay", self.defaults.delay)
        if self.clock is not None:
            config.setdefault("start_time", self.clock())
        tween = Tween(
            duration=self.defaults.duration if duration is None else duration,
            easing=self.defaults.easing if easing is None else easing,
            direction=self.defaults.direction if direction is None else direction,
            **config,
        )
        self.add(tween)
        return tween

    def add(self, tween: Tween) -> None:
        """Register a tween. Adding one twice is a no-op."""
        if tween not in self:
            self._tweens.append(tween)

    def remove(self, tween: Tween) -> None:
        """Release a tween without cancelling it."""
        self._tweens = [t for t in self._tweens if t is not tween]

    def tick(self, now: float) -> list[Tween]:
        """Tick every registered tween and drop the ones that finished.

        Returns the tweens released this tick, in registration order.
        """
        for tween in list(self._tweens):
            tween.tick(now)

        finished = [t for t in self._tweens if not t.is_alive]
        if finished:
            self._tweens = [t for t in self._tweens if t.is_alive]
            logger.debug("released %d finished tween(s) at %s", len(finished), now)
        return finished

    def cancel_all(self) -> None:
        """Cancel and release every registered tween."""
        for tween in self._tweens:
            tween.cancel()
        self._tweens.clear()


def create(
    owner: TweenRunner,
    duration: float | None = None,
    easing: str | None = None,
    direction: str | None = None,
    **config: Any,
) -> Tween:
    """Create a tween owned by ``owner``.

    Omitted arguments come from the owner's ``TweenDefaults`` (1.0 seconds,
    linear, ease_out unless configured otherwise).
    """
    return owner.create(duration, easing, direction, **config)
