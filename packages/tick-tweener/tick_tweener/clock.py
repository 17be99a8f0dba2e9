"""ManualClock - a host-advanced monotonic time source."""


class ManualClock:
    def __init__(self, now: float = 0.0) -> None:
        self._now = float(now)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, dt: float) -> float:
        if dt < 0:
            raise ValueError("dt must be non-negative")
        self._now += dt
        return self._now
