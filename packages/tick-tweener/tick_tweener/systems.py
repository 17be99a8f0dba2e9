"""System factory driving a TweenRunner from a tick engine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_tweener.runner import TweenRunner
from tick_tweener.tween import Tween

if TYPE_CHECKING:
    from tick import TickContext, World


def make_tween_system(
    runner: TweenRunner,
    on_complete: Callable[[World, TickContext, Tween], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that ticks ``runner`` with the engine's elapsed time.

    ``on_complete`` is called for every tween the runner released that tick,
    after the tween's own listeners have run.
    """

    def tween_system(world: World, ctx: TickContext) -> None:
        finished = runner.tick(ctx.elapsed)
        if on_complete is not None:
            for tween in finished:
                on_complete(world, ctx, tween)

    return tween_system
