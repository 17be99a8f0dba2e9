"""Tests for chained tweens."""
import pytest

from tick_tweener import Tween, TweenRunner


class TestChain:
    """Chain targets stay idle until their source completes."""

    def test_target_is_idle_until_source_completes(self):
        first = Tween(start_time=0.0)
        second = Tween(start_time=0.0)
        updates = []
        second.on_update(updates.append)

        first.chain(second)
        second.tick(0.5)

        assert second.is_idle
        assert updates == []

    def test_target_times_from_activation(self):
        """The target measures elapsed time from the source's completion tick."""
        first = Tween(start_time=0.0)
        second = Tween(start_time=0.0)
        updates = []
        second.on_update(updates.append)
        first.chain(second)

        for now in [0.5, 1.0, 1.5, 2.0]:
            first.tick(now)
            second.tick(now)

        assert second.start_time == 1.0
        assert updates == pytest.approx([0.5, 1.0])
        assert second.is_complete

    def test_chains_activate_before_complete_listeners(self):
        first = Tween(start_time=0.0)
        second = Tween()
        first.chain(second)
        seen = []
        first.on_complete(lambda: seen.append((second.state, second.start_time)))

        first.tick(1.0)

        assert seen == [("running", 1.0)]

    def test_multiple_targets_keep_insertion_order(self):
        first = Tween(start_time=0.0)
        targets = [Tween(), Tween(delay=0.5), Tween()]
        for target in targets:
            first.chain(target)

        first.tick(1.0)

        assert first.chained == targets
        assert [t.state for t in targets] == ["running", "delaying", "running"]
        assert all(t.start_time == 1.0 for t in targets)

    def test_delayed_target_waits_after_activation(self):
        first = Tween(start_time=0.0)
        second = Tween(delay=0.5)
        updates = []
        second.on_update(updates.append)
        first.chain(second)

        first.tick(1.0)
        second.tick(1.25)
        assert updates == []

        second.tick(2.0)
        assert updates == pytest.approx([0.5])

    def test_looping_source_never_activates_chain(self):
        first = Tween(loop=True, start_time=0.0)
        second = Tween()
        first.chain(second)

        for now in [1.0, 2.0, 3.0]:
            first.tick(now)

        assert second.is_idle

    def test_cancelled_source_never_activates_chain(self):
        first = Tween(start_time=0.0)
        second = Tween()
        first.chain(second)
        completed = []
        first.on_complete(lambda: completed.append(True))

        first.cancel()
        first.tick(2.0)
        second.tick(2.5)

        assert second.start_time is None
        assert second.is_complete
        assert completed == []

    def test_activate_ignores_running_tween(self):
        """activate() only releases idle tweens."""
        tween = Tween(start_time=0.0)
        tween.activate(5.0)
        assert tween.start_time == 0.0


class TestChainEdges:
    """Chaining onto or from tweens that have already finished."""

    def test_completed_target_is_not_revived(self):
        """A finished target never runs or completes a second time."""
        first = Tween(start_time=0.0)
        second = Tween(start_time=0.0)
        events = []
        second.on_update(lambda v: events.append(("update", v)))
        second.on_complete(lambda: events.append("complete"))

        second.tick(1.0)
        first.chain(second)
        first.tick(1.0)
        second.tick(2.0)

        assert events == [("update", 1.0), "complete"]
        assert second.is_complete

    def test_cancel_cascades_to_waiting_targets(self):
        """Targets of a cancelled source are released by the runner."""
        runner = TweenRunner()
        first = runner.create()
        second = runner.create()
        third = runner.create()
        first.chain(second)
        second.chain(third)
        completed = []
        second.on_complete(lambda: completed.append(True))

        first.cancel()
        runner.tick(0.0)

        assert second.is_complete
        assert third.is_complete
        assert completed == []
        assert len(runner) == 0

    def test_cancel_leaves_running_targets_alone(self):
        """Cancelling a finished source leaves its released targets running."""
        first = Tween(start_time=0.0)
        second = Tween()
        first.chain(second)
        first.tick(1.0)

        first.cancel()

        assert second.state == "running"

    def test_chain_onto_completed_source_runs_target(self):
        """A target chained after its source finished is not suspended."""
        first = Tween(start_time=0.0)
        first.tick(1.0)
        second = Tween()
        updates = []
        second.on_update(updates.append)

        first.chain(second)
        second.tick(3.0)
        second.tick(3.5)

        assert second.start_time == 3.0
        assert updates == pytest.approx([0.5])

    def test_chain_onto_cancelled_source_cancels_target(self):
        first = Tween()
        first.cancel()
        second = Tween()

        first.chain(second)

        assert second.is_complete
