"""Tests for FrameClock, Entity and FrameLoop."""

import pytest

from randgraph.core import Entity, Frame, FrameClock, FrameLoop


class RecordingEntity(Entity):
    """Appends (name, frame) to a shared log on every update."""

    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def update(self, frame):
        self.log.append((self.name, frame))


class TestFrameClock:
    def test_starts_at_zero(self):
        clock = FrameClock(frame_rate=50.0)
        assert clock.frame == 0
        assert clock.now == 0.0
        assert clock.dt == pytest.approx(0.02)

    def test_advance(self):
        clock = FrameClock(frame_rate=4.0)
        frame = clock.advance()
        clock.advance()

        assert frame == Frame(index=1, time_s=0.25, dt_s=0.25)
        assert clock.frame == 2
        assert clock.now == pytest.approx(0.5)

    @pytest.mark.parametrize("rate", [0.0, -30.0])
    def test_rejects_non_positive_rate(self, rate):
        with pytest.raises(ValueError, match="frame_rate must be positive"):
            FrameClock(rate)


class TestEntity:
    def test_now_requires_clock(self):
        entity = RecordingEntity("orphan", [])
        with pytest.raises(RuntimeError, match="not attached to a frame loop"):
            _ = entity.now

    def test_loop_injects_clock(self):
        entity = RecordingEntity("e", [])
        loop = FrameLoop([entity], frame_rate=10.0)
        loop.run(3)

        assert entity.now == pytest.approx(0.3)

    def test_cannot_instantiate_abstract_entity(self):
        with pytest.raises(TypeError):
            Entity("abstract")


class TestFrameLoop:
    def test_updates_entities_in_order_each_frame(self):
        log = []
        loop = FrameLoop([RecordingEntity("a", log), RecordingEntity("b", log)], frame_rate=2.0)

        loop.step()
        loop.step()

        assert [(name, frame.index) for name, frame in log] == [("a", 0), ("b", 0), ("a", 1), ("b", 1)]
        assert log[2][1].time_s == pytest.approx(0.5)

    def test_step_returns_frame_that_ran(self):
        loop = FrameLoop(frame_rate=10.0)
        first = loop.step()
        second = loop.step()

        assert first.index == 0
        assert second.index == 1
        assert loop.clock.frame == 2

    def test_run_returns_total_frames(self):
        log = []
        loop = FrameLoop([RecordingEntity("a", log)])

        assert loop.run(5) == 5
        assert loop.run(3) == 8
        assert len(log) == 8

    def test_run_zero_frames(self):
        loop = FrameLoop()
        assert loop.run(0) == 0

    def test_run_rejects_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            FrameLoop().run(-1)

    def test_add_after_construction(self):
        log = []
        loop = FrameLoop()
        loop.add(RecordingEntity("late", log))
        loop.step()

        assert [e.name for e in loop.entities] == ["late"]
        assert len(log) == 1
