import time

import pytest

from algoviz.dispatcher import run
from algoviz.errors import InputFormatError, InvalidOperation, PreconditionViolation
from algoviz.player import CANCELLED, COMPLETED, FAILED, IDLE, PAUSED, StepPlayer
from algoviz.steps import VISIT, Step, StepSequence


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class Recorder:
    def __init__(self):
        self.steps = []
        self.completed = []
        self.errors = []
        self.cancels = 0

    def on_step(self, step):
        self.steps.append(step)

    def on_complete(self, result):
        self.completed.append(result)

    def on_error(self, exc):
        self.errors.append(exc)

    def on_cancel(self):
        self.cancels += 1

    def player(self, sequence, **kwargs):
        kwargs.setdefault("delay_ms", 0)
        return StepPlayer(sequence, self.on_step, on_complete=self.on_complete,
                          on_error=self.on_error, on_cancel=self.on_cancel, **kwargs)


def test_play_delivers_every_step_in_order():
    expected = list(run([3, 1, 2], "bubble_sort"))
    rec = Recorder()
    player = rec.player(run([3, 1, 2], "bubble_sort"))
    assert player.state == IDLE

    player.play()

    assert player.state == COMPLETED
    assert rec.steps == expected
    assert rec.completed == [(1, 2, 3)]
    assert rec.cancels == 0 and rec.errors == []


def test_cancel_from_subscriber_stops_delivery():
    rec = Recorder()
    sequence = run([5, 4, 3, 2, 1], "bubble_sort")
    player = rec.player(sequence)

    def on_step(step):
        rec.steps.append(step)
        if len(rec.steps) == 3:
            player.cancel()

    player.on_step = on_step
    player.play()

    assert player.state == CANCELLED
    assert len(rec.steps) == 3
    assert player.delivered == 3
    assert player.last_delivered.snapshot == rec.steps[-1].snapshot
    assert rec.cancels == 1
    assert rec.completed == []
    assert sequence.closed
    assert list(sequence) == []


def test_cancel_is_idempotent():
    rec = Recorder()
    player = rec.player(run([2, 1], "bubble_sort"))
    assert player.cancel() is True
    assert player.cancel() is False
    assert player.state == CANCELLED
    assert rec.cancels == 1
    assert player.join(0) is True


def test_cancelled_player_cannot_start():
    player = Recorder().player(run([2, 1], "bubble_sort"))
    player.cancel()
    with pytest.raises(InvalidOperation):
        player.start()


def test_cancel_after_completion_is_a_no_op():
    rec = Recorder()
    player = rec.player(run([2, 1], "bubble_sort"))
    player.play()
    assert player.cancel() is False
    assert player.state == COMPLETED
    assert rec.cancels == 0


def test_pause_before_start_holds_delivery_until_resume():
    rec = Recorder()
    player = rec.player(run([4, 3, 2, 1], "insertion_sort"))
    player.pause()
    player.start()

    assert _wait_for(lambda: player.state == PAUSED)
    time.sleep(0.05)
    assert rec.steps == []

    player.resume()
    assert player.join(timeout=5)
    assert player.state == COMPLETED
    assert rec.completed == [(1, 2, 3, 4)]


def test_pause_mid_run_then_cancel():
    rec = Recorder()
    player = rec.player(run([4, 3, 2, 1], "bubble_sort"))

    def on_step(step):
        rec.steps.append(step)
        if len(rec.steps) == 2:
            player.pause()

    player.on_step = on_step
    player.start()

    assert _wait_for(lambda: player.state == PAUSED)
    time.sleep(0.05)
    assert len(rec.steps) == 2

    assert player.cancel()
    assert player.join(timeout=5)
    assert player.state == CANCELLED
    assert len(rec.steps) == 2
    assert rec.cancels == 1


def test_start_twice_is_rejected():
    player = Recorder().player(run([2, 1], "bubble_sort"))
    player.start()
    with pytest.raises(InvalidOperation):
        player.start()
    assert player.join(timeout=5)


def test_set_delay_validation():
    player = Recorder().player(run([2, 1], "bubble_sort"))
    player.set_delay(250)
    assert player.delay_ms == 250
    for bad in (-1, "fast", None, True):
        with pytest.raises(InputFormatError):
            player.set_delay(bad)
    assert player.delay_ms == 250
    with pytest.raises(InputFormatError):
        StepPlayer(run([2, 1], "bubble_sort"), print, delay_ms=-5)


def test_delay_is_waited_between_steps():
    rec = Recorder()
    player = rec.player(run([1, 2], "bubble_sort"), delay_ms=40, delay_schedule={})
    started = time.monotonic()
    player.play()
    assert time.monotonic() - started >= 0.035
    assert rec.completed == [(1, 2)]


def _failing_steps():
    yield Step(VISIT, (0,), "first")
    raise PreconditionViolation("broken input")


def test_engine_error_goes_to_on_error():
    rec = Recorder()
    player = rec.player(StepSequence(_failing_steps(), "failing"))
    player.play()

    assert player.state == FAILED
    assert len(rec.steps) == 1
    assert isinstance(rec.errors[0], PreconditionViolation)
    assert player.error is rec.errors[0]
    assert rec.completed == []


def test_engine_error_is_raised_without_on_error():
    player = StepPlayer(_failing_steps(), lambda step: None, delay_ms=0)
    with pytest.raises(PreconditionViolation):
        player.play()
    assert player.state == FAILED


def test_subscriber_error_aborts_run():
    rec = Recorder()
    sequence = run([3, 2, 1], "selection_sort")
    player = rec.player(sequence)

    def on_step(step):
        raise ValueError("render failed")

    player.on_step = on_step
    player.play()

    assert player.state == FAILED
    assert isinstance(rec.errors[0], ValueError)
    assert player.delivered == 0
    assert sequence.closed


def test_step_once():
    rec = Recorder()
    player = rec.player(run([1, 3, 5], "binary_search", {"target": 3}))

    first = player.step_once()
    assert first.kind == VISIT
    second = player.step_once()
    assert second.kind == "found"
    assert player.step_once() is None
    assert player.state == COMPLETED
    assert rec.completed[0].index == 1
    assert player.step_once() is None


def test_pause_resume_delivers_the_same_steps_as_an_unpaced_run():
    expected = list(run([5, 1, 4, 2, 3], "bubble_sort"))
    rec = Recorder()
    player = rec.player(run([5, 1, 4, 2, 3], "bubble_sort"))

    def on_step(step):
        rec.steps.append(step)
        if len(rec.steps) == 3:
            player.pause()

    player.on_step = on_step
    player.start()

    assert _wait_for(lambda: player.state == PAUSED)
    time.sleep(0.05)
    assert len(rec.steps) == 3

    player.resume()
    assert player.join(timeout=5)
    assert player.state == COMPLETED
    assert rec.steps == expected
    assert rec.completed == [(1, 2, 3, 4, 5)]


def test_set_delay_mid_run_shortens_following_waits():
    rec = Recorder()
    player = rec.player(run([1, 2, 3], "bubble_sort"), delay_ms=5000, delay_schedule={})

    def on_step(step):
        rec.steps.append(step)
        if len(rec.steps) == 1:
            player.set_delay(0)

    player.on_step = on_step
    player.start()

    assert player.join(timeout=2)
    assert player.state == COMPLETED
    assert player.delay_ms == 0


def test_set_delay_mid_run_lengthens_following_wait():
    rec = Recorder()
    player = rec.player(run([1, 2], "bubble_sort"), delay_schedule={})

    def on_step(step):
        rec.steps.append(step)
        player.set_delay(60)

    player.on_step = on_step
    started = time.monotonic()
    player.play()

    assert time.monotonic() - started >= 0.055
    assert player.state == COMPLETED
