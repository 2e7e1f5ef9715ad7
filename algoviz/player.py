"""Paced, pausable, cancelable delivery of a step sequence.

The player pulls one step at a time from a StepSequence, hands it to the
subscriber, then waits the inter-step delay. Pulling a step and delivering it
happen under the player's lock, so pause/cancel requests from other threads
take effect between steps, never inside one. Cancelling closes the tracker
generator where it is suspended; the last delivered step is the final state.
"""

import logging
import threading
import time

from .config import DEFAULT_DELAY_MS, DEFAULT_DELAY_SCHEDULE
from .errors import AlgoVizError, InputFormatError, InvalidOperation
from .steps import StepSequence

logger = logging.getLogger(__name__)

IDLE = "idle"
PLAYING = "playing"
PAUSED = "paused"
CANCELLED = "cancelled"
COMPLETED = "completed"
FAILED = "failed"

TERMINAL_STATES = (CANCELLED, COMPLETED, FAILED)


def _check_delay(delay_ms):
    if isinstance(delay_ms, bool) or not isinstance(delay_ms, (int, float)) or delay_ms < 0:
        raise InputFormatError(f"Delay must be a non-negative number of milliseconds, got {delay_ms!r}",
                               delay_ms=repr(delay_ms))
    return delay_ms


class StepPlayer:
    """
    Deliver steps to `on_step` with `delay_ms` between deliveries.

    Terminal notices: `on_complete(result)` when the sequence is exhausted,
    `on_error(exc)` when the engine or a callback raises, `on_cancel()` after
    cancel(). Exactly one of them is called per run. Without an `on_error`
    callback, errors are re-raised from play().
    """

    def __init__(self, sequence, on_step, delay_ms=DEFAULT_DELAY_MS, on_complete=None,
                 on_error=None, on_cancel=None, delay_schedule=None):
        if not isinstance(sequence, StepSequence):
            sequence = StepSequence(iter(sequence))
        self.sequence = sequence
        self.on_step = on_step
        self.on_complete = on_complete
        self.on_error = on_error
        self.on_cancel = on_cancel
        self.delay_schedule = dict(DEFAULT_DELAY_SCHEDULE if delay_schedule is None else delay_schedule)
        self._delay_ms = _check_delay(delay_ms)

        self._cond = threading.Condition()
        self._state = IDLE
        self._pause_requested = False
        self._cancel_requested = False
        self._running = False
        self._thread = None
        self._finished = threading.Event()

        self.delivered = 0
        self.last_delivered = None
        self.error = None

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------

    @property
    def state(self):
        return self._state

    @property
    def delay_ms(self):
        return self._delay_ms

    def set_delay(self, delay_ms):
        """Change the inter-step delay; a wait already in progress keeps its old length."""
        with self._cond:
            self._delay_ms = _check_delay(delay_ms)

    def pause(self):
        with self._cond:
            if self._state in TERMINAL_STATES:
                return False
            self._pause_requested = True
            if self._state == PLAYING:
                self._set_state(PAUSED)
            return True

    def resume(self):
        with self._cond:
            if self._state in TERMINAL_STATES:
                return False
            self._pause_requested = False
            if self._state == PAUSED and self._running:
                self._set_state(PLAYING)
            self._cond.notify_all()
            return True

    def cancel(self):
        """Stop delivery. Idempotent; returns False if the run had already ended."""
        with self._cond:
            if self._cancel_requested or self._state in TERMINAL_STATES:
                return False
            self._cancel_requested = True
            self._cond.notify_all()
            running = self._running
        if not running:
            self._finish_cancelled()
        return True

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def start(self):
        """Run play() on a daemon thread and return the thread."""
        with self._cond:
            if self._thread is not None or self._state != IDLE:
                raise InvalidOperation("Player has already been started", state=self._state)
            self._thread = threading.Thread(target=self._play_in_thread, daemon=True,
                                            name=f"step-player-{self.sequence.algorithm_id or 'run'}")
        self._thread.start()
        return self._thread

    def join(self, timeout=None):
        """Wait for the run to reach a terminal state; True if it did."""
        return self._finished.wait(timeout)

    def play(self):
        """Deliver every remaining step in the calling thread."""
        with self._cond:
            if self._running or self._state in TERMINAL_STATES:
                raise InvalidOperation("Player is not in a playable state", state=self._state)
            self._running = True
            self._set_state(PAUSED if self._pause_requested else PLAYING)
        logger.info("Playback started for %s (delay %s ms)", self.sequence.algorithm_id, self._delay_ms)

        while True:
            with self._cond:
                while self._pause_requested and not self._cancel_requested:
                    self._cond.wait()
                if self._cancel_requested:
                    break
                if self._state == PAUSED:
                    self._set_state(PLAYING)
                outcome = self._advance()
            if outcome is not None:
                self._finish(*outcome)
                return
            self._wait_delay()

        self._finish_cancelled()

    def step_once(self):
        """Deliver exactly one step without any delay; None once the run is over."""
        with self._cond:
            if self._running:
                raise InvalidOperation("Cannot single-step while playing", state=self._state)
            if self._state in TERMINAL_STATES:
                return None
            outcome = self._advance()
        if outcome is not None:
            self._finish(*outcome)
            return None
        return self.last_delivered

    def _play_in_thread(self):
        try:
            self.play()
        except Exception:
            # kept in self.error by _finish
            logger.exception("Step player thread stopped with an error")

    def _advance(self):
        """Pull and deliver one step. Returns a terminal (state, payload) or None."""
        try:
            step = next(self.sequence)
        except StopIteration:
            return COMPLETED, self.sequence.result
        except AlgoVizError as exc:
            logger.warning("Run %s aborted: %s", self.sequence.algorithm_id, exc)
            return FAILED, exc
        except Exception as exc:
            logger.exception("Unexpected error inside run %s", self.sequence.algorithm_id)
            return FAILED, exc

        try:
            self.on_step(step)
        except Exception as exc:
            logger.exception("Step subscriber raised; aborting run %s", self.sequence.algorithm_id)
            self.sequence.close()
            return FAILED, exc
        self.delivered += 1
        self.last_delivered = step
        return None

    def _wait_delay(self):
        step = self.last_delivered
        with self._cond:
            multiplier = self.delay_schedule.get(step.kind, 1.0) if step is not None else 1.0
            deadline = time.monotonic() + self._delay_ms * multiplier / 1000.0
            while not self._cancel_requested:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                self._cond.wait(remaining)

    # ------------------------------------------------------------------
    # Terminal transitions
    # ------------------------------------------------------------------

    def _set_state(self, state):
        if state != self._state:
            logger.debug("Player %s: %s -> %s", self.sequence.algorithm_id, self._state, state)
            self._state = state

    def _finish(self, state, payload):
        with self._cond:
            self._running = False
            self._set_state(state)
        self._finished.set()
        if state == COMPLETED:
            logger.info("Run %s completed after %d steps", self.sequence.algorithm_id, self.delivered)
            if self.on_complete is not None:
                self.on_complete(payload)
            return
        self.error = payload
        if self.on_error is not None:
            self.on_error(payload)
        else:
            raise payload

    def _finish_cancelled(self):
        with self._cond:
            self._running = False
            if self._state in TERMINAL_STATES:
                return
            self._set_state(CANCELLED)
        self.sequence.close()
        self._finished.set()
        logger.info("Run %s cancelled after %d steps", self.sequence.algorithm_id, self.delivered)
        if self.on_cancel is not None:
            self.on_cancel()
