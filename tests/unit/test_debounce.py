"""
Unit tests for the Debouncer.

Tests verify:
- A burst inside the quiet window runs once, with the last value
- Separate bursts each run, in order
- Callbacks already running are not cancelled
- Callback failures are logged
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from digestbench.services.debounce import Debouncer


class Recorder:
    """Callback that records (value, generation) pairs."""

    def __init__(self, delay: float = 0.0):
        self.calls: list[tuple[str, int]] = []
        self.finished: list[str] = []
        self.delay = delay

    async def __call__(self, value: str, generation: int) -> None:
        self.calls.append((value, generation))
        await asyncio.sleep(self.delay)
        self.finished.append(value)


class TestDebouncer:
    """Tests for timer-reset debouncing."""

    @pytest.mark.asyncio
    async def test_burst_runs_once_with_last_value(self):
        """Events at 0, 50 and 100 ms collapse into one run."""
        recorder = Recorder()
        debouncer = Debouncer(recorder, delay_ms=120)

        debouncer.submit("a")
        await asyncio.sleep(0.05)
        debouncer.submit("ab")
        await asyncio.sleep(0.05)
        debouncer.submit("abc")
        await debouncer.flush()

        assert recorder.calls == [("abc", 3)]
        assert debouncer.executed == 1
        assert debouncer.discarded == 2

    @pytest.mark.asyncio
    async def test_nothing_runs_before_quiet_window(self):
        recorder = Recorder()
        debouncer = Debouncer(recorder, delay_ms=120)

        debouncer.submit("a")
        await asyncio.sleep(0.03)

        assert recorder.calls == []
        assert debouncer.pending is True
        await debouncer.flush()
        assert recorder.calls == [("a", 1)]
        assert debouncer.pending is False

    @pytest.mark.asyncio
    async def test_separate_bursts_run_in_order(self):
        recorder = Recorder()
        debouncer = Debouncer(recorder, delay_ms=20)

        debouncer.submit("first")
        await asyncio.sleep(0.06)
        debouncer.submit("second")
        await debouncer.flush()

        assert [value for value, _ in recorder.calls] == ["first", "second"]
        assert debouncer.executed == 2

    @pytest.mark.asyncio
    async def test_running_callback_is_not_cancelled(self):
        """A newer submission abandons, but does not cancel, a running callback."""
        recorder = Recorder(delay=0.05)
        debouncer = Debouncer(recorder, delay_ms=0)

        first = debouncer.submit("old")
        await asyncio.sleep(0.01)  # callback for "old" is now running
        second = debouncer.submit("new")
        await debouncer.flush()

        assert recorder.finished == ["old", "new"]
        assert debouncer.is_current(first) is False
        assert debouncer.is_current(second) is True

    @pytest.mark.asyncio
    async def test_cancel_drops_pending(self):
        recorder = Recorder()
        debouncer = Debouncer(recorder, delay_ms=50)

        generation = debouncer.submit("a")
        debouncer.cancel()
        await debouncer.flush()
        await asyncio.sleep(0.08)

        assert recorder.calls == []
        assert debouncer.is_current(generation) is False

    @pytest.mark.asyncio
    async def test_flush_without_submissions(self):
        debouncer = Debouncer(Recorder())
        await debouncer.flush()
        assert debouncer.executed == 0

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            Debouncer(Recorder(), delay_ms=-1)

    @pytest.mark.asyncio
    async def test_failing_callback_is_logged(self):
        async def explode(value: str, generation: int) -> None:
            raise RuntimeError(f"render failed for {value}")

        logger = MagicMock()
        debouncer = Debouncer(explode, delay_ms=0, logger=logger)

        debouncer.submit("abc")
        await asyncio.sleep(0.02)

        logger.error.assert_called_once()
        assert "render failed for abc" in repr(logger.error.call_args)
        assert debouncer.executed == 1
