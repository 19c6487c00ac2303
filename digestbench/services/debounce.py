"""
Debouncing of bursty input-change events.

A burst of submissions collapses into the most recent one once the input
has been quiet for the configured window. Superseded submissions produce
no output at all.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from ..core.di import resolve_or_default
from ..core.interfaces.logger import ILogger
from .logging import NullLogger

T = TypeVar("T")

DEFAULT_DEBOUNCE_MS = 120


class Debouncer(Generic[T]):
    """
    Timer-reset debouncer for one asyncio event loop.

    Each submit() bumps a generation counter, cancels the pending timer
    and starts a new one. When a timer survives its quiet window the
    callback runs with the submitted value and its generation. Callbacks
    that already started are never cancelled; use is_current() to decide
    whether their output is still wanted.

    Example:
        async def render(text: str, generation: int) -> None:
            results = await service.dispatch(text)
            if debouncer.is_current(generation):
                presenter.show_results(results)

        debouncer = Debouncer(render, delay_ms=120)
        debouncer.submit("a")
        debouncer.submit("ab")  # only "ab" is dispatched
        await debouncer.flush()
    """

    def __init__(
        self,
        callback: Callable[[T, int], Awaitable[None]],
        delay_ms: int = DEFAULT_DEBOUNCE_MS,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the debouncer.

        Args:
            callback: Coroutine function called with (value, generation)
            delay_ms: Quiet window in milliseconds
            logger: Diagnostic logger (defaults to container logger)
        """
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self._callback = callback
        self._delay = delay_ms / 1000
        self._logger = logger or resolve_or_default(ILogger, NullLogger)
        self._generation = 0
        self._timer: asyncio.Task[None] | None = None
        self._inflight: set[asyncio.Task[None]] = set()
        self.executed = 0
        self.discarded = 0

    @property
    def generation(self) -> int:
        """Generation of the most recent submission."""
        return self._generation

    @property
    def pending(self) -> bool:
        """Whether a submission is waiting out its quiet window."""
        return self._timer is not None and not self._timer.done()

    def is_current(self, generation: int) -> bool:
        """Whether no newer submission has been made since generation."""
        return generation == self._generation

    def submit(self, value: T) -> int:
        """
        Submit a new value, superseding any pending one.

        Must be called from within a running event loop.

        Returns:
            Generation number assigned to this submission
        """
        self._generation += 1
        if self.pending:
            self._timer.cancel()  # type: ignore[union-attr]
            self.discarded += 1
        self._timer = asyncio.get_running_loop().create_task(self._wait_then_fire(value, self._generation))
        return self._generation

    def cancel(self) -> None:
        """Drop the pending submission, if any, without running it."""
        if self.pending:
            self._timer.cancel()  # type: ignore[union-attr]
            self.discarded += 1
        # Invalidate callbacks still in flight
        self._generation += 1

    async def flush(self) -> None:
        """Wait for the pending submission and all started callbacks to finish."""
        if self._timer is not None:
            await asyncio.wait([self._timer])
        while self._inflight:
            await asyncio.gather(*list(self._inflight))

    async def _wait_then_fire(self, value: T, generation: int) -> None:
        await asyncio.sleep(self._delay)
        self.executed += 1
        self._logger.debug("Debounce window elapsed, running generation %d", generation)
        task = asyncio.get_running_loop().create_task(self._callback(value, generation))
        self._inflight.add(task)
        task.add_done_callback(self._callback_done)

    def _callback_done(self, task: asyncio.Task[None]) -> None:
        self._inflight.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._logger.error("Debounced callback failed: %r", error)
