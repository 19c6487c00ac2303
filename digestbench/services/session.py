"""
Interactive digest session.

Connects an input-change event stream to the dispatch service through a
debouncer and forwards each surviving result set to the presenter.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.di import resolve_or_default
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.models.digest import DigestResult
from .debounce import DEFAULT_DEBOUNCE_MS, Debouncer
from .dispatch import DispatchService
from .logging import NullLogger


class DigestSession:
    """
    Debounced dispatch bound to one presenter.

    Results of a dispatch are rendered only if no newer input arrived
    while it ran, so a slow, superseded dispatch can never overwrite the
    output of a later one.
    """

    def __init__(
        self,
        service: DispatchService,
        presenter: IPresenter,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        logger: ILogger | None = None,
    ) -> None:
        self._service = service
        self._presenter = presenter
        self._logger = logger or resolve_or_default(ILogger, NullLogger)
        self._debouncer: Debouncer[str] = Debouncer(self._run, delay_ms=debounce_ms, logger=self._logger)
        self.last_results: Sequence[DigestResult] | None = None
        self.render_count = 0

    @property
    def debouncer(self) -> Debouncer[str]:
        return self._debouncer

    def on_input(self, text: str) -> int:
        """Handle an input-change event. Returns its generation."""
        return self._debouncer.submit(text)

    async def drain(self) -> None:
        """Wait until the last submitted input has been rendered or dropped."""
        await self._debouncer.flush()

    async def _run(self, text: str, generation: int) -> None:
        results = await self._service.dispatch(text)
        if not self._debouncer.is_current(generation):
            self._logger.debug("Discarding results of superseded generation %d", generation)
            return
        self.last_results = results
        self.render_count += 1
        self._presenter.show_results(results)
