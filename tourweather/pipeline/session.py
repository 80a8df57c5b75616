"""Weather session: re-runs the orchestrator whenever its inputs change."""

import asyncio
import logging

from tourweather.models.source import TextSource
from tourweather.models.state import OrchestratorState
from tourweather.pipeline.orchestrator import CancelToken, WeatherOrchestrator

logger = logging.getLogger(__name__)


class WeatherSession:
    """Owns one OrchestratorState and at most one live run against it.

    A new run supersedes the previous one: the old run's token is cancelled
    before the new task starts, so its late responses are discarded.
    """

    def __init__(
        self,
        orchestrator: WeatherOrchestrator,
        state: OrchestratorState | None = None,
    ):
        self.orchestrator = orchestrator
        self.state = state or OrchestratorState()
        self._inputs: tuple[TextSource, str] | None = None
        self._token: CancelToken | None = None
        self._task: asyncio.Task | None = None

    def update(self, source: TextSource, language: str) -> asyncio.Task | None:
        """Start a run if ``source`` or ``language`` changed since the last call.

        Must be called from a running event loop. Returns the current task.
        """
        inputs = (source, language)
        if inputs == self._inputs:
            return self._task

        self._cancel_current()
        self._inputs = inputs
        if source.is_empty:
            self._task = None
            return None

        token = CancelToken()
        self._token = token
        self._task = asyncio.get_running_loop().create_task(
            self.orchestrator.run(source, self.state, language, token)
        )
        return self._task

    async def wait(self) -> bool:
        """Wait for the current run. False when there is none or it did not complete."""
        if self._task is None:
            return False
        return await self._task

    def close(self) -> None:
        """Tear down: cancel the in-flight run, if any."""
        self._cancel_current()
        self._inputs = None

    def _cancel_current(self) -> None:
        if self._token is not None and not self._token.cancelled:
            logger.debug("Cancelling superseded weather run")
            self._token.cancel()
        self._token = None
