"""Forecast session: owns the current result and orders competing lookups.

Each submitted query gets a monotonically increasing generation token.
A builder result is applied only while its token is still the latest one;
a newer submission cancels the older request task and any result that
still arrives for it is dropped.
"""

import asyncio
import logging
from collections.abc import Callable

from skycast.models.forecast import ForecastResult, Idle, Pending
from skycast.pipeline.forecast_builder import ForecastBuilder, encode_query, select

logger = logging.getLogger(__name__)

Listener = Callable[[ForecastResult], None]


class ForecastSession:
    def __init__(self, builder: ForecastBuilder):
        self.builder = builder
        self.state: ForecastResult = Idle()
        self._generation = 0
        self._inflight: asyncio.Task | None = None
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    async def submit(self, query: str) -> ForecastResult:
        """Look up a user-entered location and return the resulting state.

        Blank queries are ignored and leave the state untouched. If the
        caller cancels the latest lookup the state returns to Idle before
        the cancellation propagates.
        """
        cleaned = query.strip()
        if not cleaned:
            logger.debug("Ignoring blank query")
            return self.state

        self._generation += 1
        token = self._generation

        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._apply(Pending(cleaned))

        task = asyncio.ensure_future(self.builder.build(encode_query(cleaned)))
        self._inflight = task
        try:
            result = await task
        except asyncio.CancelledError:
            if token != self._generation:
                logger.debug("Lookup for %r superseded", cleaned)
                return self.state
            # cancelled by the caller
            self._inflight = None
            self._apply(Idle())
            raise

        if token != self._generation:
            logger.debug("Dropping stale result for %r", cleaned)
            return self.state

        self._inflight = None
        self._apply(result)
        return result

    def select(self, index: int) -> ForecastResult:
        """Select another day of the current Ready result. No request is made."""
        self._apply(select(self.state, index))
        return self.state

    def _apply(self, state: ForecastResult) -> None:
        self.state = state
        for listener in self._listeners:
            listener(state)
