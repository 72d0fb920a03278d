"""Pipeline orchestration and UI state ownership.

Architectural role:
    Sequences one pipeline run (analysis -> dependent illustration) and owns the
    state container read by the HTTP adapter. Every transition publishes a fresh
    `ViewState` snapshot to subscribers, which is what triggers a re-render.

Control-flow model:
    1. Blank submissions are ignored (no network call, no state change).
    2. A new run clears error, result and image and sets `loading`.
    3. Analysis result is published immediately with a pending image.
    4. The illustration outcome (ready or unavailable) completes the run.
    5. Any analysis failure ends the run with the fixed `ERROR_MESSAGE`.

Concurrency:
    Runs execute on one asyncio loop and may overlap; nothing is cancelled. Each run
    is tagged with a monotonically increasing sequence number when submitted and
    only writes state while that number is still the latest, so a slow stale run
    can never overwrite a newer one.

Error handling strategy:
    The whole pipeline is one unit of failure. The underlying cause is logged with
    traceback; the user only sees `ERROR_MESSAGE`. Image failures never arrive here
    as exceptions.
"""

import logging
from dataclasses import replace
from typing import Callable

from ai_vs_professions.core.result_types import ImageOutcome, ViewState
from ai_vs_professions.image.service import generate_illustration
from ai_vs_professions.llm.service import analyze_profession


logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Произошла ошибка при анализе. Попробуйте еще раз."

Listener = Callable[[ViewState], None]


class Orchestrator:
    """Owns the UI state and drives pipeline runs against one shared client.

    Args:
        client: Transport client shared by both services.
        analyze: Analysis coroutine `(client, profession) -> AnalysisResult`.
        illustrate: Illustration coroutine `(client, prompt) -> ImageOutcome`.
    """

    def __init__(self, client, analyze=analyze_profession, illustrate=generate_illustration):
        self.client = client
        self._analyze = analyze
        self._illustrate = illustrate
        self._state = ViewState()
        self._latest_sequence = 0
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def latest_sequence(self) -> int:
        return self._latest_sequence

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener` for state changes and return its unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: ViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")

    def _is_current(self, sequence: int) -> bool:
        return sequence == self._latest_sequence

    def begin(self, text: str) -> int | None:
        """Start a run synchronously and return its sequence number.

        Returns `None` for blank text, leaving state untouched. The caller must then
        drive the run with `run(sequence, text)`.
        """
        if not text or not text.strip():
            logger.debug("Ignoring blank submission")
            return None

        self._latest_sequence += 1
        sequence = self._latest_sequence

        logger.info("Run %d started for profession=%r", sequence, text)
        self._publish(ViewState(profession=text, loading=True, sequence=sequence))
        return sequence

    async def run(self, sequence: int, text: str) -> None:
        """Execute analysis then illustration for a run opened with `begin`."""
        try:
            analysis = await self._analyze(self.client, text)
        except Exception:
            logger.exception("Analysis failed for run %d", sequence)
            if not self._is_current(sequence):
                logger.info("Dropping stale failure of run %d", sequence)
                return
            self._publish(replace(self._state, loading=False, error=ERROR_MESSAGE))
            return

        if not self._is_current(sequence):
            logger.info("Dropping stale analysis of run %d", sequence)
            return

        self._publish(replace(self._state, result=analysis, image=ImageOutcome.pending()))

        outcome = await self._illustrate(self.client, analysis.image_prompt)

        if not self._is_current(sequence):
            logger.info("Dropping stale illustration of run %d", sequence)
            return

        logger.info("Run %d finished image=%s", sequence, outcome.status)
        self._publish(replace(self._state, loading=False, image=outcome))

    async def submit(self, text: str) -> bool:
        """Run the full pipeline for `text`.

        Returns:
            False when the submission was blank and ignored, True otherwise
            (including runs that ended in the error state).
        """
        sequence = self.begin(text)
        if sequence is None:
            return False

        await self.run(sequence, text)
        return True
