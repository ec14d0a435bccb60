"""Drive an investigation through the fixed status steps to the example report."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from kord.investigation.highlight import find_highlights, segment_text
from kord.investigation.sample_report import build_sample_report
from kord.investigation.steps import INVESTIGATION_STEPS, InvestigationStep
from kord.investigation.store import InvestigationStore
from kord.schemas.models import Investigation, InvestigationStatus

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
StepCallback = Callable[[int, InvestigationStep], None]


class EmptyBriefError(ValueError):
    """Raised when an investigation is requested for blank text."""


class InvestigationRunner:
    """
    Walk the status steps, then attach the example report.

    The report does not depend on the brief; the brief is only used to
    locate quoted passages for highlighting.
    """

    def __init__(
        self,
        store: InvestigationStore | None = None,
        delay_scale: float = 1.0,
        steps: tuple[InvestigationStep, ...] = INVESTIGATION_STEPS,
        sleep: Sleep = asyncio.sleep,
        on_step: StepCallback | None = None,
    ):
        self._store = store
        self._delay_scale = max(delay_scale, 0.0)
        self._steps = steps
        self._sleep = sleep
        self._on_step = on_step

    def _save(self, investigation: Investigation) -> None:
        if self._store is not None:
            self._store.update(investigation)

    def start(self, investigation: Investigation, text: str) -> None:
        """Validate the brief and move the investigation from idle to analyzing."""
        if not text or not text.strip():
            raise EmptyBriefError("Please paste or upload a brief before starting an investigation.")
        investigation.status = InvestigationStatus.ANALYZING
        investigation.brief_chars = len(text)
        investigation.progress = 0
        investigation.step_index = 0
        investigation.current_step = self._steps[0].label if self._steps else None
        investigation.error_message = None
        self._save(investigation)

    async def run(self, investigation: Investigation, text: str) -> Investigation:
        """Run every step in order and finish with the example report."""
        if investigation.status != InvestigationStatus.ANALYZING:
            self.start(investigation, text)

        try:
            total = len(self._steps)
            for index, step in enumerate(self._steps):
                investigation.step_index = index
                investigation.current_step = step.label
                investigation.progress = int(index * 100 / total)
                self._save(investigation)
                logger.debug("Investigation %s: %s", investigation.investigation_id, step.label)
                if self._on_step is not None:
                    self._on_step(index, step)
                await self._sleep(step.delay_seconds * self._delay_scale)

            report = build_sample_report()
            investigation.report = report
            investigation.highlights = find_highlights(text, report)
            investigation.segments = segment_text(text, investigation.highlights)
            investigation.current_step = None
            investigation.progress = 100
            investigation.status = InvestigationStatus.COMPLETE
            self._save(investigation)
        except Exception as e:
            logger.exception("Investigation %s failed", investigation.investigation_id)
            investigation.status = InvestigationStatus.ERROR
            investigation.error_message = str(e)[:300] or "Investigation failed"
            self._save(investigation)
        logger.info(
            "Investigation %s finished with status %s",
            investigation.investigation_id,
            investigation.status.value,
        )
        return investigation
