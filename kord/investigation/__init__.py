"""Mocked brief investigation: timed status steps and a fixed example report."""

from kord.investigation.highlight import find_highlights, segment_text
from kord.investigation.runner import EmptyBriefError, InvestigationRunner
from kord.investigation.sample_report import build_sample_report
from kord.investigation.steps import INVESTIGATION_STEPS, InvestigationStep, total_delay
from kord.investigation.store import (
    MemoryInvestigationStore,
    get_investigation_store,
    new_investigation_id,
)

__all__ = [
    "EmptyBriefError",
    "INVESTIGATION_STEPS",
    "InvestigationRunner",
    "InvestigationStep",
    "MemoryInvestigationStore",
    "build_sample_report",
    "find_highlights",
    "get_investigation_store",
    "new_investigation_id",
    "segment_text",
    "total_delay",
]
