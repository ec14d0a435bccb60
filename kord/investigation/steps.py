"""Fixed sequence of status labels shown while a brief is investigated."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvestigationStep:
    label: str
    delay_seconds: float


INVESTIGATION_STEPS: tuple[InvestigationStep, ...] = (
    InvestigationStep("Parsing document structure...", 0.8),
    InvestigationStep("Extracting citations and quoted authority...", 1.2),
    InvestigationStep("Cross-referencing case law databases...", 1.5),
    InvestigationStep("Checking claims against cited authority...", 1.2),
    InvestigationStep("Scanning for AI hallucination patterns...", 1.0),
    InvestigationStep("Assessing filing readiness...", 0.8),
)


def total_delay(scale: float = 1.0) -> float:
    """Seconds an investigation takes at the given delay scale."""
    return sum(step.delay_seconds for step in INVESTIGATION_STEPS) * max(scale, 0.0)
