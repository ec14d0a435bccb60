"""Pydantic models for investigation reports and investigation sessions."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IssueCategory(str, Enum):
    CITATION_ERROR = "citation_error"
    UNSUPPORTED_CLAIM = "unsupported_claim"
    MISUSED_PRECEDENT = "misused_precedent"
    HALLUCINATION = "hallucination"


class CriticalIssue(BaseModel):
    """A problem with a specific passage of the brief."""

    issue_id: str
    category: IssueCategory
    severity: Severity
    quote: str  # verbatim passage from the brief
    problem: str
    citation: str | None = None
    suggestion: str = ""


class HallucinationSignal(BaseModel):
    """A writing pattern typical of AI-generated legal text."""

    signal_id: str
    pattern: str
    description: str
    example: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class FormattingIssue(BaseModel):
    """Citation-form (Bluebook) or layout problem."""

    issue_id: str
    rule: str
    quote: str
    problem: str
    fix: str = ""


class FilingVerdict(str, Enum):
    SAFE_TO_FILE = "safe_to_file"
    FILE_WITH_CAUTION = "file_with_caution"
    DO_NOT_FILE = "do_not_file"


class FilingReadiness(BaseModel):
    verdict: FilingVerdict
    summary: str
    risk_score: int = Field(default=0, ge=0, le=100)


class InvestigationReport(BaseModel):
    """Findings shown once an investigation completes."""

    citations_checked: int = 0
    citations_verified: int = 0
    claims_reviewed: int = 0
    critical_issues: list[CriticalIssue] = []
    hallucination_signals: list[HallucinationSignal] = []
    formatting_issues: list[FormattingIssue] = []
    filing_readiness: FilingReadiness

    @property
    def citations_flagged(self) -> int:
        return self.citations_checked - self.citations_verified

    def quoted_issues(self) -> list[CriticalIssue | FormattingIssue]:
        """Issues that point at a passage of the brief, in report order."""
        return [*self.critical_issues, *self.formatting_issues]


class InvestigationStatus(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    COMPLETE = "complete"
    ERROR = "error"


class HighlightSpan(BaseModel):
    """Character range of the brief that an issue quotes."""

    start: int
    end: int
    issue_id: str
    kind: str  # "critical" | "formatting"


class DocumentSegment(BaseModel):
    """A consecutive piece of the brief; highlighted when it carries an issue id."""

    text: str
    issue_id: str | None = None
    kind: str | None = None


class Investigation(BaseModel):
    """View state of one investigation, polled by the page."""

    investigation_id: str
    status: InvestigationStatus = InvestigationStatus.IDLE
    current_step: str | None = None
    step_index: int = 0
    progress: int = Field(default=0, ge=0, le=100)
    brief_chars: int = 0
    report: InvestigationReport | None = None
    highlights: list[HighlightSpan] = []
    segments: list[DocumentSegment] = []
    error_message: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
