"""The pre-written example findings returned by every investigation."""

from kord.schemas.models import (
    CriticalIssue,
    FilingReadiness,
    FilingVerdict,
    FormattingIssue,
    HallucinationSignal,
    InvestigationReport,
    IssueCategory,
    Severity,
)

_SAMPLE_REPORT = InvestigationReport(
    citations_checked=14,
    citations_verified=10,
    claims_reviewed=22,
    critical_issues=[
        CriticalIssue(
            issue_id="CI-1",
            category=IssueCategory.HALLUCINATION,
            severity=Severity.CRITICAL,
            quote="Martinez v. Department of Transportation, 512 F.3d 1184 (9th Cir. 2019)",
            problem=(
                "Volume 512 of F.3d was published in 2007-2008. A 2019 Ninth Circuit opinion "
                "cannot appear there, and no case by this name exists at this cite."
            ),
            citation="512 F.3d 1184",
            suggestion="Remove the citation or replace it with verified authority for the same proposition.",
        ),
        CriticalIssue(
            issue_id="CI-2",
            category=IssueCategory.CITATION_ERROR,
            severity=Severity.HIGH,
            quote="Smith v. Jones, 442 U.S. 735 (1979)",
            problem=(
                "442 U.S. 735 is Smith v. Maryland, a Fourth Amendment pen-register case. "
                "The case name is wrong and the holding does not support the proposition cited."
            ),
            citation="442 U.S. 735",
            suggestion="Correct the case name and confirm the decision supports the argument before relying on it.",
        ),
        CriticalIssue(
            issue_id="CI-3",
            category=IssueCategory.MISUSED_PRECEDENT,
            severity=Severity.HIGH,
            quote="Under Chevron, this Court must defer to the agency's reasonable interpretation",
            problem=(
                "Chevron U.S.A., Inc. v. NRDC, 467 U.S. 837 (1984) was overruled by "
                "Loper Bright Enterprises v. Raimondo, 603 U.S. 369 (2024)."
            ),
            citation="467 U.S. 837",
            suggestion="Rebuild the argument under Loper Bright and Skidmore weight rather than Chevron deference.",
        ),
        CriticalIssue(
            issue_id="CI-4",
            category=IssueCategory.UNSUPPORTED_CLAIM,
            severity=Severity.MEDIUM,
            quote="Courts have uniformly held that such clauses are unenforceable",
            problem="No authority is cited for a universal rule, and several circuits enforce comparable clauses.",
            citation=None,
            suggestion="Cite controlling authority in this jurisdiction or narrow the claim.",
        ),
    ],
    hallucination_signals=[
        HallucinationSignal(
            signal_id="HS-1",
            pattern="Reporter/year mismatch",
            description="Citation volume is inconsistent with the decision year.",
            example="512 F.3d 1184 (9th Cir. 2019)",
            confidence=0.94,
        ),
        HallucinationSignal(
            signal_id="HS-2",
            pattern="Plausible but generic party names",
            description="Case names built from common surnames with no matching reported decision.",
            example="Smith v. Jones",
            confidence=0.71,
        ),
        HallucinationSignal(
            signal_id="HS-3",
            pattern="Overconfident universal assertion",
            description="Sweeping claims about what courts 'uniformly' or 'consistently' hold without citation.",
            example="Courts have uniformly held",
            confidence=0.63,
        ),
    ],
    formatting_issues=[
        FormattingIssue(
            issue_id="FI-1",
            rule="Bluebook Rule 3.2(a)",
            quote="Id. at 1184-85",
            problem="Short-form citation follows a different authority than the one it refers to.",
            fix="Use a full short form: Martinez, 512 F.3d at 1184-85.",
        ),
        FormattingIssue(
            issue_id="FI-2",
            rule="Bluebook Rule 10.2.1",
            quote="Department of Transportation",
            problem="Case name not abbreviated in a citation sentence.",
            fix="Abbreviate as Dep't of Transp.",
        ),
    ],
    filing_readiness=FilingReadiness(
        verdict=FilingVerdict.FILE_WITH_CAUTION,
        summary=(
            "One citation appears fabricated and one relies on overruled precedent. "
            "Resolve the critical issues before filing."
        ),
        risk_score=68,
    ),
)


def build_sample_report() -> InvestigationReport:
    """Return a fresh copy of the example report. Identical for every brief."""
    return _SAMPLE_REPORT.model_copy(deep=True)
