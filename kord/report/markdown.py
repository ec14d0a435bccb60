"""Markdown report: filing verdict, critical issues, hallucination signals, formatting."""

from pathlib import Path

from kord.schemas.models import FilingVerdict, InvestigationReport

VERDICT_LABELS = {
    FilingVerdict.SAFE_TO_FILE: "Safe to file",
    FilingVerdict.FILE_WITH_CAUTION: "File with caution",
    FilingVerdict.DO_NOT_FILE: "Do not file",
}


def _cell(value: str | None) -> str:
    return (value or "").replace("|", "\\|").replace("\n", " ")


def render_markdown_report(report: InvestigationReport, brief_name: str = "") -> str:
    """Assemble a single Markdown report with all sections."""
    sections: list[str] = []

    sections.append("# Kord Legal — Brief Investigation Report\n")
    if brief_name:
        sections.append(f"**Brief:** `{brief_name}`  \n")
    sections.append("---\n")

    readiness = report.filing_readiness
    sections.append("## 1. Filing Readiness\n")
    sections.append(f"- **Verdict:** {VERDICT_LABELS[readiness.verdict]}  \n")
    sections.append(f"- **Risk score:** {readiness.risk_score}/100  \n")
    sections.append(f"- {readiness.summary}\n\n")
    sections.append(
        f"Citations checked: {report.citations_checked} · "
        f"verified: {report.citations_verified} · "
        f"flagged: {report.citations_flagged} · "
        f"claims reviewed: {report.claims_reviewed}\n"
    )
    sections.append("\n---\n")

    sections.append("## 2. Critical Issues\n")
    for issue in report.critical_issues:
        sections.append(f"### {issue.issue_id} [{issue.severity.value}] {issue.category.value.replace('_', ' ')}\n")
        sections.append(f"> {issue.quote}\n\n")
        sections.append(f"- **Problem:** {issue.problem}\n")
        if issue.citation:
            sections.append(f"- **Citation:** `{issue.citation}`\n")
        if issue.suggestion:
            sections.append(f"- *Suggestion:* {issue.suggestion}\n")
        sections.append("\n")
    sections.append("---\n")

    sections.append("## 3. Hallucination Signals\n")
    sections.append("| Signal | Pattern | Confidence | Example |\n|--------|---------|------------|---------|\n")
    for s in report.hallucination_signals:
        sections.append(f"| {s.signal_id} | {_cell(s.pattern)} | {s.confidence:.0%} | {_cell(s.example)} |\n")
    sections.append("\n---\n")

    sections.append("## 4. Formatting Issues\n")
    sections.append("| Issue | Rule | Passage | Fix |\n|-------|------|---------|-----|\n")
    for f in report.formatting_issues:
        sections.append(f"| {f.issue_id} | {_cell(f.rule)} | {_cell(f.quote)} | {_cell(f.fix)} |\n")

    return "".join(sections)


def write_markdown_report(output_path: str | Path, content: str) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(content, encoding="utf-8")
