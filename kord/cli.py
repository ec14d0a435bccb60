"""CLI entry-point: serve the web app, investigate a brief, or audit it upstream."""

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from kord.config import get_settings
from kord.ingest import ExtractionError, UnsupportedFileTypeError, extract_text
from kord.investigation import EmptyBriefError, InvestigationRunner, new_investigation_id
from kord.llm import (
    HOSTILE_AUDITOR_PROMPT,
    INVESTIGATOR_PROMPT,
    MissingAPIKeyError,
    OpenRouterClient,
    UpstreamError,
    build_brief_prompt,
)
from kord.report import (
    render_html_report,
    render_markdown_report,
    write_html_report,
    write_markdown_report,
)
from kord.report.markdown import VERDICT_LABELS
from kord.schemas.models import Investigation, InvestigationStatus

app = typer.Typer(help="Kord Legal — AI legal brief investigator")

SYSTEM_PROMPTS = {"verify": HOSTILE_AUDITOR_PROMPT, "investigate": INVESTIGATOR_PROMPT}


def _read_brief(console: Console, brief_path: str) -> str:
    path = Path(brief_path)
    if not path.exists():
        console.print(f"[red]Error: file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return extract_text(path.name, path.read_bytes())
    except (UnsupportedFileTypeError, ExtractionError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _print_summary(console: Console, investigation: Investigation) -> None:
    report = investigation.report
    readiness = report.filing_readiness
    console.print(
        f"[bold]Filing readiness:[/bold] {VERDICT_LABELS[readiness.verdict]} "
        f"(risk {readiness.risk_score}/100)"
    )
    table = Table(title="Critical issues")
    table.add_column("ID")
    table.add_column("Severity")
    table.add_column("Category")
    table.add_column("Problem")
    for issue in report.critical_issues:
        table.add_row(issue.issue_id, issue.severity.value, issue.category.value, issue.problem)
    console.print(table)
    console.print(f"{len(investigation.highlights)} quoted passage(s) found in the brief.")


@app.command()
def investigate(
    brief_path: str = typer.Argument(..., help="Brief to investigate (.txt, .pdf or .docx)"),
    fast: bool = typer.Option(False, "--fast", help="Skip the step delays"),
    format: str = typer.Option("summary", help="Output: summary, md, html or json"),
    output: str = typer.Option(None, help="Write the report to this file instead of stdout"),
):
    """Run the brief investigation locally and print the report."""
    console = Console()
    settings = get_settings()
    fmt = format.strip().lower()
    if fmt not in ("summary", "md", "html", "json"):
        console.print(f"[red]Error: unknown format '{format}'[/red]")
        raise typer.Exit(2)

    text = _read_brief(console, brief_path)
    runner = InvestigationRunner(
        delay_scale=0.0 if fast else settings.kord_step_delay_scale,
        on_step=lambda _i, step: console.print(f"[dim]{step.label}[/dim]"),
    )
    investigation = Investigation(investigation_id=new_investigation_id())
    try:
        runner.start(investigation, text)
    except EmptyBriefError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    asyncio.run(runner.run(investigation, text))

    if investigation.status != InvestigationStatus.COMPLETE:
        console.print(f"[red]Investigation failed: {investigation.error_message}[/red]")
        raise typer.Exit(1)

    brief_name = Path(brief_path).name
    if fmt == "summary":
        _print_summary(console, investigation)
        return
    if fmt == "md":
        content = render_markdown_report(investigation.report, brief_name=brief_name)
    elif fmt == "html":
        content = render_html_report(investigation.report, brief_name=brief_name)
    else:
        content = json.dumps(investigation.report.model_dump(mode="json"), indent=2)

    if output:
        if fmt == "html":
            write_html_report(output, content)
        elif fmt == "md":
            write_markdown_report(output, content)
        else:
            Path(output).parent.mkdir(parents=True, exist_ok=True)
            with open(output, "w", encoding="utf-8") as f:
                f.write(content)
        console.print(f"Report written to {output}")
    else:
        typer.echo(content)


@app.command()
def audit(
    brief_path: str = typer.Argument(..., help="Brief to send upstream (.txt, .pdf or .docx)"),
    route: str = typer.Option("verify", help="System prompt to use: verify | investigate"),
    raw: bool = typer.Option(False, "--raw", help="Print the raw upstream JSON"),
):
    """Send a brief to the upstream model with the chosen route's system prompt."""
    console = Console()
    settings = get_settings()
    if route not in SYSTEM_PROMPTS:
        console.print(f"[red]Error: unknown route '{route}' (use verify or investigate)[/red]")
        raise typer.Exit(2)

    text = _read_brief(console, brief_path)
    prompt = build_brief_prompt(text, filename=Path(brief_path).name)
    try:
        client = OpenRouterClient.from_settings(settings)
        console.print(f"Sending brief to {client.model}...")
        reply = asyncio.run(client.chat(SYSTEM_PROMPTS[route], prompt))
    except MissingAPIKeyError as e:
        console.print(f"[red]Error: {e} (set OPENROUTER_API_KEY)[/red]")
        raise typer.Exit(1)
    except UpstreamError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not reply.ok:
        console.print(f"[red]Upstream returned {reply.status_code}[/red]")
        typer.echo(json.dumps(reply.body, indent=2))
        raise typer.Exit(1)
    typer.echo(json.dumps(reply.body, indent=2) if raw else reply.content)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(None, help="Port (default from PORT or 8000)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the web app and API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("backend.main:app", host=host, port=port or settings.port, reload=reload)


if __name__ == "__main__":
    app()
