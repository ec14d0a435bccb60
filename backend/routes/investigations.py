"""Investigation routes — start a mocked investigation and poll its progress.

POST /api/investigations
  → Creates an Investigation, returns it with status "analyzing" immediately.
  → Background task walks the status steps and attaches the report.

GET /api/investigations/{investigation_id}
  → Returns status, current step, progress and (when complete) the report.

GET /api/investigations/{investigation_id}/report?format=json|md|html
"""

import logging
from typing import Literal

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from backend.dependencies import investigation_store, settings_dependency
from kord.config import Settings
from kord.investigation import EmptyBriefError, InvestigationRunner, new_investigation_id
from kord.investigation.store import InvestigationStore
from kord.report import render_html_report, render_markdown_report
from kord.schemas.models import Investigation, InvestigationReport, InvestigationStatus

logger = logging.getLogger(__name__)
router = APIRouter()


class StartInvestigationRequest(BaseModel):
    text: str
    brief_name: str | None = None


def _get_or_404(store: InvestigationStore, investigation_id: str) -> Investigation:
    investigation = store.get(investigation_id)
    if investigation is None:
        raise HTTPException(status_code=404, detail=f"Investigation not found: {investigation_id}")
    return investigation


@router.post(
    "/investigations",
    response_model=Investigation,
    status_code=status.HTTP_202_ACCEPTED,
)
async def start_investigation(
    request: StartInvestigationRequest,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(settings_dependency),
    store: InvestigationStore = Depends(investigation_store),
):
    """Start investigating a brief; poll GET /investigations/{id} for progress."""
    runner = InvestigationRunner(store=store, delay_scale=settings.kord_step_delay_scale)
    investigation = Investigation(investigation_id=new_investigation_id())
    try:
        runner.start(investigation, request.text)
    except EmptyBriefError as e:
        raise HTTPException(status_code=400, detail=str(e))

    store.create(investigation)
    logger.info(
        "Investigation %s started (%d chars, brief=%s)",
        investigation.investigation_id,
        investigation.brief_chars,
        request.brief_name or "pasted",
    )
    response = investigation.model_copy(deep=True)
    background_tasks.add_task(runner.run, investigation, request.text)
    return response


@router.get("/investigations/{investigation_id}", response_model=Investigation)
async def get_investigation(
    investigation_id: str,
    store: InvestigationStore = Depends(investigation_store),
):
    """Current view state of an investigation."""
    return _get_or_404(store, investigation_id)


@router.get("/investigations/{investigation_id}/report", response_model=InvestigationReport)
async def get_investigation_report(
    investigation_id: str,
    format: Literal["json", "md", "html"] = Query("json"),
    store: InvestigationStore = Depends(investigation_store),
):
    """Report of a completed investigation as JSON, Markdown or HTML."""
    investigation = _get_or_404(store, investigation_id)
    if investigation.status != InvestigationStatus.COMPLETE or investigation.report is None:
        raise HTTPException(
            status_code=409,
            detail=f"Investigation is {investigation.status.value}; report not available yet.",
        )

    report = investigation.report
    if format == "md":
        return Response(
            content=render_markdown_report(report),
            media_type="text/markdown; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{investigation_id}.md"'},
        )
    if format == "html":
        return HTMLResponse(render_html_report(report))
    return report
