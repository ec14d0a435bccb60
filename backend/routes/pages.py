"""Web page: paste/upload a brief and watch the investigation."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from kord.ingest import SUPPORTED_EXTENSIONS, UNSUPPORTED_FILE_MESSAGE
from kord.investigation import INVESTIGATION_STEPS

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "kord" / "templates"

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "steps": [step.label for step in INVESTIGATION_STEPS],
            "accept": ",".join(SUPPORTED_EXTENSIONS),
            "unsupported_message": UNSUPPORTED_FILE_MESSAGE,
        },
    )
