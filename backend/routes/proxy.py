"""Upstream relay routes: forward a prompt to OpenRouter and return its reply verbatim.

POST /api/verify       — hostile-auditor system prompt, body {prompt, requestId?}
POST /api/investigate  — investigator system prompt, body {prompt}

Bodies are read raw; anything that is not a JSON object with a string
`prompt` fails inside the relay and is reported as a 500.
"""

import logging
import time

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from backend.dependencies import settings_dependency, upstream_transport
from kord.config import Settings
from kord.llm import (
    HOSTILE_AUDITOR_PROMPT,
    INVESTIGATOR_PROMPT,
    MissingAPIKeyError,
    OpenRouterClient,
    document_preview,
)

logger = logging.getLogger(__name__)
router = APIRouter()


class MalformedPromptError(ValueError):
    """Raised when the request body carries no string `prompt`."""


async def _read_prompt(request: Request) -> tuple[str, str | None]:
    body = await request.json()
    if not isinstance(body, dict) or not isinstance(body.get("prompt"), str):
        raise MalformedPromptError("Request body must be a JSON object with a string 'prompt'")
    request_id = body.get("requestId")
    return body["prompt"], str(request_id) if request_id is not None else None


async def _relay(
    system_prompt: str,
    request: Request,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None,
) -> JSONResponse:
    """Forward one prompt upstream; 401 without a key, 500 on anything unexpected."""
    try:
        prompt, request_id = await _read_prompt(request)
        logger.info("API request %s", request_id or int(time.time() * 1000))
        logger.info("Doc preview: %s", document_preview(prompt))

        try:
            client = OpenRouterClient.from_settings(settings, transport=transport)
        except MissingAPIKeyError:
            logger.error("OPENROUTER_API_KEY is missing from the environment")
            return JSONResponse({"error": "API Key is not configured"}, status_code=401)

        reply = await client.chat(system_prompt, prompt)

        if not reply.ok:
            logger.error("OpenRouter error %s: %s", reply.status_code, reply.body)
            return JSONResponse(reply.body, status_code=reply.status_code)

        return JSONResponse(reply.body)
    except Exception:
        logger.exception("Upstream relay failed")
        return JSONResponse({"error": "Internal Server Error"}, status_code=500)


@router.post("/verify")
async def verify(
    request: Request,
    settings: Settings = Depends(settings_dependency),
    transport: httpx.AsyncBaseTransport | None = Depends(upstream_transport),
):
    """Audit a brief with the hostile-auditor prompt and relay the model's reply."""
    return await _relay(HOSTILE_AUDITOR_PROMPT, request, settings, transport)


@router.post("/investigate")
async def investigate(
    request: Request,
    settings: Settings = Depends(settings_dependency),
    transport: httpx.AsyncBaseTransport | None = Depends(upstream_transport),
):
    """Review a brief with the investigator prompt and relay the model's reply."""
    return await _relay(INVESTIGATOR_PROMPT, request, settings, transport)
