"""Upstream LLM relay — OpenRouter chat completions and the fixed prompts."""

from kord.llm.openrouter import MissingAPIKeyError, OpenRouterClient, UpstreamError, UpstreamReply
from kord.llm.prompts import (
    HOSTILE_AUDITOR_PROMPT,
    INVESTIGATOR_PROMPT,
    build_brief_prompt,
    document_preview,
)

__all__ = [
    "HOSTILE_AUDITOR_PROMPT",
    "INVESTIGATOR_PROMPT",
    "MissingAPIKeyError",
    "OpenRouterClient",
    "UpstreamError",
    "UpstreamReply",
    "build_brief_prompt",
    "document_preview",
]
