"""OpenRouter chat-completion client that relays the raw upstream reply."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from kord.config import Settings

logger = logging.getLogger(__name__)


class MissingAPIKeyError(Exception):
    """Raised when no upstream API key is configured."""


class UpstreamError(Exception):
    """Raised when the upstream API is unreachable or returns a non-JSON body."""


@dataclass
class UpstreamReply:
    """Status code and parsed JSON body exactly as returned upstream."""

    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content(self) -> str:
        """Text of the first choice, or "" when the body has none."""
        if not isinstance(self.body, dict):
            return ""
        choices = self.body.get("choices") or []
        if not choices:
            return ""
        message = choices[0].get("message") or {}
        return message.get("content") or ""


class OpenRouterClient:
    """Thin wrapper around the OpenRouter /chat/completions endpoint."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://openrouter.ai/api/v1",
        model: str = "mistralai/mistral-7b-instruct:free",
        referer: str = "http://localhost:3000",
        title: str = "Kord Legal",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        api_key = (api_key or "").strip()
        if not api_key:
            raise MissingAPIKeyError("API Key is not configured")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._referer = referer
        self._title = title
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "OpenRouterClient":
        return cls(
            api_key=settings.api_key,
            base_url=settings.openrouter_base_url,
            model=settings.kord_model,
            referer=settings.kord_http_referer,
            title=settings.kord_app_title,
            timeout=settings.kord_request_timeout,
            transport=transport,
        )

    @property
    def model(self) -> str:
        return self._model

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "HTTP-Referer": self._referer,
            "X-Title": self._title,
            "Content-Type": "application/json",
        }

    async def chat(self, system_prompt: str, user_prompt: str, **kwargs: Any) -> UpstreamReply:
        """POST one system + user exchange and return the upstream reply unchanged.

        Raises UpstreamError on transport failures or a body that is not JSON.
        """
        payload: dict[str, Any] = {
            "model": kwargs.pop("model", None) or self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        payload.update(kwargs)

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.post(
                    f"{self._base_url}/chat/completions",
                    headers=self._headers(),
                    json=payload,
                )
            except httpx.HTTPError as e:
                raise UpstreamError(f"Upstream request failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError(
                f"Upstream returned non-JSON body (status {response.status_code})"
            ) from e
        return UpstreamReply(status_code=response.status_code, body=body)
