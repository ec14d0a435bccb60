"""Shared FastAPI dependencies (overridable in tests)."""

import httpx

from kord.config import Settings, get_settings
from kord.investigation.store import InvestigationStore, get_investigation_store


def settings_dependency() -> Settings:
    return get_settings()


def upstream_transport() -> httpx.AsyncBaseTransport | None:
    """Transport for upstream calls; None uses httpx's network transport."""
    return None


def investigation_store() -> InvestigationStore:
    return get_investigation_store()
