"""In-process investigation storage for page polling."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime
from typing import Protocol

from kord.schemas.models import Investigation

logger = logging.getLogger(__name__)


class InvestigationStore(Protocol):
    def create(self, investigation: Investigation) -> Investigation: ...
    def get(self, investigation_id: str) -> Investigation | None: ...
    def update(self, investigation: Investigation) -> None: ...


class MemoryInvestigationStore:
    """Keep investigations in a dict. Lost on restart; the results are fixed anyway."""

    def __init__(self, max_items: int = 1000):
        self._items: dict[str, Investigation] = {}
        self._max_items = max_items
        self._lock = threading.Lock()

    def create(self, investigation: Investigation) -> Investigation:
        with self._lock:
            if len(self._items) >= self._max_items:
                oldest = min(self._items.values(), key=lambda i: i.created_at)
                del self._items[oldest.investigation_id]
                logger.debug("Evicted investigation %s", oldest.investigation_id)
            self._items[investigation.investigation_id] = investigation
        return investigation

    def get(self, investigation_id: str) -> Investigation | None:
        with self._lock:
            return self._items.get(investigation_id)

    def update(self, investigation: Investigation) -> None:
        """Replace a stored investigation. Unknown or evicted ids are ignored."""
        with self._lock:
            if investigation.investigation_id not in self._items:
                logger.debug("Ignoring update for unknown investigation %s", investigation.investigation_id)
                return
            investigation.updated_at = datetime.utcnow()
            self._items[investigation.investigation_id] = investigation

    def __len__(self) -> int:
        return len(self._items)


_store: InvestigationStore | None = None


def get_investigation_store() -> InvestigationStore:
    """Return the process-wide investigation store."""
    global _store
    if _store is None:
        _store = MemoryInvestigationStore()
        logger.info("Using in-memory investigation store")
    return _store


def new_investigation_id() -> str:
    return f"inv_{uuid.uuid4().hex[:16]}"
