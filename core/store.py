"""In-memory website store.

Records live only as long as the process. A lock guards the map so the
store can be shared between the event loop and FastAPI's worker threads;
a Website is fully built before it is inserted, so readers never see a
partial record.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable

from core.models import Website

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 10


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WebsiteStore:
    """Keyed store of generated websites."""

    def __init__(
        self,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock
        self._websites: dict[str, Website] = {}
        self._lock = threading.Lock()

    def create_website(self, **fields: Any) -> Website:
        """Assign an id and timestamp, store the record, and return it."""
        with self._lock:
            website_id = self._id_factory()
            while website_id in self._websites:
                website_id = self._id_factory()
            website = Website(id=website_id, created_at=self._clock(), **fields)
            self._websites[website_id] = website

        logger.info("Stored website %s (%s)", website.id, website.name)
        return website

    def get_website(self, website_id: str) -> Website | None:
        """Return the website with this id, or None."""
        with self._lock:
            return self._websites.get(website_id)

    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[Website]:
        """Return websites newest first, at most `limit` of them."""
        if limit <= 0:
            return []
        with self._lock:
            websites = list(self._websites.values())
        websites.sort(key=lambda w: w.created_at, reverse=True)
        return websites[:limit]

    def __len__(self) -> int:
        with self._lock:
            return len(self._websites)
