"""Tests for core.store."""

import threading
from datetime import datetime, timedelta, timezone

import pytest

from core.models import GeneratedContent, GenerationRequest, website_fields
from core.store import WebsiteStore

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


class StepClock:
    """Clock that advances one second per call."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return START + timedelta(seconds=self.calls)


def _fields(name: str = "Acme") -> dict:
    request = GenerationRequest(name=name, description="d" * 60)
    content = GeneratedContent(html="<p>x</p>", css="p {}", navigation_items=["Home"], footer_content="f")
    return website_fields(request, content)


def test_get_unknown_id():
    assert WebsiteStore().get_website("never-issued") is None


def test_create_then_get():
    store = WebsiteStore()
    website = store.create_website(**_fields())
    assert store.get_website(website.id) == website
    assert website.name == "Acme"
    assert website.created_at.tzinfo is not None


def test_ids_are_unique():
    store = WebsiteStore()
    ids = {store.create_website(**_fields()).id for _ in range(50)}
    assert len(ids) == 50
    assert len(store) == 50


def test_id_collision_retried():
    """A repeated id from the factory is never reused."""
    issued = iter(["a", "a", "b"])
    store = WebsiteStore(id_factory=lambda: next(issued))
    first = store.create_website(**_fields("One"))
    second = store.create_website(**_fields("Two"))
    assert (first.id, second.id) == ("a", "b")
    assert store.get_website("a").name == "One"


def test_list_recent_newest_first():
    store = WebsiteStore(clock=StepClock())
    for name in ("First", "Second", "Third"):
        store.create_website(**_fields(name))

    recent = store.list_recent(2)

    assert [w.name for w in recent] == ["Third", "Second"]


def test_list_recent_default_limit():
    store = WebsiteStore(clock=StepClock())
    for i in range(12):
        store.create_website(**_fields(f"Site {i}"))
    recent = store.list_recent()
    assert len(recent) == 10
    assert recent[0].name == "Site 11"


def test_list_recent_empty_and_zero():
    store = WebsiteStore()
    assert store.list_recent() == []
    store.create_website(**_fields())
    assert store.list_recent(0) == []


def test_records_are_immutable():
    website = WebsiteStore().create_website(**_fields())
    with pytest.raises(AttributeError):
        website.html = "<p>changed</p>"


def test_concurrent_creates():
    """Parallel writers never lose or corrupt records."""
    store = WebsiteStore()
    created = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(25):
            website = store.create_website(**_fields())
            with lock:
                created.append(website.id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 200
    assert all(store.get_website(i) is not None for i in created)
