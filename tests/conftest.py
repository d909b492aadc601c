# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import json
from typing import Any, Dict, List, Optional

import pytest

from music_enrichment.core.models import RawRecord
from music_enrichment.gemini.base import BaseGenerativeClient, BackendType
from music_enrichment.indexing.base import BaseIndexBackend, TASK_PUBLISHED


VALID_RESPONSE = json.dumps({
    "description": "A Baroque sacred cantata for chorus and orchestra.",
    "mood": ["Joyful", "Devotional"],
    "keywords": "Cantata, Choral, Baroque, Sacred, Orchestral",
    "semantic_tags": ["Devotion", "Celebration"],
    "similar_works_description": "Similar to other Lutheran church cantatas.",
})


class FakeGenerativeClient(BaseGenerativeClient):
    """Replays scripted replies; an Exception entry is raised instead."""

    def __init__(self, replies: Optional[List[Any]] = None, default: Any = VALID_RESPONSE):
        super().__init__({})
        self.replies = list(replies or [])
        self.default = default
        self.prompts: List[str] = []

    @property
    def backend_type(self) -> BackendType:
        return BackendType.GEMINI

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def generate(self, prompt, max_tokens=None, temperature=None) -> Dict[str, Any]:
        self.prompts.append(prompt)
        reply = self.replies.pop(0) if self.replies else self.default
        if isinstance(reply, Exception):
            raise reply
        return {"text": reply, "model": self.model_name, "backend": "gemini"}


class FakeIndexBackend(BaseIndexBackend):
    """In-memory index backend recording every call."""

    def __init__(
        self,
        save_response: Any = None,
        statuses: Optional[List[Any]] = None,
        settings_error: Optional[Exception] = None,
        save_error: Optional[Exception] = None,
    ):
        self.save_response = {"taskID": 42, "objectIDs": []} if save_response is None else save_response
        self.statuses = list(statuses or [TASK_PUBLISHED])
        self.settings_error = settings_error
        self.save_error = save_error
        self.calls: List[str] = []
        self.settings: Dict[str, Any] = {}
        self.saved: List[Dict[str, Any]] = []

    async def set_settings(self, index_name, settings):
        self.calls.append("set_settings")
        if self.settings_error:
            raise self.settings_error
        self.settings = settings
        return {"taskID": 1}

    async def save_objects(self, index_name, objects):
        self.calls.append("save_objects")
        if self.save_error:
            raise self.save_error
        self.saved = list(objects)
        return self.save_response

    async def get_task_status(self, index_name, task_id):
        self.calls.append("get_task_status")
        status = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
        if isinstance(status, Exception):
            raise status
        return status


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, status: int = 200, payload: Any = None, text: Optional[str] = None,
                 error: Optional[BaseException] = None):
        self.status = status
        self._text = text if text is not None else json.dumps(payload)
        self.error = error

    async def __aenter__(self):
        if self.error is not None:
            raise self.error
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def text(self) -> str:
        return self._text

    async def json(self, content_type=None) -> Any:
        return json.loads(self._text)


class FakeSession:
    """Stand-in for aiohttp.ClientSession replaying scripted responses."""

    def __init__(self, responses: List[FakeResponse]):
        self.responses = list(responses)
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def _next(self, method, url, **kwargs) -> FakeResponse:
        self.requests.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)

    def post(self, url, json=None):
        return self._next("POST", url, json=json)

    def get(self, url, params=None):
        return self._next("GET", url, params=params)

    def request(self, method, url, json=None):
        return self._next(method, url, json=json)

    async def close(self):
        self.closed = True


async def no_sleep(_seconds):
    return None


@pytest.fixture
def sample_works() -> List[Dict[str, Any]]:
    """Raw works as written by the fetch step"""
    return [
        {
            "objectID": "music_1",
            "mbid": "1",
            "title": "Herz und Mund und Tat und Leben, BWV 147",
            "type": "Cantata",
            "iswcs": [],
            "attributes": ["Key: C major"],
            "language": "deu",
            "composer": "Johann Sebastian Bach",
            "composer_mbid": "24f1766e",
            "lyrics": None,
        },
        {
            "objectID": "music_2",
            "title": "Mass in B minor, BWV 232",
            "type": "Mass",
            "attributes": [],
            "language": "lat",
            "composer": "Johann Sebastian Bach",
        },
        {
            "objectID": "music_3",
            "title": "Goldberg Variations, BWV 988",
            "composer": "Johann Sebastian Bach",
        },
    ]


@pytest.fixture
def sample_records(sample_works) -> List[RawRecord]:
    return [RawRecord.model_validate(w) for w in sample_works]


@pytest.fixture
def works_file(tmp_path, sample_works):
    path = tmp_path / "music_metadata.json"
    path.write_text(json.dumps(sample_works), encoding="utf-8")
    return path


@pytest.fixture
def fake_client_factory():
    return FakeGenerativeClient


@pytest.fixture
def fake_backend_factory():
    return FakeIndexBackend


@pytest.fixture
def fake_session_factory():
    return FakeSession


@pytest.fixture
def fake_response_factory():
    return FakeResponse


@pytest.fixture
def instant_sleep():
    return no_sleep
