# ============================================================================
# FILE: tests/unit/test_index_publisher.py
# ============================================================================
"""
Unit tests for index publishing
"""

import pytest

from music_enrichment.indexing import (
    IndexPublisher,
    TaskPollingPolicy,
    TaskState,
    extract_task_id,
)
from music_enrichment.utils.exceptions import (
    IndexBackendError,
    IndexConfigError,
    IndexTaskError,
    IndexWriteError,
)


OBJECTS = [{"objectID": "music_1", "title": "BWV 147"}]
ATTRIBUTES = ["title", "ai_description"]


def make_publisher(backend, sleep, timeout=10.0):
    policy = TaskPollingPolicy(initial_delay=1.0, max_delay=2.0, multiplier=2.0, timeout=timeout)
    return IndexPublisher(backend, policy, sleep=sleep)


@pytest.mark.asyncio
async def test_publish_confirmed(fake_backend_factory, instant_sleep):
    """Settings -> write -> confirmed task"""
    backend = fake_backend_factory(statuses=["notPublished", "published"])
    publisher = make_publisher(backend, instant_sleep)

    task = await publisher.publish("works", ATTRIBUTES, OBJECTS)

    assert task.state is TaskState.CONFIRMED
    assert task.task_id == 42
    assert task.polls == 2
    assert backend.calls == ["set_settings", "save_objects", "get_task_status", "get_task_status"]
    assert backend.settings == {"searchableAttributes": ATTRIBUTES}
    assert backend.saved == OBJECTS


@pytest.mark.asyncio
async def test_settings_failure_blocks_write(fake_backend_factory, instant_sleep):
    backend = fake_backend_factory(settings_error=IndexBackendError("forbidden", status=403))
    publisher = make_publisher(backend, instant_sleep)

    with pytest.raises(IndexConfigError) as exc_info:
        await publisher.publish("works", ATTRIBUTES, OBJECTS)

    assert exc_info.value.index_name == "works"
    assert "configure" in str(exc_info.value)
    assert backend.calls == ["set_settings"]


@pytest.mark.asyncio
async def test_missing_task_id(fake_backend_factory, instant_sleep):
    """Acknowledgment without taskID is a write error carrying the payload"""
    ack = {"objectIDs": ["music_1"]}
    backend = fake_backend_factory(save_response=ack)
    publisher = make_publisher(backend, instant_sleep)

    with pytest.raises(IndexWriteError) as exc_info:
        await publisher.publish("works", ATTRIBUTES, OBJECTS)

    assert exc_info.value.reason == "missing task id"
    assert exc_info.value.raw_response == ack
    assert "get_task_status" not in backend.calls


@pytest.mark.asyncio
async def test_write_call_failure(fake_backend_factory, instant_sleep):
    details = {"message": "Record too big", "status": 400}
    backend = fake_backend_factory(save_error=IndexBackendError("bad request", status=400, details=details))
    publisher = make_publisher(backend, instant_sleep)

    with pytest.raises(IndexWriteError) as exc_info:
        await publisher.publish("works", ATTRIBUTES, OBJECTS)

    assert exc_info.value.raw_response == details


@pytest.mark.asyncio
async def test_task_status_error(fake_backend_factory, instant_sleep):
    backend = fake_backend_factory(statuses=[IndexBackendError("server error", status=500)])
    publisher = make_publisher(backend, instant_sleep)

    with pytest.raises(IndexTaskError) as exc_info:
        await publisher.publish("works", ATTRIBUTES, OBJECTS)

    assert exc_info.value.task_id == 42


@pytest.mark.asyncio
async def test_task_timeout(fake_backend_factory):
    """Never-published task fails once the policy budget is spent"""
    slept = []

    async def record_sleep(seconds):
        slept.append(seconds)

    backend = fake_backend_factory(statuses=["notPublished"])
    publisher = make_publisher(backend, record_sleep, timeout=5.0)

    with pytest.raises(IndexTaskError, match="not published"):
        await publisher.publish("works", ATTRIBUTES, OBJECTS)

    assert slept == [1.0, 2.0, 2.0]
    assert sum(slept) == 5.0


@pytest.mark.asyncio
async def test_enriched_records_converted(fake_backend_factory, instant_sleep, sample_records):
    from music_enrichment.core.models import EnrichedRecord
    from music_enrichment.enrichers import EnrichmentOutcome

    records = [EnrichedRecord(r, EnrichmentOutcome.degraded("boom")) for r in sample_records]
    backend = fake_backend_factory()

    await make_publisher(backend, instant_sleep).publish("works", ATTRIBUTES, records)

    assert [o["objectID"] for o in backend.saved] == ["music_1", "music_2", "music_3"]
    assert backend.saved[0]["ai_description"] == "AI enrichment failed."


class TestExtractTaskId:
    """Task id lookup in acknowledgments"""

    def test_dict(self):
        assert extract_task_id({"taskID": 7}) == 7

    def test_list_first_element(self):
        assert extract_task_id([{"taskID": 8}, {"taskID": 9}]) == 8

    def test_missing(self):
        assert extract_task_id({}) is None
        assert extract_task_id([]) is None
        assert extract_task_id(None) is None
        assert extract_task_id("ok") is None

    def test_zero_is_a_valid_id(self):
        assert extract_task_id({"taskID": 0}) == 0
