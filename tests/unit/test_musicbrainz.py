# ============================================================================
# FILE: tests/unit/test_musicbrainz.py
# ============================================================================
"""
Unit tests for the MusicBrainz fetcher (no network)
"""

import pytest

from music_enrichment.core.pacing import NoDelayPacer
from music_enrichment.sources import MusicBrainzClient, format_work
from music_enrichment.utils.exceptions import MusicBrainzError


BACH = {"id": "24f1766e-9635-4d58-a4d4-9413f9f98a4c", "name": "Johann Sebastian Bach", "type": "Person"}


def make_client():
    return MusicBrainzClient({"user_agent": "Test/1.0 (t@example.org)"}, pacer=NoDelayPacer())


def test_format_work():
    work = {
        "id": "abc",
        "title": "Cantata BWV 147",
        "type": "Cantata",
        "language": "deu",
        "attributes": [{"type": "Key", "value": "C major"}, "Catalogue: BWV 147"],
    }

    record = format_work(work, BACH)

    assert record["objectID"] == "music_abc"
    assert record["mbid"] == "abc"
    assert record["composer"] == "Johann Sebastian Bach"
    assert record["composer_mbid"] == BACH["id"]
    assert record["attributes"] == ["Key: C major", "Catalogue: BWV 147"]
    assert record["iswcs"] == []
    assert record["lyrics"] is None


def test_format_work_without_id():
    record = format_work({"title": "Untitled"}, BACH, index=3)
    assert record["objectID"].startswith("music_")
    assert record["objectID"].endswith("_3")


def test_requires_user_agent():
    with pytest.raises(ValueError):
        MusicBrainzClient({})


@pytest.mark.asyncio
async def test_fetch_limits_works(monkeypatch):
    client = make_client()

    async def fake_get(path, params):
        if path == "artist":
            return {"artists": [{"id": "x", "name": "Johann Sebastian Bach", "type": "Group"}, BACH]}
        return {"works": [{"id": str(i), "title": f"Work {i}"} for i in range(10)]}

    monkeypatch.setattr(client, "_get", fake_get)

    works = await client.fetch_composer_works("Johann Sebastian Bach", limit=3)

    assert [w["objectID"] for w in works] == ["music_0", "music_1", "music_2"]
    assert all(w["composer_mbid"] == BACH["id"] for w in works)


@pytest.mark.asyncio
async def test_unknown_composer_returns_empty(monkeypatch):
    client = make_client()

    async def fake_get(path, params):
        return {"artists": [{"id": "y", "name": "J. S. Bach Tribute Band", "type": "Group"}]}

    monkeypatch.setattr(client, "_get", fake_get)

    assert await client.fetch_composer_works("Johann Sebastian Bach") == []


@pytest.mark.asyncio
async def test_service_error_returns_empty(monkeypatch):
    client = make_client()

    async def fake_get(path, params):
        raise MusicBrainzError("MusicBrainz error (503): slow down")

    monkeypatch.setattr(client, "_get", fake_get)

    assert await client.fetch_composer_works("Johann Sebastian Bach") == []


def client_with(session):
    client = make_client()
    client._session = session
    return client


@pytest.mark.asyncio
async def test_get_sends_json_format(fake_session_factory, fake_response_factory):
    session = fake_session_factory([
        fake_response_factory(200, {"artists": [BACH]}),
        fake_response_factory(200, {"works": [{"id": "w1", "title": "Mass in B minor"}, "junk"]}),
    ])
    client = client_with(session)

    works = await client.fetch_composer_works("Johann Sebastian Bach", limit=0)

    assert [w["objectID"] for w in works] == ["music_w1"]
    assert session.requests[0]["params"] == {"query": "Johann Sebastian Bach", "fmt": "json"}
    assert session.requests[1]["params"] == {"inc": "works", "fmt": "json"}


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [
    {"status": 200, "text": "<html>Rate limited</html>"},
    {"status": 200, "payload": ["not", "an", "object"]},
    {"status": 503, "text": "slow down"},
])
async def test_bad_service_reply_returns_empty(fake_session_factory, fake_response_factory, response):
    client = client_with(fake_session_factory([fake_response_factory(**response)]))

    assert await client.fetch_composer_works("Johann Sebastian Bach") == []


@pytest.mark.asyncio
async def test_non_json_body_raises_service_error(fake_session_factory, fake_response_factory):
    client = client_with(fake_session_factory([fake_response_factory(200, text="<html></html>")]))

    with pytest.raises(MusicBrainzError, match="non-JSON body"):
        await client.search_artist("Johann Sebastian Bach")
