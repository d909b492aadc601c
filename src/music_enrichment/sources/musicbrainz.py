# ============================================================================
# src/music_enrichment/sources/musicbrainz.py
# ============================================================================
"""
MusicBrainz Work Fetcher

Produces the raw input batch: searches a composer by name, looks up their
works and maps each work to a RawRecord-shaped dict.

MusicBrainz asks clients to send a descriptive User-Agent and to stay under
one request per second; both are enforced here.
"""

import aiohttp
import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

from ..core.pacing import MinIntervalPacer, Pacer
from ..utils.exceptions import MusicBrainzError


DEFAULT_BASE_URL = "https://musicbrainz.org/ws/2"


def _format_attribute(attribute: Any) -> str:
    if isinstance(attribute, dict):
        kind = attribute.get("type")
        value = attribute.get("value")
        if kind and value:
            return f"{kind}: {value}"
        return str(value or kind or "")
    return str(attribute)


def format_work(work: Dict[str, Any], composer: Dict[str, Any], index: int = 0) -> Dict[str, Any]:
    """Map a MusicBrainz work to the raw record layout."""
    work_id = work.get("id")
    object_id = f"music_{work_id}" if work_id else f"music_{int(time.time() * 1000)}_{index}"
    attributes = [_format_attribute(a) for a in work.get("attributes") or []]

    return {
        "objectID": object_id,
        "mbid": work_id,
        "title": work.get("title"),
        "type": work.get("type"),
        "iswcs": work.get("iswcs") or [],
        "attributes": [a for a in attributes if a],
        "language": work.get("language"),
        "composer": composer.get("name"),
        "composer_mbid": composer.get("id"),
        "lyrics": None,
        "score_url": None,
        "audio_sample_url": None,
    }


class MusicBrainzClient:
    """
    Minimal MusicBrainz JSON web service client.

    Config options:
        user_agent: 'AppName/Version (contact)' (required)
        base_url: Web service root (default: https://musicbrainz.org/ws/2)
        timeout: Request timeout in seconds (default: 30)
        min_interval: Seconds between requests (default: 1.0)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, pacer: Optional[Pacer] = None):
        self.config = config or {}
        self.user_agent = self.config.get('user_agent')
        if not self.user_agent:
            raise ValueError("MusicBrainz user_agent is required")

        self.base_url = (self.config.get('base_url') or DEFAULT_BASE_URL).rstrip('/')
        self.timeout = self.config.get('timeout', 30)
        self.pacer = pacer or MinIntervalPacer(self.config.get('min_interval', 1.0))

        self._session: Optional[aiohttp.ClientSession] = None
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Any) -> "MusicBrainzClient":
        return cls({
            'user_agent': settings.MUSICBRAINZ_USER_AGENT,
            'base_url': settings.MUSICBRAINZ_BASE_URL,
            'timeout': settings.MUSICBRAINZ_TIMEOUT,
            'min_interval': settings.MUSICBRAINZ_MIN_INTERVAL,
        })

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            )
        return self._session

    async def close(self):
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _get(self, path: str, params: Dict[str, str]) -> Dict[str, Any]:
        await self.pacer.wait()
        params = {**params, "fmt": "json"}
        try:
            session = await self._get_session()
            async with session.get(f"{self.base_url}/{path}", params=params) as response:
                if response.status != 200:
                    error_text = await response.text()
                    raise MusicBrainzError(f"MusicBrainz error ({response.status}): {error_text[:300]}")
                data = await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise MusicBrainzError(f"MusicBrainz request timed out after {self.timeout}s") from e
        except aiohttp.ClientError as e:
            raise MusicBrainzError(f"MusicBrainz request failed: {e}") from e
        except ValueError as e:
            raise MusicBrainzError(f"MusicBrainz returned a non-JSON body: {e}") from e

        if not isinstance(data, dict):
            raise MusicBrainzError(f"Unexpected MusicBrainz response: {type(data).__name__}")
        return data

    async def search_artist(self, name: str) -> Optional[Dict[str, Any]]:
        """Exact-name match of type Person, or None."""
        data = await self._get("artist", {"query": name})
        for artist in data.get("artists") or []:
            if not isinstance(artist, dict):
                continue
            if artist.get("name") == name and artist.get("type") == "Person":
                return artist
        self.logger.debug(f"Artist search result: {data}")
        return None

    async def lookup_works(self, artist_id: str) -> List[Dict[str, Any]]:
        data = await self._get(f"artist/{artist_id}", {"inc": "works"})
        works = data.get("works") or []
        if not isinstance(works, list):
            raise MusicBrainzError("Unexpected MusicBrainz response: works is not a list")
        return [work for work in works if isinstance(work, dict)]

    async def fetch_composer_works(self, composer_name: str, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Fetch up to limit works (0 = all) by a composer.

        Returns:
            Raw record dicts; [] when the composer is unknown or the
            service fails
        """
        self.logger.info(f"Fetching works by composer: {composer_name}...")
        try:
            composer = await self.search_artist(composer_name)
            if composer is None:
                self.logger.error(
                    f"Composer '{composer_name}' not found on MusicBrainz or no exact match found."
                )
                return []

            self.logger.info(f"Found composer: {composer['name']} (MBID: {composer['id']})")
            works = await self.lookup_works(composer["id"])
        except MusicBrainzError as e:
            self.logger.error(f"Error fetching works for {composer_name}: {e}")
            return []

        if limit > 0:
            works = works[:limit]
        if not works:
            self.logger.warning(f"No works found for {composer['name']}.")
            return []

        records = [format_work(work, composer, i) for i, work in enumerate(works)]
        self.logger.info(f"Successfully fetched {len(records)} works for {composer['name']}.")
        return records
