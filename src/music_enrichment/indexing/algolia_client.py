# ============================================================================
# src/music_enrichment/indexing/algolia_client.py
# ============================================================================
"""
Algolia Index Backend

Talks to the Algolia REST API directly:

    PUT  /1/indexes/{index}/settings
    POST /1/indexes/{index}/batch          (updateObject actions)
    GET  /1/indexes/{index}/task/{taskID}

Writes go to {app_id}.algolia.net, reads to {app_id}-dsn.algolia.net.
"""

import aiohttp
import asyncio
import json
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from .base import BaseIndexBackend
from ..utils.exceptions import IndexBackendError


class AlgoliaIndexBackend(BaseIndexBackend):
    """
    Algolia REST client.

    Config options:
        app_id: Application id (required)
        api_key: Admin API key (required)
        timeout: Request timeout in seconds (default: 30)
        write_host / read_host: Override hosts (tests, proxies)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.app_id = self.config.get('app_id')
        self.api_key = self.config.get('api_key')
        if not self.app_id or not self.api_key:
            raise ValueError("Algolia app_id and api_key are required")

        self.timeout = self.config.get('timeout', 30)
        self.write_host = self.config.get('write_host') or f"https://{self.app_id}.algolia.net"
        self.read_host = self.config.get('read_host') or f"https://{self.app_id}-dsn.algolia.net"

        self._session: Optional[aiohttp.ClientSession] = None
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Any) -> "AlgoliaIndexBackend":
        return cls({
            'app_id': settings.ALGOLIA_APP_ID,
            'api_key': settings.ALGOLIA_ADMIN_API_KEY,
            'timeout': settings.ALGOLIA_TIMEOUT,
        })

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={
                    "X-Algolia-Application-Id": self.app_id,
                    "X-Algolia-API-Key": self.api_key,
                    "Content-Type": "application/json",
                },
            )
        return self._session

    async def close(self):
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    @staticmethod
    def _index_path(index_name: str) -> str:
        return f"/1/indexes/{quote(index_name, safe='')}"

    async def _request(self, method: str, url: str, payload: Any = None) -> Any:
        try:
            session = await self._get_session()
            async with session.request(method, url, json=payload) as response:
                if response.status >= 400:
                    body = await self._error_body(response)
                    if isinstance(body, dict):
                        message = body.get("message")
                    else:
                        message = str(body)[:200] or None
                    raise IndexBackendError(
                        f"Algolia API Error: Status {response.status} - {message or 'no message'}",
                        status=response.status,
                        details=body,
                    )
                return await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise IndexBackendError(f"Algolia request timed out after {self.timeout}s") from e
        except aiohttp.ClientError as e:
            raise IndexBackendError(f"Algolia request failed: {e}") from e
        except ValueError as e:
            raise IndexBackendError(f"Algolia returned a non-JSON body: {e}") from e

    @staticmethod
    async def _error_body(response: aiohttp.ClientResponse) -> Any:
        """Error payload as JSON when possible, raw text otherwise."""
        text = await response.text()
        try:
            return json.loads(text)
        except ValueError:
            return text

    async def set_settings(self, index_name: str, settings: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.write_host}{self._index_path(index_name)}/settings"
        return await self._request("PUT", url, settings)

    @staticmethod
    def build_batch(objects: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Batch body; objectID is mandatory, never auto-generated."""
        return {
            "requests": [
                {"action": "updateObject", "body": obj}
                for obj in objects
            ]
        }

    async def save_objects(self, index_name: str, objects: List[Dict[str, Any]]) -> Any:
        url = f"{self.write_host}{self._index_path(index_name)}/batch"
        return await self._request("POST", url, self.build_batch(objects))

    async def get_task_status(self, index_name: str, task_id: Any) -> str:
        url = f"{self.read_host}{self._index_path(index_name)}/task/{task_id}"
        body = await self._request("GET", url)
        status = body.get("status") if isinstance(body, dict) else None
        if not status:
            raise IndexBackendError("Task status missing from response", details=body)
        return status
