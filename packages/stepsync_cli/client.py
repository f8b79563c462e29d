"""HTTP client for the StepSync server"""

from typing import Any, Optional

import httpx

from stepsync_cli.exceptions import StepSyncAPIError

DEFAULT_URL = "http://localhost:4567"


class StepSyncClient:
    """Client for the StepSync read-only HTTP endpoints

    Manages the HTTP client lifecycle and can be used as an async
    context manager.

    Example:
        >>> async with StepSyncClient() as client:
        ...     state = await client.get_state()
        ...     print(state["bpm"])
    """

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize StepSync client

        Args:
            base_url: StepSync server base URL
            timeout: Default request timeout in seconds
            http_client: Optional pre-configured HTTP client
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        if http_client is not None:
            self._http_client = http_client
            self._owns_http_client = False
        else:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=timeout
            )
            self._owns_http_client = True

    async def __aenter__(self) -> "StepSyncClient":
        """Enter async context manager"""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context manager"""
        await self.close()

    async def close(self) -> None:
        """Close HTTP client if owned by this instance"""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def get_state(self) -> dict[str, Any]:
        """Fetch the full sequencer state

        Raises:
            StepSyncAPIError: API error occurred
        """
        return await self._get_json("/api/state")

    async def health(self) -> dict[str, Any]:
        """Fetch the server health summary

        Raises:
            StepSyncAPIError: API error occurred
        """
        return await self._get_json("/health")

    async def _get_json(self, path: str) -> dict[str, Any]:
        try:
            response = await self._http_client.get(path)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            raise StepSyncAPIError(f"API error: {e}")
        except httpx.RequestError as e:
            raise StepSyncAPIError(f"Connection error: {e}")
