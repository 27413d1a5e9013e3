"""
HTTP client for TheSportsDB API.
Documentation: https://www.thesportsdb.com/documentation
"""

from typing import Any, Dict, Optional
import httpx


class SportsDBClient:
    """Client for the TheSportsDB v1 JSON API."""

    def __init__(
        self,
        api_key: str = "1",
        base_url: str = "https://www.thesportsdb.com/api/v1/json",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the TheSportsDB client.

        Args:
            api_key: API key (the free key "1" works for recent events)
            base_url: API root without the key segment
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _get_headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    async def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Make a GET request to the API.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status
            ValueError: If the body is not a JSON object
        """
        url = f"{self.base_url}/{self.api_key}/{endpoint}"

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url, headers=self._get_headers(), params=params)
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, dict):
            raise ValueError(f"Unexpected response body type: {type(data).__name__}")
        return data

    async def get_last_events(self, team_id: str) -> Dict[str, Any]:
        """
        Get the most recent events of a team, newest first.

        Args:
            team_id: TheSportsDB team id

        Returns:
            Decoded JSON body; events are under "results"
        """
        return await self._make_request("eventslast.php", params={"id": team_id})
