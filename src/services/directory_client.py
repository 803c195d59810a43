"""
REST client for the remote user directory

Wraps an httpx.AsyncClient bound to the directory base URL:
GET /, POST /, PUT /{id}, DELETE /{id}.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from models.user import UserData

logger = logging.getLogger(__name__)

class DirectoryAPIError(Exception):
    """A directory call failed, either in transport or with a non-2xx status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class DirectoryClient:
    """Async client for the user directory API"""

    def __init__(self, base_url: str, timeout: Optional[float] = None, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    async def close(self):
        if self._owns_client:
            await self._client.aclose()

    async def list_users(self) -> List[Dict[str, Any]]:
        """GET / and return the decoded list of user objects"""
        body = await self._request("GET", self.base_url)
        if not isinstance(body, list):
            raise DirectoryAPIError("Expected a list of users from the directory")
        return body

    async def create_user(self, data: UserData) -> Dict[str, Any]:
        """POST / and return the record the server created"""
        body = await self._request("POST", self.base_url, data)
        if not isinstance(body, dict):
            raise DirectoryAPIError("Expected a user object from the directory")
        return body

    async def update_user(self, user_id: int, data: UserData) -> int:
        """PUT /{id}. Returns the response status code."""
        return await self._request("PUT", f"{self.base_url}/{user_id}", data, decode=False)

    async def delete_user(self, user_id: int) -> int:
        """DELETE /{id}. Returns the response status code."""
        return await self._request("DELETE", f"{self.base_url}/{user_id}", decode=False)

    async def _request(self, method: str, url: str, data: Optional[UserData] = None, decode: bool = True):
        headers = {"Content-Type": "application/json"} if data is not None else None
        payload = data.model_dump() if data is not None else None

        try:
            response = await self._client.request(method, url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise DirectoryAPIError(f"{method} {url} failed: {e}") from e

        logger.info(f"{method} {url} -> {response.status_code}")

        if not response.is_success:
            raise DirectoryAPIError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code
            )

        if not decode:
            return response.status_code

        try:
            return response.json()
        except ValueError as e:
            raise DirectoryAPIError(
                f"{method} {url} returned an undecodable body",
                status_code=response.status_code
            ) from e
