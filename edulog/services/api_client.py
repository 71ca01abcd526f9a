"""HTTP client for the learning items REST API."""

from typing import List, Optional, Dict, Any
import logging
import os

import httpx
from pydantic import ValidationError

from edulog.models.learning_item import LearningItem


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ITEMS_PATH = "/api/learning"


def get_api_url() -> str:
    """Get the backend origin from environment or default."""
    return os.getenv("EDULOG_API_URL", "http://localhost:5000")


def get_api_token() -> Optional[str]:
    """Get the bearer token issued by the auth service, if any."""
    return os.getenv("EDULOG_API_TOKEN") or None


class LearningApiError(Exception):
    """Raised when a request to the learning API fails for any reason."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LearningApiClient:
    """
    Client for the learning items endpoints.

    Network errors, error responses and malformed bodies are all
    surfaced as LearningApiError; callers do not need to know which.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: int = 30,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client."""
        self.base_url = (base_url or get_api_url()).rstrip("/")
        self.token = token if token is not None else get_api_token()
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        self.client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "LearningApiClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LearningApiError(
                f"{method} {path} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise LearningApiError(f"{method} {path} failed: {e}") from e
        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    def _parse_item(self, response: httpx.Response) -> LearningItem:
        try:
            return LearningItem.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise LearningApiError(f"Malformed learning item in response: {e}") from e

    def list_items(self) -> List[LearningItem]:
        """
        Fetch every learning item of the current user.

        Returns:
            Items in the order the backend returns them
        """
        response = self._request("GET", ITEMS_PATH)
        try:
            data = response.json()
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            items = [LearningItem.model_validate(entry) for entry in data]
        except (ValueError, ValidationError) as e:
            raise LearningApiError(f"Malformed item list in response: {e}") from e
        logger.info(f"Fetched {len(items)} learning items")
        return items

    def create_item(self, payload: Dict[str, Any]) -> LearningItem:
        """
        Create a learning item.

        Args:
            payload: title, type, link, status and notes

        Returns:
            The item as stored by the backend, with id and updatedAt
        """
        item = self._parse_item(self._request("POST", ITEMS_PATH, json=payload))
        logger.info(f"Created learning item {item.id}")
        return item

    def update_item(self, item_id: str, payload: Dict[str, Any]) -> LearningItem:
        """
        Update a learning item with a full or partial field set.

        Args:
            item_id: Backend id of the item
            payload: Fields to replace

        Returns:
            The updated item as stored by the backend
        """
        item = self._parse_item(self._request("PUT", f"{ITEMS_PATH}/{item_id}", json=payload))
        logger.info(f"Updated learning item {item_id}")
        return item

    def delete_item(self, item_id: str) -> None:
        """Delete a learning item."""
        self._request("DELETE", f"{ITEMS_PATH}/{item_id}")
        logger.info(f"Deleted learning item {item_id}")
