"""
Records API Client - CRUD against the remote records collection resource.

    GET    {base}        list all records
    POST   {base}        create a record
    PUT    {base}/{id}   update a record
    DELETE {base}/{id}   delete a record

No timeout is set: an idle backend can take a long time to cold-start and
that wait is treated as normal latency.
"""
import requests
from typing import Any, Dict, List, Optional

from .config import get_settings
from .exceptions import RemoteError, TransportError
from .utils.logger import get_logger

logger = get_logger(__name__)


class RecordsClient:
    """
    Client for the remote records collection.

    Provides methods to:
    - List records
    - Create a record
    - Update a record
    - Delete a record
    """

    def __init__(self, base_url: Optional[str] = None):
        """
        Initialize the records client.

        Args:
            base_url: Collection endpoint (defaults to MEDREC_API_URL)
        """
        self.base_url = (base_url or get_settings().api_url).rstrip("/")

    def _get_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _url(self, record_id: Optional[str] = None) -> str:
        if record_id is None:
            return self.base_url
        return f"{self.base_url}/{record_id}"

    def _request(self, method: str, url: str, **kwargs) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Full target URL
            **kwargs: Additional arguments for requests

        Returns:
            Parsed JSON body, or None when the body is empty

        Raises:
            TransportError: the request did not complete
            RemoteError: the server answered with a non-2xx status
        """
        logger.debug("%s %s", method, url)
        try:
            response = requests.request(method, url, headers=self._get_headers(), **kwargs)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise TransportError(f"Could not reach the records service: {exc}") from exc

        if not response.ok:
            body = response.text
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, body)
            raise RemoteError(
                f"{method} request failed with status {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            # Some backends answer 200 with a plain-text acknowledgement
            return response.text

    def list_records(self) -> List[Dict[str, Any]]:
        """
        List every record in the collection.

        Returns:
            Remote records, in server order
        """
        result = self._request("GET", self._url())
        if not isinstance(result, list):
            raise RemoteError(
                "Records service returned an unexpected payload",
                status_code=200,
                body=str(result),
                code="UNEXPECTED_PAYLOAD",
            )
        return result

    def create_record(self, payload: Dict[str, Any]) -> Any:
        """
        Create a record. The payload must not carry an id.

        Returns:
            The created record as returned by the server
        """
        return self._request("POST", self._url(), json=payload)

    def update_record(self, record_id: str, payload: Dict[str, Any]) -> Any:
        """
        Replace a record in place.

        Returns:
            The updated record as returned by the server
        """
        return self._request("PUT", self._url(record_id), json=payload)

    def delete_record(self, record_id: str) -> None:
        """Delete a record. A successful delete has no body."""
        self._request("DELETE", self._url(record_id))


def get_client() -> RecordsClient:
    """
    Convenience function to get a client for the configured endpoint.

    Returns:
        RecordsClient instance
    """
    return RecordsClient()
