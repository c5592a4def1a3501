import logging
from typing import Any, Dict, List, Optional

import requests

from .config import GRAPH_TIMEOUT
from .errors import ApiError, ResponseFormatError


class GraphClient:
    def __init__(self, token: str, timeout: int = GRAPH_TIMEOUT):
        self.token = token
        self.timeout = timeout

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = {"Authorization": f"Bearer {self.token}"}
        try:
            resp = requests.get(url, headers=headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error("GET %s failed: %s", url, e)
            raise ApiError(None, str(e), url=url) from e
        if not 200 <= resp.status_code < 300:
            logging.error("Graph API error %s: %s", resp.status_code, resp.text)
            raise ApiError(resp.status_code, resp.text, reason=resp.reason or "", url=url)
        try:
            return resp.json()
        except ValueError as e:
            raise ResponseFormatError(f"GET {url} returned a non-JSON body") from e

    def get_collection(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """First page of a collection response. nextLink is reported, not followed."""
        data = self.get(url, params)
        items = data.get("value") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise ResponseFormatError(f"GET {url} did not return a 'value' collection")
        if data.get("@odata.nextLink"):
            logging.warning(
                f"Only the first {len(items)} items of {url} were read; "
                "further pages are not fetched"
            )
        return items
