import logging
from typing import Dict, Iterable

import requests

from .components import DocumentNode
from .errors import RemoteApiError, RemoteFetchError

logger = logging.getLogger(__name__)


class FigmaClient:
    """Figma REST API calls needed to export components as SVG"""

    BASE_URL = "https://api.figma.com/v1"

    def __init__(self, api_token: str, timeout: int = 30):
        self.api_token = api_token
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'X-Figma-Token': self.api_token,
            'Content-Type': 'application/json',
        })

    def fetch_tree(self, file_key: str, page_id: str) -> DocumentNode:
        """Fetch the document tree of ``file_key`` restricted to ``page_id``"""
        endpoint = f"{self.BASE_URL}/files/{file_key}"

        logger.info(f"Fetching file data for: {file_key}")
        data = self._get_json(endpoint, params={'ids': page_id})

        if 'document' not in data:
            raise RemoteApiError(f"Response for file {file_key} has no document")

        return DocumentNode.from_dict(data['document'])

    def fetch_image_urls(self, ids: Iterable[str], file_key: str) -> Dict[str, str]:
        """Get SVG render URLs for all ``ids`` in a single request"""
        node_ids = list(ids)
        endpoint = f"{self.BASE_URL}/images/{file_key}"
        params = {
            'ids': ','.join(node_ids),
            'format': 'svg',
        }

        logger.info(f"🎨 Requesting SVG URLs for {len(node_ids)} components")
        data = self._get_json(endpoint, params=params)

        if data.get('err'):
            raise RemoteApiError(f"API Error: {data['err']}")

        return data.get('images') or {}

    def fetch_raw_source(self, url: str) -> str:
        """Download SVG content from a render URL"""
        # Render URLs are pre-signed, the API token is not sent along
        response = self._request(url)
        return response.text

    def _get_json(self, url: str, params: Dict) -> Dict:
        response = self._request(url, params=params, session=self.session)
        try:
            return response.json()
        except ValueError as e:
            raise RemoteApiError(f"Invalid JSON from {url}: {e}") from e

    def _request(self, url: str, params=None, session=None) -> requests.Response:
        getter = session.get if session is not None else requests.get
        try:
            response = getter(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteFetchError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            logger.error(f"API request failed: {response.status_code} - {response.reason}")
            raise RemoteFetchError(
                f"Unexpected response: {response.reason}.",
                status_code=response.status_code,
                reason=response.reason,
            )

        return response
