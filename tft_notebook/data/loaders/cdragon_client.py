"""
Community Dragon HTTP client.
"""

import logging
from typing import Any, Dict, Optional

import requests

from tft_notebook.config import Settings
from tft_notebook.errors import AssetError, IngestionError

logger = logging.getLogger(__name__)


class CDragonClient:
    """Client for the Community Dragon mirror (game data + assets)."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        """
        Args:
            settings: Application settings (URLs, timeout).
            session: HTTP session to reuse; a new one is created if omitted.
        """
        self.data_url = settings.GAME_DATA_URL
        self.asset_base_url = settings.ASSET_BASE_URL
        self.timeout = settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()

    def fetch_game_data(self) -> Dict[str, Any]:
        """
        Download the TFT game-data document.

        Returns:
            The decoded JSON document.

        Raises:
            IngestionError: On any network failure, non-2xx status or
                undecodable body. Not retried.
        """
        logger.info(f"Fetching game data from {self.data_url}")
        try:
            response = self.session.get(self.data_url, timeout=self.timeout)
            response.raise_for_status()
            document = response.json()
        except ValueError as e:
            # requests.JSONDecodeError is also a RequestException.
            raise IngestionError(f"Game data is not valid JSON: {e}") from e
        except requests.RequestException as e:
            raise IngestionError(f"Failed to fetch game data: {e}") from e

        logger.info(f"Fetched game data ({len(response.content)} bytes)")
        return document

    def asset_url(self, path: str) -> str:
        """Full URL of a normalized asset path."""
        return self.asset_base_url + path

    def fetch_asset(self, path: str) -> bytes:
        """
        Download one asset.

        Args:
            path: Normalized asset path (see ``normalize_asset_path``).

        Raises:
            AssetError: If the download fails.
        """
        url = self.asset_url(path)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise AssetError(f"Failed to fetch {url}: {e}") from e
        return response.content
