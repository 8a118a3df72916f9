"""
Local icon cache backed by the Community Dragon mirror.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Iterable

from PIL import Image, UnidentifiedImageError

from tft_notebook.errors import AssetError
from ..models.assets import asset_file_name
from .cdragon_client import CDragonClient

logger = logging.getLogger(__name__)

PLACEHOLDER_ICON = "tft_item_unknown.png"


class ImageCache:
    """Downloads, shrinks and caches icons on first access."""

    def __init__(self, cache_dir: Path, client: CDragonClient, max_dimension: int = 128):
        self.cache_dir = Path(cache_dir)
        self.client = client
        self.max_dimension = max_dimension

    def cached_path(self, path: str) -> Path:
        """Where the icon for an asset path lives once cached."""
        return self.cache_dir / asset_file_name(path)

    def placeholder(self) -> Path:
        """Path of the icon used when a record has no icon reference."""
        target = self.cache_dir / PLACEHOLDER_ICON
        if not target.exists():
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            size = (self.max_dimension, self.max_dimension)
            Image.new("RGBA", size, (0, 0, 0, 0)).save(target)
        return target

    def resolve(self, path: str) -> Path:
        """
        Get a local PNG for an asset path, fetching it if not cached.

        Args:
            path: Normalized asset path; empty for "no icon".

        Returns:
            Path of the cached image.

        Raises:
            AssetError: If the icon cannot be downloaded or decoded.
        """
        if not path:
            return self.placeholder()

        target = self.cached_path(path)
        if target.exists():
            return target

        data = self.client.fetch_asset(path)
        try:
            image = Image.open(BytesIO(data))
            image.load()
        except (UnidentifiedImageError, OSError) as e:
            raise AssetError(f"Could not decode {path}: {e}") from e

        if max(image.size) > self.max_dimension:
            image.thumbnail(
                (self.max_dimension, self.max_dimension), Image.Resampling.BICUBIC
            )

        self.cache_dir.mkdir(parents=True, exist_ok=True)
        image.save(target, format="PNG")
        logger.info(f"{target.name} has been cached")
        return target

    def prefetch(self, paths: Iterable[str]) -> int:
        """
        Warm the cache.

        Returns:
            Number of icons that could not be cached.
        """
        failed = 0
        for path in paths:
            try:
                self.resolve(path)
            except AssetError as e:
                logger.warning(str(e))
                failed += 1
        return failed
