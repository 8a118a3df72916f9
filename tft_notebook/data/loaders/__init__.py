# Data Loaders
from .cdragon_client import CDragonClient
from .image_cache import ImageCache, PLACEHOLDER_ICON
from .ingestion import (
    Catalog,
    ingest,
    extract_champions,
    extract_items,
    resolve_components,
    is_excluded_item,
)

__all__ = [
    "CDragonClient",
    "ImageCache",
    "PLACEHOLDER_ICON",
    "Catalog",
    "ingest",
    "extract_champions",
    "extract_items",
    "resolve_components",
    "is_excluded_item",
]
