"""Game asset path handling shared by the data models."""

from typing import Optional

# The mirror serves PNG conversions of the game's texture files.
_CONVERTED_EXTENSIONS = (".dds", ".tex")


def normalize_asset_path(path: Optional[str]) -> str:
    """Turn a raw asset reference into the path served by the mirror.

    ``ASSETS/Maps/Item_Icons/BF_Sword.TFT_Set13.tex`` becomes
    ``assets/maps/item_icons/bf_sword.tft_set13.png``. A missing
    reference becomes ``""``.
    """
    if not path:
        return ""
    path = path.lower()
    for ext in _CONVERTED_EXTENSIONS:
        if path.endswith(ext):
            return path[: -len(ext)] + ".png"
    return path


def asset_file_name(path: str) -> str:
    """Last segment of an asset path."""
    return path.rsplit("/", 1)[-1]
