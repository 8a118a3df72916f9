# Data Models
from .assets import normalize_asset_path, asset_file_name
from .champion import Champion, ChampionStats, Ability, Variable
from .item import Item

__all__ = [
    "normalize_asset_path",
    "asset_file_name",
    "Champion",
    "ChampionStats",
    "Ability",
    "Variable",
    "Item",
]
