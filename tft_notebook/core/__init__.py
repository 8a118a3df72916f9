# Core notebook state and ranking
from .build_state import BuildStateStore, ChampionState, parse_states
from .component_inventory import ComponentInventory, ComponentState
from .ranking import (
    ChampionMatch,
    consumed_components,
    match_score,
    rank,
    rank_with_scores,
)
from .persistence import StateFile

__all__ = [
    "BuildStateStore",
    "ChampionState",
    "parse_states",
    "ComponentInventory",
    "ComponentState",
    "ChampionMatch",
    "consumed_components",
    "match_score",
    "rank",
    "rank_with_scores",
    "StateFile",
]
