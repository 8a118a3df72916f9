"""Ranking Engine.

Scores champions by how much of the owned component inventory their
current builds would actually consume.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping, Union

from .build_state import ChampionState
from .component_inventory import ComponentInventory


@dataclass
class ChampionMatch:
    """A champion's state with its match score."""

    state: ChampionState
    score: int


def consumed_components(state: ChampionState) -> Counter:
    """Multiset of components used by every item assigned to a champion."""
    consumed: Counter = Counter()
    for item in state.items:
        consumed.update(item.composition)
    return consumed


def match_score(
    state: ChampionState,
    inventory: Union[ComponentInventory, Mapping[str, int]],
) -> int:
    """
    Score one champion against an inventory.

    For each component both used by the build and present in the
    inventory, add the lesser of owned and used counts.

    Args:
        state: Champion and its assigned items.
        inventory: Inventory or mapping of component api name to count.

    Returns:
        Match score, 0 for a champion with no items.
    """
    owned = inventory.counts() if isinstance(inventory, ComponentInventory) else inventory
    consumed = consumed_components(state)
    return sum(
        min(owned[component], used)
        for component, used in consumed.items()
        if component in owned
    )


def rank_with_scores(
    states: Iterable[ChampionState],
    inventory: Union[ComponentInventory, Mapping[str, int]],
) -> list[ChampionMatch]:
    """
    Score and order champions, best match first.

    Equal scores keep their incoming order.
    """
    owned = inventory.counts() if isinstance(inventory, ComponentInventory) else inventory
    matches = [ChampionMatch(state=s, score=match_score(s, owned)) for s in states]
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches


def rank(
    states: Iterable[ChampionState],
    inventory: Union[ComponentInventory, Mapping[str, int]],
) -> list[ChampionState]:
    """Order champions by descending match score, ties in incoming order."""
    return [m.state for m in rank_with_scores(states, inventory)]
