"""Build State Store.

Tracks the items assigned to each champion and merges it with state
saved by an earlier session.
"""

import logging
from typing import Any, Iterator, Optional

from pydantic import BaseModel, Field, TypeAdapter

from tft_notebook.data.models import Champion, Item
from tft_notebook.errors import UnknownChampionError

logger = logging.getLogger(__name__)


class ChampionState(BaseModel):
    """A champion and the ordered items assigned to it."""

    champ: Champion
    items: list[Item] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.champ.name

    def signature(self) -> tuple[str, tuple[tuple[str, str], ...]]:
        """Structural identity: champion name and ordered item list."""
        return self.champ.name, tuple((i.api_name, i.name) for i in self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChampionState):
            return NotImplemented
        return self.signature() == other.signature()


_STATE_LIST = TypeAdapter(list[ChampionState])


class BuildStateStore:
    """
    Per-champion item assignments, keyed by champion display name.
    """

    def __init__(self, states: Optional[list[ChampionState]] = None):
        self._states: list[ChampionState] = []
        self._by_name: dict[str, ChampionState] = {}
        for state in states or []:
            self._states.append(state)
            self._by_name.setdefault(state.name, state)

    @classmethod
    def attach(
        cls,
        roster: list[Champion],
        persisted: Optional[list[ChampionState]] = None,
    ) -> "BuildStateStore":
        """
        Build the store for a fresh roster, carrying over saved builds.

        Saved entries are matched by champion name. A champion with no
        saved entry, or with more than one, starts empty. Saved entries
        for champions missing from the roster are dropped.

        Args:
            roster: Freshly ingested champions.
            persisted: Previously saved states, if any.

        Returns:
            New store in roster order.
        """
        saved: dict[str, list[ChampionState]] = {}
        for state in persisted or []:
            saved.setdefault(state.name, []).append(state)

        states = []
        for champ in roster:
            matches = saved.get(champ.name, [])
            if len(matches) > 1:
                logger.warning(
                    f"{len(matches)} saved builds for {champ.name}, starting empty"
                )
            items = list(matches[0].items) if len(matches) == 1 else []
            states.append(ChampionState(champ=champ, items=items))

        carried = sum(1 for s in states if s.items)
        logger.debug(f"Attached saved builds for {carried} of {len(states)} champions")
        return cls(states)

    @property
    def states(self) -> list[ChampionState]:
        return list(self._states)

    def get(self, champion_name: str) -> ChampionState:
        """
        Get the state of a champion.

        Raises:
            UnknownChampionError: If the champion is not in the store.
        """
        try:
            return self._by_name[champion_name]
        except KeyError:
            raise UnknownChampionError(champion_name) from None

    def assign(self, champion_name: str, item: Item) -> ChampionState:
        """Append an item to a champion's build. Duplicates are allowed."""
        state = self.get(champion_name)
        state.items.append(item)
        logger.debug(f"{item} got added to {champion_name}")
        return state

    def unassign(self, champion_name: str, item: Item) -> bool:
        """
        Remove the first item with the same name from a champion's build.

        Returns:
            True if an item was removed, False if none matched.
        """
        state = self.get(champion_name)
        for i, assigned in enumerate(state.items):
            if assigned.name == item.name:
                del state.items[i]
                logger.debug(f"{item} got removed from {champion_name}")
                return True
        return False

    def clear(self, champion_name: str) -> ChampionState:
        """Remove every item from a champion's build."""
        state = self.get(champion_name)
        state.items.clear()
        return state

    def serialize(self) -> list[dict[str, Any]]:
        """JSON-compatible form of the whole store."""
        return _STATE_LIST.dump_python(self._states, mode="json", by_alias=True)

    @classmethod
    def deserialize(cls, records: Any) -> "BuildStateStore":
        """Rebuild a store from ``serialize`` output.

        Raises:
            pydantic.ValidationError: If the records are malformed.
        """
        return cls(parse_states(records))

    def __iter__(self) -> Iterator[ChampionState]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, champion_name: object) -> bool:
        return champion_name in self._by_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuildStateStore):
            return NotImplemented
        return sorted(s.signature() for s in self._states) == sorted(
            s.signature() for s in other._states
        )


def parse_states(records: Any) -> list[ChampionState]:
    """Validate a list of serialized champion states."""
    return _STATE_LIST.validate_python(records)
