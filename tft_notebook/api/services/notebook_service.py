"""
Notebook session service.

Owns the build state, the component inventory and the view state
(focused champion, screen, sort order). Every user action maps to one
method here.
"""

import logging
from pathlib import Path
from typing import List, Optional

from tft_notebook.config import Settings
from tft_notebook.core import (
    BuildStateStore,
    ChampionMatch,
    ChampionState,
    ComponentInventory,
    StateFile,
    rank,
    rank_with_scores,
)
from tft_notebook.data.loaders import CDragonClient, Catalog, ImageCache, ingest
from tft_notebook.data.models import Item
from tft_notebook.errors import AssetError, NoChampionSelectedError
from tft_notebook.utils import format_items

from ..schemas.notebook import ChampionSortOrder, Screen

logger = logging.getLogger(__name__)


class NotebookService:
    """Build planning session for one ingested catalog."""

    def __init__(
        self,
        catalog: Catalog,
        state_file: StateFile,
        image_cache: Optional[ImageCache] = None,
    ):
        self.catalog = catalog
        self.state_file = state_file
        self.image_cache = image_cache
        self.builds = BuildStateStore.attach(catalog.champions, state_file.load())
        self.inventory = ComponentInventory(catalog.components)
        self.focused_champion: Optional[str] = None
        self.screen = Screen.ITEM_DETERMINER
        self.sort_order = ChampionSortOrder.ROSTER

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: Optional[CDragonClient] = None,
    ) -> "NotebookService":
        """
        Fetch, ingest and attach saved builds.

        Raises:
            IngestionError: If the game data cannot be fetched or ingested.
        """
        settings.ensure_dirs()
        client = client or CDragonClient(settings)
        catalog = ingest(client.fetch_game_data(), settings.SET_DATA_INDEX)
        image_cache = ImageCache(settings.CACHE_DIR, client, settings.ICON_MAX_SIZE)
        service = cls(catalog, StateFile(settings.state_path), image_cache)
        if settings.PREFETCH_ICONS:
            service.prefetch_icons()
        return service

    # === Champions ===

    def champions(self) -> List[ChampionState]:
        """Champion states in the current sort order."""
        states = self.builds.states
        if self.sort_order == ChampionSortOrder.NAME:
            return sorted(states, key=lambda s: s.name)
        if self.sort_order == ChampionSortOrder.COST:
            return sorted(states, key=lambda s: (s.champ.cost, s.name))
        if self.sort_order == ChampionSortOrder.MATCH_SCORE:
            return rank(states, self.inventory)
        return states

    def get_champion(self, champion_name: str) -> ChampionState:
        return self.builds.get(champion_name)

    def select_champion(self, champion_name: str) -> ChampionState:
        """Give a champion focus."""
        state = self.builds.get(champion_name)
        self.focused_champion = champion_name
        logger.info(f"new focused champion is {champion_name}")
        return state

    def focus_summary(self) -> str:
        """Status line for the focused champion."""
        if self.focused_champion is None:
            return "No champion selected"
        state = self.builds.get(self.focused_champion)
        return f"{state.champ}: {format_items(state.items)}"

    # === Builds ===

    def assign_item(
        self, item_api_name: str, champion_name: Optional[str] = None
    ) -> ChampionState:
        """
        Assign an item to a champion, or to the focused one.

        Raises:
            NoChampionSelectedError: If no champion is named or focused.
            UnknownChampionError: If the champion does not exist.
            UnknownItemError: If the item is not a kept completed item.
        """
        target = champion_name or self.focused_champion
        if target is None:
            raise NoChampionSelectedError()
        item = self.catalog.get_completed_item(item_api_name)
        return self.builds.assign(target, item)

    def remove_item(self, champion_name: str, item_api_name: str) -> ChampionState:
        """
        Remove the first matching item from a champion's build.

        Items saved by an earlier session may no longer be in the catalog,
        so the champion's own build is searched first.
        """
        state = self.builds.get(champion_name)
        item = self._find_assigned(state, item_api_name)
        if item is None:
            item = self.catalog.get_item(item_api_name)
        self.builds.unassign(champion_name, item)
        return state

    def clear_items(self, champion_name: str) -> ChampionState:
        return self.builds.clear(champion_name)

    @staticmethod
    def _find_assigned(state: ChampionState, item_api_name: str) -> Optional[Item]:
        for item in state.items:
            if item.api_name == item_api_name:
                return item
        return None

    # === Components ===

    def adjust_component(self, api_name: str, delta: int) -> int:
        """Apply +1/-1 to an owned component count. Returns the new count."""
        return self.inventory.adjust(api_name, delta)

    def ranking(self) -> List[ChampionMatch]:
        """Champions scored against the current inventory, best first."""
        return rank_with_scores(self.builds, self.inventory)

    # === Session ===

    def switch_screen(self, screen: Screen) -> Screen:
        self.screen = screen
        return screen

    def set_sort_order(self, order: ChampionSortOrder) -> ChampionSortOrder:
        self.sort_order = order
        return order

    def save(self) -> Path:
        """
        Persist every build.

        Raises:
            PersistenceError: If the state file cannot be written.
        """
        return self.state_file.save(self.builds)

    # === Icons ===

    def champion_icon(self, champion_name: str) -> Path:
        return self._require_image_cache().resolve(
            self.builds.get(champion_name).champ.square_icon
        )

    def item_icon(self, item_api_name: str) -> Path:
        return self._require_image_cache().resolve(self.catalog.get_item(item_api_name).icon)

    def prefetch_icons(self) -> int:
        """Cache every champion, item and component icon. Returns failures."""
        cache = self._require_image_cache()
        paths = [c.square_icon for c in self.catalog.champions]
        paths += [i.icon for i in self.catalog.items + self.catalog.components]
        failed = cache.prefetch(paths)
        logger.info(f"Prefetched {len(paths) - failed} of {len(paths)} icons")
        return failed

    def _require_image_cache(self) -> ImageCache:
        if self.image_cache is None:
            raise AssetError("Icon cache is not configured")
        return self.image_cache
