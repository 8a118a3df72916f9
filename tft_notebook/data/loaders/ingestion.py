"""Game-data ingestion: filters the raw document into a catalog.

The document carries every set the game has shipped. Only one stage of
``setData`` is used for champions; items are shared across sets and are
narrowed to the completed items of the current generation.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from tft_notebook.errors import IngestionError, UnknownChampionError, UnknownItemError
from ..models.champion import Champion
from ..models.item import Item

logger = logging.getLogger(__name__)

# Item api names embedding one of these digits belong to sets 5-7.
EXCLUDED_GENERATION_MARKERS = ("5", "6", "7")
# Un-localized placeholder left on broken or unused entries.
PLACEHOLDER_NAME = "tft_item_name"
TUTORIAL_MARKER = "Tutorial"


@dataclass
class Catalog:
    """Validated champions and items from one game-data document."""

    champions: list[Champion]
    items: list[Item]
    components: list[Item]
    all_items: list[Item] = field(default_factory=list)

    def __post_init__(self):
        self._items_by_api_name: dict[str, Item] = {}
        for item in self.all_items:
            self._items_by_api_name.setdefault(item.api_name, item)
        # Catalogs built without the raw list still resolve their own items.
        for item in self.items + self.components:
            self._items_by_api_name[item.api_name] = item
        self._champions_by_name = {c.name: c for c in self.champions}

    def get_item(self, api_name: str) -> Item:
        """Get an item by api name.

        Raises:
            UnknownItemError: If no item has that api name.
        """
        try:
            return self._items_by_api_name[api_name]
        except KeyError:
            raise UnknownItemError(api_name) from None

    def get_completed_item(self, api_name: str) -> Item:
        """Get one of the kept completed items by api name.

        Components and items removed by the filter are not assignable.

        Raises:
            UnknownItemError: If no kept completed item has that api name.
        """
        for item in self.items:
            if item.api_name == api_name:
                return item
        raise UnknownItemError(api_name)

    def get_champion(self, name: str) -> Champion:
        """Get a champion by display name.

        Raises:
            UnknownChampionError: If no champion has that name.
        """
        try:
            return self._champions_by_name[name]
        except KeyError:
            raise UnknownChampionError(name) from None

    @property
    def component_ids(self) -> list[str]:
        return [c.api_name for c in self.components]


def _require(container: Any, key: str, where: str) -> Any:
    if not isinstance(container, dict) or key not in container:
        raise IngestionError(f"Missing '{key}' in {where}")
    return container[key]


def _parse_records(model, records: Any, where: str) -> list:
    if not isinstance(records, list):
        raise IngestionError(f"Expected a list at {where}, got {type(records).__name__}")
    try:
        return [model.model_validate(record) for record in records]
    except ValidationError as e:
        raise IngestionError(f"Invalid record in {where}: {e}") from e


def is_excluded_item(item: Item) -> bool:
    """Check whether a completed item belongs to another generation or is broken."""
    return (
        any(marker in item.api_name for marker in EXCLUDED_GENERATION_MARKERS)
        or PLACEHOLDER_NAME in item.name
        or any(TUTORIAL_MARKER in component for component in item.composition)
    )


def extract_champions(document: dict, set_index: int) -> list[Champion]:
    """Parse the champions of one ``setData`` stage, dropping trait-less units.

    Args:
        document: Raw game-data document.
        set_index: Position of the stage within ``setData``.

    Raises:
        IngestionError: If the stage is missing or malformed.
    """
    set_data = _require(document, "setData", "document")
    if not isinstance(set_data, list):
        raise IngestionError("'setData' is not a list")
    if not 0 <= set_index < len(set_data):
        raise IngestionError(
            f"Set index {set_index} out of range ({len(set_data)} stages available)"
        )
    stage = set_data[set_index]
    records = _require(stage, "champions", f"setData[{set_index}]")

    champions = _parse_records(Champion, records, f"setData[{set_index}].champions")
    playable = [c for c in champions if c.is_playable]
    logger.debug(f"Dropped {len(champions) - len(playable)} champions without traits")
    return playable


def extract_items(document: dict) -> tuple[list[Item], list[Item]]:
    """Parse the item catalog.

    Returns:
        Tuple of (all items, surviving completed items).

    Raises:
        IngestionError: If the catalog is missing or malformed.
    """
    records = _require(document, "items", "document")
    all_items = _parse_records(Item, records, "items")

    completed = [item for item in all_items if item.is_completed]
    items = [item for item in completed if not is_excluded_item(item)]
    logger.debug(
        f"Kept {len(items)} of {len(all_items)} items "
        f"({len(completed) - len(items)} completed items excluded)"
    )
    return all_items, items


def resolve_components(items: list[Item], all_items: list[Item]) -> list[Item]:
    """Resolve every component referenced by the completed items.

    Components are looked up in the unfiltered catalog since they have
    no composition of their own. Order is first appearance.

    Raises:
        IngestionError: If a referenced component is not in the catalog.
    """
    by_api_name: dict[str, Item] = {}
    for item in all_items:
        by_api_name.setdefault(item.api_name, item)

    component_ids: dict[str, None] = {}
    for item in items:
        for component_id in item.composition:
            component_ids.setdefault(component_id, None)

    components = []
    for component_id in component_ids:
        component = by_api_name.get(component_id)
        if component is None:
            raise IngestionError(f"Unresolved component '{component_id}'")
        components.append(component)
    return components


def ingest(document: Any, set_index: int) -> Catalog:
    """Build a catalog from the raw game-data document.

    Args:
        document: Decoded JSON document.
        set_index: Position of the stage within ``setData``.

    Returns:
        Catalog of playable champions, completed items and components.

    Raises:
        IngestionError: On any shape violation. Nothing is partially ingested.
    """
    if not isinstance(document, dict):
        raise IngestionError(f"Document is not an object, got {type(document).__name__}")

    champions = extract_champions(document, set_index)
    all_items, items = extract_items(document)
    components = resolve_components(items, all_items)

    logger.info(
        f"Ingested {len(champions)} champions, {len(items)} items, "
        f"{len(components)} components"
    )
    return Catalog(
        champions=champions,
        items=items,
        components=components,
        all_items=all_items,
    )

