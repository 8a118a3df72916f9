"""
Notebook API schemas.
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from tft_notebook.core import ChampionMatch, ChampionState, ComponentState
from tft_notebook.data.models import Item

from .common import ActionResponse


class Screen(str, Enum):
    """Notebook screens."""

    CHARACTER_BUILDER = "character_builder"
    ITEM_DETERMINER = "item_determiner"


class ChampionSortOrder(str, Enum):
    """Orderings for the champion list."""

    ROSTER = "roster"
    NAME = "name"
    COST = "cost"
    MATCH_SCORE = "match_score"


# === Request Schemas ===


class SelectChampionRequest(BaseModel):
    """Champion focus request."""

    champion_name: str


class AssignItemRequest(BaseModel):
    """Item assignment request. Targets the focused champion if no name is given."""

    item_api_name: str
    champion_name: Optional[str] = None


class RemoveItemRequest(BaseModel):
    """Item removal request."""

    item_api_name: str


class AdjustComponentRequest(BaseModel):
    """Component count adjustment."""

    delta: Literal[1, -1]


class ScreenRequest(BaseModel):
    """Screen switch request."""

    screen: Screen


class SortOrderRequest(BaseModel):
    """Champion sort order request."""

    order: ChampionSortOrder


# === Response Schemas ===


class ItemSummarySchema(BaseModel):
    """Item as shown in a build."""

    api_name: str
    name: str
    composition: List[str]
    icon: str

    @classmethod
    def from_item(cls, item: Item) -> "ItemSummarySchema":
        return cls(
            api_name=item.api_name,
            name=item.name,
            composition=item.composition,
            icon=item.icon,
        )


class ChampionStateSchema(BaseModel):
    """Champion with its build."""

    name: str
    api_name: str
    cost: int
    traits: List[str]
    items: List[ItemSummarySchema]

    @classmethod
    def from_state(cls, state: ChampionState) -> "ChampionStateSchema":
        return cls(
            name=state.champ.name,
            api_name=state.champ.api_name,
            cost=state.champ.cost,
            traits=state.champ.traits,
            items=[ItemSummarySchema.from_item(i) for i in state.items],
        )


class ChampionMatchSchema(ChampionStateSchema):
    """Champion with its build and match score."""

    score: int = Field(..., ge=0)

    @classmethod
    def from_match(cls, match: ChampionMatch) -> "ChampionMatchSchema":
        base = ChampionStateSchema.from_state(match.state)
        return cls(**base.model_dump(), score=match.score)


class ComponentCountSchema(BaseModel):
    """Owned count of one component."""

    api_name: str
    name: str
    count: int = Field(..., ge=0)

    @classmethod
    def from_state(cls, state: ComponentState) -> "ComponentCountSchema":
        return cls(api_name=state.item.api_name, name=state.item.name, count=state.count)


class FocusSchema(BaseModel):
    """Focused champion and its status line."""

    focused_champion: Optional[str] = None
    summary: str


class NotebookStateSchema(BaseModel):
    """Session state of the notebook."""

    screen: Screen
    sort_order: ChampionSortOrder
    focused_champion: Optional[str] = None
    champion_count: int
    item_count: int
    component_count: int


class SaveResponse(ActionResponse):
    """Save result."""

    path: str
