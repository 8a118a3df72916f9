"""Champion data model for the Community Dragon TFT feed."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .assets import normalize_asset_path

CAMEL_CASE = {"alias_generator": to_camel, "populate_by_name": True}


class Variable(BaseModel):
    """Named per-star-level ability value."""
    name: str = ""
    value: list[float] = Field(default_factory=list)

    model_config = CAMEL_CASE

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value):
        return "" if value is None else value

    @field_validator("value", mode="before")
    @classmethod
    def _null_value(cls, value):
        return [] if value is None else value


class Ability(BaseModel):
    """Champion ability details."""
    name: str = ""
    desc: str = ""
    icon: str = Field(default="", description="Normalized asset path")
    variables: list[Variable] = Field(default_factory=list)

    model_config = CAMEL_CASE

    @field_validator("name", "desc", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    @field_validator("variables", mode="before")
    @classmethod
    def _null_variables(cls, value):
        return [] if value is None else value

    @field_validator("icon", mode="before")
    @classmethod
    def _normalize_icon(cls, value):
        return normalize_asset_path(value)


class ChampionStats(BaseModel):
    """Champion base statistics. Several are absent for non-combat units."""
    armor: Optional[float] = None
    attack_speed: Optional[float] = None
    crit_chance: Optional[float] = None
    crit_multiplier: float = 0.0
    damage: Optional[float] = None
    hp: Optional[float] = None
    initial_mana: float = 0.0
    magic_resist: Optional[float] = None
    mana: float = 0.0
    range: float = 0.0

    model_config = CAMEL_CASE

    @field_validator("crit_multiplier", "initial_mana", "mana", "range", mode="before")
    @classmethod
    def _null_zero(cls, value):
        return 0.0 if value is None else value


class Champion(BaseModel):
    """TFT Champion model."""
    api_name: str = Field(..., description="Unique identifier")
    name: str = Field(default="", description="Display name")
    cost: int = Field(default=0, ge=0)
    traits: list[str] = Field(default_factory=list, description="Trait names; empty for non-playable units")
    stats: ChampionStats = Field(default_factory=ChampionStats)
    ability: Ability = Field(default_factory=Ability)
    square_icon: str = Field(default="", description="Normalized asset path")

    model_config = CAMEL_CASE

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value):
        return "" if value is None else value

    @field_validator("traits", mode="before")
    @classmethod
    def _null_traits(cls, value):
        return [] if value is None else value

    @field_validator("square_icon", mode="before")
    @classmethod
    def _normalize_icon(cls, value):
        return normalize_asset_path(value)

    @property
    def is_playable(self) -> bool:
        """Eggs, creeps and board props carry no traits."""
        return bool(self.traits)

    def __str__(self) -> str:
        return self.name
