"""Item data model for the Community Dragon TFT feed."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .assets import normalize_asset_path


class Item(BaseModel):
    """TFT Item model.

    Parsed from the camelCase records of the document's ``items`` array.
    An item with a non-empty composition is a completed item; an item
    referenced by some completed item's composition is a component.
    """
    api_name: str = Field(..., description="Unique identifier")
    name: str = Field(default="", description="Display name (null -> empty)")
    desc: str = Field(default="", description="Free-text description (null -> empty)")
    composition: list[str] = Field(default_factory=list, description="Component api names")
    associated_traits: list[str] = Field(default_factory=list)
    incompatible_traits: list[str] = Field(default_factory=list)
    unique: bool = Field(default=False, description="Can only equip one of this item")
    effects: Any = Field(default=None, description="Opaque effect payload, kept as-is")
    from_: Optional[Any] = Field(default=None, alias="from")
    id: Optional[Any] = None
    icon: str = Field(default="", description="Normalized asset path")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("name", "desc", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    @field_validator("composition", "associated_traits", "incompatible_traits", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("unique", mode="before")
    @classmethod
    def _null_flag(cls, value):
        return False if value is None else value

    @field_validator("icon", mode="before")
    @classmethod
    def _normalize_icon(cls, value):
        return normalize_asset_path(value)

    @property
    def is_completed(self) -> bool:
        return bool(self.composition)

    def __str__(self) -> str:
        return self.name
