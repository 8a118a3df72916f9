"""
Champion build API routes.
"""

from fastapi import APIRouter, Depends
from typing import List

from ..schemas.notebook import (
    AssignItemRequest,
    ChampionStateSchema,
    RemoveItemRequest,
    SelectChampionRequest,
)
from ..services.notebook_service import NotebookService
from ..dependencies import get_notebook_service

router = APIRouter()


@router.get("", response_model=List[ChampionStateSchema])
async def get_builds(
    service: NotebookService = Depends(get_notebook_service),
):
    """Get every champion's build in the current sort order."""
    return [ChampionStateSchema.from_state(s) for s in service.champions()]


@router.post("/select", response_model=ChampionStateSchema)
async def select_champion(
    request: SelectChampionRequest,
    service: NotebookService = Depends(get_notebook_service),
):
    """Focus a champion."""
    state = service.select_champion(request.champion_name)
    return ChampionStateSchema.from_state(state)


@router.post("/assign", response_model=ChampionStateSchema)
async def assign_item(
    request: AssignItemRequest,
    service: NotebookService = Depends(get_notebook_service),
):
    """Assign an item to the named or focused champion."""
    state = service.assign_item(request.item_api_name, request.champion_name)
    return ChampionStateSchema.from_state(state)


@router.get("/{champion_name}", response_model=ChampionStateSchema)
async def get_build(
    champion_name: str,
    service: NotebookService = Depends(get_notebook_service),
):
    """Get one champion's build."""
    return ChampionStateSchema.from_state(service.get_champion(champion_name))


@router.post("/{champion_name}/remove", response_model=ChampionStateSchema)
async def remove_item(
    champion_name: str,
    request: RemoveItemRequest,
    service: NotebookService = Depends(get_notebook_service),
):
    """Remove the first matching item from a champion's build."""
    state = service.remove_item(champion_name, request.item_api_name)
    return ChampionStateSchema.from_state(state)


@router.post("/{champion_name}/clear", response_model=ChampionStateSchema)
async def clear_items(
    champion_name: str,
    service: NotebookService = Depends(get_notebook_service),
):
    """Remove every item from a champion's build."""
    return ChampionStateSchema.from_state(service.clear_items(champion_name))
