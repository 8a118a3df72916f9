"""
Notebook session API routes.
"""

from fastapi import APIRouter, Depends
from typing import List

from ..schemas.notebook import (
    ChampionMatchSchema,
    FocusSchema,
    NotebookStateSchema,
    SaveResponse,
    ScreenRequest,
    SortOrderRequest,
)
from ..services.notebook_service import NotebookService
from ..dependencies import get_notebook_service

router = APIRouter()


def _state(service: NotebookService) -> NotebookStateSchema:
    return NotebookStateSchema(
        screen=service.screen,
        sort_order=service.sort_order,
        focused_champion=service.focused_champion,
        champion_count=len(service.builds),
        item_count=len(service.catalog.items),
        component_count=len(service.inventory),
    )


@router.get("", response_model=NotebookStateSchema)
async def get_notebook(
    service: NotebookService = Depends(get_notebook_service),
):
    """Get session state."""
    return _state(service)


@router.get("/focus", response_model=FocusSchema)
async def get_focus(
    service: NotebookService = Depends(get_notebook_service),
):
    """Get the focused champion and its build summary."""
    return FocusSchema(
        focused_champion=service.focused_champion,
        summary=service.focus_summary(),
    )


@router.put("/screen", response_model=NotebookStateSchema)
async def switch_screen(
    request: ScreenRequest,
    service: NotebookService = Depends(get_notebook_service),
):
    """Switch between the builder and item determiner screens."""
    service.switch_screen(request.screen)
    return _state(service)


@router.put("/sort", response_model=NotebookStateSchema)
async def set_sort_order(
    request: SortOrderRequest,
    service: NotebookService = Depends(get_notebook_service),
):
    """Change the champion list ordering."""
    service.set_sort_order(request.order)
    return _state(service)


@router.get("/ranking", response_model=List[ChampionMatchSchema])
async def get_ranking(
    service: NotebookService = Depends(get_notebook_service),
):
    """Rank champions by how well the owned components cover their builds."""
    return [ChampionMatchSchema.from_match(m) for m in service.ranking()]


@router.post("/save", response_model=SaveResponse)
async def save(
    service: NotebookService = Depends(get_notebook_service),
):
    """Write every build to the state file."""
    path = service.save()
    return SaveResponse(message="Builds saved", path=str(path))
