"""
Component inventory API routes.
"""

from fastapi import APIRouter, Depends
from typing import List

from ..schemas.notebook import AdjustComponentRequest, ComponentCountSchema
from ..services.notebook_service import NotebookService
from ..dependencies import get_notebook_service

router = APIRouter()


def _component(service: NotebookService, api_name: str) -> ComponentCountSchema:
    return ComponentCountSchema.from_state(service.inventory.get(api_name))


@router.get("", response_model=List[ComponentCountSchema])
async def get_inventory(
    service: NotebookService = Depends(get_notebook_service),
):
    """Get owned counts of every component."""
    return [ComponentCountSchema.from_state(s) for s in service.inventory.states]


@router.post("/{api_name}/adjust", response_model=ComponentCountSchema)
async def adjust_component(
    api_name: str,
    request: AdjustComponentRequest,
    service: NotebookService = Depends(get_notebook_service),
):
    """Add or remove one of a component."""
    service.adjust_component(api_name, request.delta)
    return _component(service, api_name)


@router.post("/{api_name}/increment", response_model=ComponentCountSchema)
async def increment_component(
    api_name: str,
    service: NotebookService = Depends(get_notebook_service),
):
    """Add one of a component."""
    service.adjust_component(api_name, 1)
    return _component(service, api_name)


@router.post("/{api_name}/decrement", response_model=ComponentCountSchema)
async def decrement_component(
    api_name: str,
    service: NotebookService = Depends(get_notebook_service),
):
    """Remove one of a component (stops at zero)."""
    service.adjust_component(api_name, -1)
    return _component(service, api_name)
