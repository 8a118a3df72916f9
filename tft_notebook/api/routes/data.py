"""
Static data API routes.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from typing import List, Dict, Any

from ..services.notebook_service import NotebookService
from ..dependencies import get_notebook_service

router = APIRouter()


# === Champions ===


@router.get("/champions")
async def get_all_champions(
    service: NotebookService = Depends(get_notebook_service),
) -> List[Dict[str, Any]]:
    """Get all playable champions in roster order."""
    return [c.model_dump(by_alias=True) for c in service.catalog.champions]


@router.get("/champions/{name}")
async def get_champion(
    name: str,
    service: NotebookService = Depends(get_notebook_service),
) -> Dict[str, Any]:
    """Get specific champion by display name."""
    return service.catalog.get_champion(name).model_dump(by_alias=True)


@router.get("/champions/{name}/icon")
def get_champion_icon(
    name: str,
    service: NotebookService = Depends(get_notebook_service),
):
    """Get a champion's cached square icon.

    Runs in the threadpool since a first request downloads and resizes the icon.
    """
    return FileResponse(service.champion_icon(name), media_type="image/png")


# === Items ===


@router.get("/items")
async def get_all_items(
    service: NotebookService = Depends(get_notebook_service),
) -> List[Dict[str, Any]]:
    """Get completed items."""
    return [i.model_dump(by_alias=True) for i in service.catalog.items]


@router.get("/components")
async def get_components(
    service: NotebookService = Depends(get_notebook_service),
) -> List[Dict[str, Any]]:
    """Get components referenced by completed items."""
    return [i.model_dump(by_alias=True) for i in service.catalog.components]


@router.get("/items/{api_name}")
async def get_item(
    api_name: str,
    service: NotebookService = Depends(get_notebook_service),
) -> Dict[str, Any]:
    """Get specific item by api name."""
    return service.catalog.get_item(api_name).model_dump(by_alias=True)


@router.get("/items/{api_name}/icon")
def get_item_icon(
    api_name: str,
    service: NotebookService = Depends(get_notebook_service),
):
    """Get an item's cached icon.

    Runs in the threadpool since a first request downloads and resizes the icon.
    """
    return FileResponse(service.item_icon(api_name), media_type="image/png")
