"""
Dependency injection for API services.
"""

from functools import lru_cache

from tft_notebook.config import get_settings

from .services.notebook_service import NotebookService


@lru_cache()
def get_notebook_service() -> NotebookService:
    """Get NotebookService singleton.

    The first call fetches and ingests the game data.
    """
    return NotebookService.from_settings(get_settings())
