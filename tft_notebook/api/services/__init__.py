"""API services."""

from .notebook_service import NotebookService

__all__ = [
    "NotebookService",
]
