"""
Acknowledgement and error bodies shared by the notebook routes.
"""

from typing import Literal, Optional

from pydantic import BaseModel

from tft_notebook.errors import EntityLookupError


class ActionResponse(BaseModel):
    """Acknowledges a notebook action that has no richer payload."""

    status: Literal["success"] = "success"
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """
    Body returned for a failed notebook action.

    ``kind`` and ``key`` name the missing entity when the failure is a
    lookup of an unknown champion, item or component.
    """

    status: Literal["error"] = "error"
    error: str
    detail: Optional[str] = None
    kind: Optional[str] = None
    key: Optional[str] = None

    @classmethod
    def from_exception(cls, error: str, exc: Exception) -> "ErrorResponse":
        if isinstance(exc, EntityLookupError):
            return cls(error=error, detail=str(exc), kind=exc.kind, key=exc.key)
        return cls(error=error, detail=str(exc))
