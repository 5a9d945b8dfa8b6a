"""
Shared view-model pieces: load state and user-visible notices.
"""

from pydantic import BaseModel, Field
import enum


class ViewState(str, enum.Enum):
    """
    Load state of a collection view.

    ``loading`` moves to ``ready`` or ``ready-empty`` once the fetch settles.
    A failed fetch also ends in ``ready`` (with an empty collection and a notice).
    """
    LOADING = "loading"
    READY = "ready"
    READY_EMPTY = "ready-empty"


class NoticeLevel(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notice(BaseModel):
    """Transient message shown to the user."""

    level: NoticeLevel = Field(..., description="Notice severity", examples=["error"])
    message: str = Field(..., description="Human-readable message", examples=["Failed to load properties"])

    @classmethod
    def success(cls, message: str) -> "Notice":
        return cls(level=NoticeLevel.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str) -> "Notice":
        return cls(level=NoticeLevel.ERROR, message=message)
