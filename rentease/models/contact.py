"""
Contact message record (``contacts`` collection, append-only here).
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class ContactMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: str
    message: str
    created_at: Optional[datetime] = None
