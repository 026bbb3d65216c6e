"""Resource board models"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ResourceCategory(str, Enum):
    NOTES = "notes"
    BOOKS = "books"
    EQUIPMENT = "equipment"


class Resource(BaseModel):
    """Metadata for a shared note, book or piece of equipment"""
    id: int
    title: str
    description: str = ""
    category: ResourceCategory
    author: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    link: str = "#"
    created_at: Optional[datetime] = None
