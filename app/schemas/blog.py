from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Author(BaseModel):
    firstName: str
    lastName: str


class PostCreate(BaseModel):
    author: Author
    title: str = Field(..., min_length=1)
    content: str
    created: Optional[datetime] = None


class PostUpdate(BaseModel):
    """Partial update body; only the fields a client sends are applied."""

    id: Optional[str] = None
    author: Optional[Author] = None
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    created: Optional[datetime] = None


class PostOut(BaseModel):
    id: str
    title: str
    content: str
    author: str
    created: datetime
