"""Mod request/response schemas."""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, field_validator
from minemods.schemas.base import CamelModel, CamelORMModel


class ModCreate(CamelModel):
    """Publish form body. Required fields are checked by the catalog service."""
    name: str = ""
    description: str = ""
    long_description: Optional[str] = None
    version: str = ""
    author: str = ""
    category: str = "Utility"
    image_url: Optional[str] = None
    admin_password: str = ""

    @field_validator(
        "name", "description", "version", "author", "category", "admin_password",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, v):
        return v if v is not None else ""


class ModCreated(BaseModel):
    id: str


class DownloadRecorded(BaseModel):
    success: bool = True


class ModResponse(CamelORMModel):
    id: str
    name: str
    description: str = ""
    long_description: Optional[str] = None
    version: str = ""
    author: str = ""
    category: str = ""
    downloads: int = 0
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("description", "version", "author", "category", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v if v is not None else ""
