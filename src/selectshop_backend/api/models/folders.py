"""Pydantic models for folder endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FolderCreateRequest(BaseModel):
    """Ordered folder names to create for the current user."""

    model_config = ConfigDict(populate_by_name=True)

    folder_names: list[str] = Field(alias="folderNames")


class FolderResponse(BaseModel):
    """Public representation of a persisted folder."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
