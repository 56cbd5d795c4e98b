"""Error payloads shared by API routers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ApiErrorResponse(BaseModel):
    """Structured ``{message, statusCode}`` error body."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    status_code: int = Field(alias="statusCode")
