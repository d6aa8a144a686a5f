"""
Color Picker API - Project Schemas
====================================

What:  Pydantic response model for project records.
How:   Built straight from the ORM object (`from_attributes`).

Request bodies are deliberately NOT modelled here: the API only checks that
required keys are present and reports the first missing one with a fixed
message (see services/validation.py), which Pydantic's own 422 format cannot
express.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class ProjectResponse(BaseModel):
    """Returned by GET /api/v1/projects[/{name}] and POST /api/v1/projects."""
    id: int = Field(description="Store-generated identifier")
    name: str = Field(description="Unique project name (natural key)")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last update timestamp (UTC)")

    model_config = {"from_attributes": True}

    @field_validator("name", mode="before")
    @classmethod
    def name_as_str(cls, v: Any) -> Any:
        return v if v is None else str(v)
