"""
Color Picker API - Palette Schemas
====================================

What:  Pydantic response model for palette records.
How:   Built straight from the ORM object (`from_attributes`). Text columns
       are stringified, so a POSTed number comes back the way a text column
       would return it on the next read.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class PaletteResponse(BaseModel):
    """Returned by GET /api/v1/palettes[/{palette_name}] and POST /api/v1/palettes."""
    id: int = Field(description="Store-generated identifier")
    palette_name: str = Field(description="Unique palette name (natural key)")
    project_id: int = Field(description="Owning project id")
    color_1: str
    color_2: str
    color_3: str
    color_4: str
    color_5: str
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last update timestamp (UTC)")

    model_config = {"from_attributes": True}

    @field_validator(
        "palette_name", "color_1", "color_2", "color_3", "color_4", "color_5",
        mode="before",
    )
    @classmethod
    def text_as_str(cls, v: Any) -> Any:
        """Text columns are not type-checked on write; echo what was stored as a string."""
        return v if v is None else str(v)
