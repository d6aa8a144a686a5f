"""
Color Picker API - Palette Route Handlers
===========================================

What:  CRUD endpoints for palettes under /api/v1/palettes, addressed by
       palette_name.

Endpoints:
    GET    /api/v1/palettes                  200 all palettes
    GET    /api/v1/palettes/{palette_name}   200 palette | 404
    POST   /api/v1/palettes                  201 created palette | 422
    PATCH  /api/v1/palettes/{palette_name}   202 message | 404 | 422
    DELETE /api/v1/palettes/{palette_name}   202 message
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from colorpicker.database import get_db_session
from colorpicker.exceptions import NotFoundError
from colorpicker.schemas.common import ErrorResponse, MessageResponse
from colorpicker.schemas.palette import PaletteResponse
from colorpicker.services.palette_service import palette_service
from colorpicker.services.validation import (
    read_json_object,
    require_any_field,
    require_fields,
)

router = APIRouter(prefix="/api/v1/palettes", tags=["Palettes"])

# Existing clients match this text exactly, including the missing comma
# after color_2 and the indented second line.
MISSING_FIELD_MESSAGE = (
    "Expected {{ project_id: <int>, palette_name: <string>, color_1: <string>, "
    "color_2: <string> color_3: <string>, color_4: <string>, color_5: <string> }} \n"
    "        Missing {field}!"
)

NO_CHANGES_MESSAGE = (
    "Expected at least one of { palette_name: <string>, project_id: <int>, "
    "color_1: <string>, color_2: <string>, color_3: <string>, color_4: <string>, "
    "color_5: <string> }"
)


@router.get(
    "",
    response_model=List[PaletteResponse],
    summary="List all palettes",
)
async def get_palettes(
    db: AsyncSession = Depends(get_db_session),
) -> List[PaletteResponse]:
    palettes = await palette_service.find_all(db)
    return [PaletteResponse.model_validate(p) for p in palettes]


@router.get(
    "/{palette_name}",
    response_model=PaletteResponse,
    responses={404: {"description": "Palette not found", "model": ErrorResponse}},
    summary="Get a palette by name",
)
async def get_palette(
    palette_name: str,
    db: AsyncSession = Depends(get_db_session),
) -> PaletteResponse:
    palette = await palette_service.find_by_key(db, palette_name)
    if palette is None:
        raise NotFoundError(
            message=f"Could not find palette with name {palette_name}",
            resource="palette",
            key=palette_name,
        )
    return PaletteResponse.model_validate(palette)


@router.post(
    "",
    response_model=PaletteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"description": "Missing field", "model": ErrorResponse}},
    summary="Create a palette",
)
async def create_palette(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> PaletteResponse:
    """
    Create a palette from palette_name, project_id and color_1..color_5.

    All seven fields are required; the first one missing (in that order)
    is named in the 422 message. project_id must reference an existing
    project, which the store enforces.
    """
    require_fields(payload, palette_service.required_fields, MISSING_FIELD_MESSAGE)
    palette = await palette_service.insert(db, payload)
    return PaletteResponse.model_validate(palette)


@router.patch(
    "/{palette_name}",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        404: {"description": "Palette not found", "model": ErrorResponse},
        422: {"description": "Nothing to update", "model": ErrorResponse},
    },
    summary="Update palette fields",
    description="Partial update, typically a single `color_N`.",
)
async def update_palette(
    palette_name: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    if await palette_service.find_by_key(db, palette_name) is None:
        raise NotFoundError(
            message=f"No existing palette with name of {palette_name}",
            resource="palette",
            key=palette_name,
        )
    payload = await read_json_object(request)
    require_any_field(payload, palette_service.writable_fields, NO_CHANGES_MESSAGE)

    await palette_service.update_by_key(db, palette_name, payload)
    return MessageResponse(message="Color updated")


@router.delete(
    "/{palette_name}",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Delete a palette",
)
async def delete_palette(
    palette_name: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await palette_service.delete_by_key(db, palette_name)
    return MessageResponse(message=f"Successfully deleted palette {palette_name}")
