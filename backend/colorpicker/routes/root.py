"""
Color Picker API - Root Route
===============================

What:  GET / returns a fixed plain-text welcome line.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

WELCOME_TEXT = "Welcome to Color Picker API"


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def welcome() -> str:
    return WELCOME_TEXT
