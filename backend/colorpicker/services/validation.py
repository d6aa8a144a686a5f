"""
Color Picker API - Request Body Validation
============================================

What:  Presence checks for JSON request bodies.
How:   Fields are checked in the order given; the first one that is absent
       (or null) raises ValidationError with a caller-supplied message.
       Values are not type-checked or coerced. read_json_object parses a
       body by hand for handlers that must look a record up first.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from fastapi import Request

from colorpicker.exceptions import ValidationError

NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"


def first_missing_field(
    payload: Optional[Mapping[str, Any]], fields: Iterable[str]
) -> Optional[str]:
    """Return the first field in `fields` that the payload lacks, else None."""
    payload = payload or {}
    for field in fields:
        if payload.get(field) is None:
            return field
    return None


def require_fields(
    payload: Optional[Mapping[str, Any]],
    fields: Iterable[str],
    message: str,
) -> None:
    """
    Raise ValidationError unless every field is present.

    Args:
        payload: Parsed JSON body (None when the request had no body)
        fields:  Required keys, in the order they should be reported
        message: str.format template; `{field}` is replaced by the missing key
                 (literal braces must be doubled)

    Example:
        require_fields({"color": "red"}, ("name",), "missing {field}!")
        → ValidationError("missing name!")
    """
    missing = first_missing_field(payload, fields)
    if missing is not None:
        raise ValidationError(message=message.format(field=missing), field=missing)


def require_any_field(
    payload: Optional[Mapping[str, Any]],
    fields: Iterable[str],
    message: str,
) -> None:
    """Raise ValidationError unless at least one of `fields` is present."""
    payload = payload or {}
    if not any(payload.get(field) is not None for field in fields):
        raise ValidationError(message=message)


async def read_json_object(request: Request) -> Optional[Dict[str, Any]]:
    """
    Parse the request body as a JSON object.

    Returns None for an empty body or a JSON null. Any other body that is
    not a JSON object raises ValidationError. Handlers call this after their
    record lookup, so an unknown key answers 404 even for a malformed body.
    """
    if not await request.body():
        return None
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError(message=NOT_AN_OBJECT_MESSAGE)
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise ValidationError(message=NOT_AN_OBJECT_MESSAGE)
    return payload
