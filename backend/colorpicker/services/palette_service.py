"""
Color Picker API - Palette Service
====================================

What:  Data access for the `palettes` table, keyed by palette name.
Who:   Called by the /api/v1/palettes route handlers.
"""

from colorpicker.models.palette import Palette
from colorpicker.services.base import RecordService

COLOR_FIELDS = ("color_1", "color_2", "color_3", "color_4", "color_5")


class PaletteService(RecordService[Palette]):
    model = Palette
    key_field = "palette_name"
    writable_fields = ("palette_name", "project_id") + COLOR_FIELDS

    # Fields a POST body must carry, in the order they are checked
    required_fields = ("palette_name", "project_id") + COLOR_FIELDS


palette_service = PaletteService()
