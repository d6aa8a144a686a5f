"""
Color Picker API - Request Validation Unit Tests
==================================================

What we test:
    ✅ First missing field wins, in declared order
    ✅ null counts as missing; empty body counts as all missing
    ✅ Message templates keep literal braces
"""

import pytest

from colorpicker.exceptions import ValidationError
from colorpicker.routes.palettes import MISSING_FIELD_MESSAGE
from colorpicker.routes.projects import MISSING_NAME_MESSAGE
from colorpicker.services.palette_service import palette_service
from colorpicker.services.validation import (
    first_missing_field,
    require_any_field,
    require_fields,
)


class TestFirstMissingField:

    def test_all_present(self):
        assert first_missing_field({"a": 1, "b": 2}, ("a", "b")) is None

    def test_reports_first_in_declared_order(self):
        assert first_missing_field({"b": 2}, ("a", "b", "c")) == "a"
        assert first_missing_field({"a": 1}, ("a", "b", "c")) == "b"

    def test_null_value_is_missing(self):
        assert first_missing_field({"a": None}, ("a",)) == "a"

    def test_no_body(self):
        assert first_missing_field(None, ("name",)) == "name"

    def test_falsy_values_count_as_present(self):
        assert first_missing_field({"project_id": 0, "name": ""}, ("project_id", "name")) is None


class TestRequireFields:

    def test_project_message(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"color": "red"}, ("name",), MISSING_NAME_MESSAGE)

        assert exc_info.value.message == "Expected format { name: <string> }, missing name!"
        assert exc_info.value.field == "name"

    def test_palette_message_names_missing_color(self, palette_payload):
        del palette_payload["color_5"]

        with pytest.raises(ValidationError) as exc_info:
            require_fields(palette_payload, palette_service.required_fields, MISSING_FIELD_MESSAGE)

        assert exc_info.value.message == (
            "Expected { project_id: <int>, palette_name: <string>, color_1: <string>, "
            "color_2: <string> color_3: <string>, color_4: <string>, color_5: <string> } \n"
            "        Missing color_5!"
        )

    def test_palette_name_checked_before_project_id(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({}, palette_service.required_fields, MISSING_FIELD_MESSAGE)

        assert exc_info.value.field == "palette_name"

    def test_complete_payload_passes(self, palette_payload):
        require_fields(palette_payload, palette_service.required_fields, MISSING_FIELD_MESSAGE)


class TestRequireAnyField:

    def test_one_field_is_enough(self):
        require_any_field({"color_2": "#bbbbbb"}, palette_service.writable_fields, "nothing")

    def test_unknown_keys_do_not_count(self):
        with pytest.raises(ValidationError) as exc_info:
            require_any_field({"colour": "#bbbbbb"}, palette_service.writable_fields, "nothing")

        assert exc_info.value.message == "nothing"
