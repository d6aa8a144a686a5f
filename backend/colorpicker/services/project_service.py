"""
Color Picker API - Project Service
====================================

What:  Data access for the `projects` table, keyed by project name.
Who:   Called by the /api/v1/projects route handlers.
"""

from colorpicker.models.project import Project
from colorpicker.services.base import RecordService


class ProjectService(RecordService[Project]):
    model = Project
    key_field = "name"
    writable_fields = ("name",)

    # Fields a POST body must carry, in the order they are checked
    required_fields = ("name",)


# Stateless; the session is passed to every call
project_service = ProjectService()
