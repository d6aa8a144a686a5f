"""
Color Picker API - Project SQLAlchemy Model
=============================================

What:  ORM model representing the `projects` table.
Who:   Used by ProjectService for CRUD operations and by PaletteService
       (through the foreign key on Palette.project_id).

Table Design:
    - Integer primary key generated by the store
    - name: natural key, unique; every lookup/update/delete goes through it
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from colorpicker.database import Base
from colorpicker.models.timestamps import TimestampMixin


class Project(TimestampMixin, Base):
    """
    A named container that owns zero or more palettes.

    Query Patterns:
        - List all: SELECT ... ORDER BY id
        - By natural key: SELECT ... WHERE name = :name
          → Uses the unique index on name
    """

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, name='{self.name}')>"
