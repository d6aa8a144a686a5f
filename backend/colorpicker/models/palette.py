"""
Color Picker API - Palette SQLAlchemy Model
=============================================

What:  ORM model representing the `palettes` table.
Who:   Used by PaletteService for CRUD operations.

Table Design:
    - Integer primary key generated by the store
    - palette_name: natural key, unique
    - project_id: foreign key to projects.id. Referential integrity is the
      store's job; deleting a project does not cascade to its palettes.
    - color_1 .. color_5: hex color strings such as "#1F1F1F"
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from colorpicker.database import Base
from colorpicker.models.timestamps import TimestampMixin


class Palette(TimestampMixin, Base):
    """A named set of five colors belonging to exactly one project."""

    __tablename__ = "palettes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    palette_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id"),
        nullable=False,
        index=True,
    )

    # Hex strings; the API does not validate their format
    color_1: Mapped[str] = mapped_column(String(32), nullable=False)
    color_2: Mapped[str] = mapped_column(String(32), nullable=False)
    color_3: Mapped[str] = mapped_column(String(32), nullable=False)
    color_4: Mapped[str] = mapped_column(String(32), nullable=False)
    color_5: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Palette(id={self.id}, palette_name='{self.palette_name}', "
            f"project_id={self.project_id})>"
        )
