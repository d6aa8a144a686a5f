"""
Color Picker API - Application Package
========================================

A small CRUD service for projects and their five-color palettes.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, field presence checks
    ├─────────────────────────────────────┤
    │      Services (Data Access)         │  ← one SQL statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
