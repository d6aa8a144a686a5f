# Services package init
"""
Color Picker API - Services Layer
===================================

What:  Data-access layer sitting between routes (HTTP) and the database.
How:   Stateless service singletons; each call receives the request's
       AsyncSession and issues a single statement.

Service Inventory:
    - RecordService (generic): find_all / find_by_key / insert /
      update_by_key / delete_by_key by natural key
    - ProjectService: `projects` table, keyed by name
    - PaletteService: `palettes` table, keyed by palette_name
    - validation: presence checks for request bodies
"""
