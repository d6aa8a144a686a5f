# Routes package init
"""
Color Picker API - API Routes Package
=======================================

Route Inventory:
    - root.py:      GET /                             (welcome text)
    - projects.py:  GET/POST /api/v1/projects
                    GET/PATCH/DELETE /api/v1/projects/{name}
    - palettes.py:  GET/POST /api/v1/palettes
                    GET/PATCH/DELETE /api/v1/palettes/{palette_name}
    - health.py:    GET /health                       (service health check)

Routes are thin: they extract the path and body, check required fields,
call one service function and choose the status code.
"""
