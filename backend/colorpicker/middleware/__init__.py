# Middleware package init
"""
Color Picker API - Middleware Package
=======================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [CORS] → Route Handler

    - Request ID runs first so every later log line can carry the id
    - Access Log measures the full handler duration and final status code
"""
