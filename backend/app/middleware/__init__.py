# Middleware package init
"""
Blog Management API — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first, as built in main.create_app):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID wraps Logging so every access log line carries the id
    - CORS and GZip come from FastAPI/Starlette
"""
