"""API Layer — FastAPI routes, handler dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies (or no body for 204)

Design Decisions:
    - Thin routes delegate to services
"""
