"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - Access control lives in dependencies, never inline in a route body

Design Decisions:
    - Thin routes delegate to services
"""
