"""API Layer - FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app()
    - All endpoints return JSON; errors use the flat {"error": ...} envelope
"""
