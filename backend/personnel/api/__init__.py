"""API Layer — FastAPI routes, response envelope, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON

Design Decisions:
    - Thin routes delegate SQL to services
"""
