"""Core Layer — error taxonomy shared by every other layer.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no async, no DB

Design Decisions:
    - Errors live in core so infrastructure can raise them and api can render them
      without importing each other
"""
