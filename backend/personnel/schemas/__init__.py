"""Pydantic Schemas — request body parsing for API endpoints.

Invariants:
    - Schemas parse JSON objects only; every field is optional and untyped so
      that missing or odd values reach the store and are judged by its constraints
    - Routes accept a missing body as an empty object

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
