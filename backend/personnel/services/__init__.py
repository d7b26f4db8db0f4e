"""Services Layer — SQL operations for persons and employees.

Invariants:
    - Services receive a QueryExecutor; they never open sessions themselves
    - Store errors propagate as StoreError; services do not catch them

Design Decisions:
    - One module per table for locality
    - Routes map StoreError to the response envelope (ADR: thin routes)
"""
