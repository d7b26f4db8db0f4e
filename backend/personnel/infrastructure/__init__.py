"""Infrastructure Layer — connection provider, query execution, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every store failure is mapped to StoreError before leaving this layer

Design Decisions:
    - Connection provider and query executor kept separate: the provider owns the
      pool lifecycle, the executor owns one request's statements
"""
