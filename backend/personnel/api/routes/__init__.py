"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain SQL (delegate to services/)
    - StoreError is caught in the route and mapped to the page envelope

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
