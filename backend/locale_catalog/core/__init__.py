"""Core Layer — pure domain logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Resolvers are pure and deterministic over a CatalogSnapshot

Design Decisions:
    - Functional core separated from imperative shell: the async Catalog lives in services/
"""
