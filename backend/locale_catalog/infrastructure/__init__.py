"""Infrastructure Layer — record providers and cross-cutting concerns.

Invariants:
    - Providers only build core records; they hold no resolution logic
"""
