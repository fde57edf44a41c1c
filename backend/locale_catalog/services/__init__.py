"""Services Layer — async catalog loading and the configuration-bound facade.

Invariants:
    - The Catalog is the only stateful object; it is frozen once loaded
    - LocalizationService delegates every lookup to core/
"""
