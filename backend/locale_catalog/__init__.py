"""Locale Catalog Package — country, language and content-rating resolution.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
