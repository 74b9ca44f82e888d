"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ conversion logic
    - All database failures mapped to core/errors.py types

Design Decisions:
    - Thin wrappers over raw clients (ADR: single responsibility)
"""
