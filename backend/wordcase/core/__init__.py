"""Core Layer — pure conversion logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, db/ or models/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
