"""Core Layer: pure domain logic, no IO, no async, no storage.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic (clock and id helpers aside)

Design Decisions:
    - Functional core separated from imperative shell: handlers in services/
      orchestrate IO around the checks defined here
"""
