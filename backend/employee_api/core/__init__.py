"""Core Layer — pure domain logic: error taxonomy, retry policy, derived views.

Invariants:
    - No IO, no async, no imports from infrastructure/ or services/
    - Shell (services, infrastructure) orchestrates IO around these functions

Design Decisions:
    - Functional core, imperative shell (ADR: ExMA impureim sandwich)
"""
