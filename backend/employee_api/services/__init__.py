"""Services Layer — orchestration of upstream calls around the pure core.

Invariants:
    - Services hold no state between calls
    - Services see the upstream only through core.upstream_protocols

Design Decisions:
    - Imperative shell around the functional core (ADR: ExMA impureim sandwich)
"""
