"""Infrastructure Layer — upstream HTTP client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All upstream calls wrapped with retry/timeout/error mapping

Design Decisions:
    - Resilient wrapper over raw httpx (ADR: ExMA single responsibility)
"""
