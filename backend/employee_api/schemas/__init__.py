"""Pydantic Schemas — employee records, create requests, upstream envelopes.

Invariants:
    - Schemas validate at system boundaries (user input, upstream responses)
    - Upstream wire names live only here

Design Decisions:
    - Upstream envelopes separate from the public employee shape (ADR: DDD boundary)
"""
