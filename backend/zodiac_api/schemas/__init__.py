"""Pydantic Schemas - request/response contracts for API endpoints.

Invariants:
    - Schemas validate at system boundary; domain rules stay in core/
"""
