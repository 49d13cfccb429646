"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas shape what leaves the service; models are persistence
"""
