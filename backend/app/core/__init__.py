"""Core Layer — pure domain logic: field names, normalization, validation, errors.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure and deterministic; IO lives behind repository_protocols
"""
