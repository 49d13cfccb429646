"""Services Layer — the registration intake flow.

Invariants:
    - Services depend on repository protocols, never on a concrete store
"""
