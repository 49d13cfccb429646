"""Employee Intake Application Package — registration service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
