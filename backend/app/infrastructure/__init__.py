"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports services/ or api/
    - SQLAlchemy errors are mapped to core errors before leaving this layer
"""
