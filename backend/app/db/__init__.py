"""Database package — declarative base and metadata.

Invariants:
    - Single async engine per process (created by infrastructure/database.init_db)
"""
