"""Infrastructure Layer — storage engine handle and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy exceptions leave this layer as core/errors.py DatabaseError kinds
"""
