"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic beyond the error hierarchy
    - All SQLAlchemy failures surface as core DatabaseError
"""
