"""Infrastructure Layer — database access, repositories and logging setup.

Invariants:
    - Infrastructure implements the protocols declared in core/repository_protocols.py
    - SQLAlchemy exceptions never escape as-is (mapped to DatabaseError or ConflictFailure)
"""
