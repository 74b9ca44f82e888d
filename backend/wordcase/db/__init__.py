"""Database Infrastructure — SQLAlchemy Base shared by the comments store.

Invariants:
    - Single async engine per process (initialized via init_db)
    - Every ORM model inherits from db.base.Base
"""
