"""
SQLAlchemy declarative base.

This is the foundation for all database models.
All models inherit from this Base class.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Every collection table and the id sequence table inherit from this so
    that ``Base.metadata.create_all`` builds the whole store schema.
    """
    pass
