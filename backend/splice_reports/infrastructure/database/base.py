"""SQLAlchemy declarative base shared by every ORM model in the report store."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models; ``Base.metadata`` drives table creation."""
