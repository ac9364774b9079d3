"""
SQLAlchemy declarative base and shared column helpers.
"""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models. Alembic reads Base.metadata."""

    pass


def utcnow() -> datetime:
    """Python-side timestamp so values are populated on the instance after flush."""
    return datetime.now(timezone.utc)
