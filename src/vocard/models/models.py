"""Database models for the trainer."""
from sqlalchemy import Column, Integer, String, Text

from vocard.models.base import Base, TimestampMixin


class ProgressDocument(Base, TimestampMixin):
    """A whole JSON document stored under a single key."""

    __tablename__ = "progress_documents"

    id = Column(Integer, primary_key=True)
    key = Column(String, unique=True, nullable=False, index=True)
    value = Column(Text, nullable=False)  # JSON text
