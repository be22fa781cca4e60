# =============================================================================
# Payload API - ORM Models
# =============================================================================
"""
SQLAlchemy ORM models.

A single immutable ``payloads`` table: rows are inserted once per accepted
submission and never updated or deleted by this service.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base holding the metadata for all tables."""


class Payload(Base):
    """
    Persisted payload row.
    
    Attributes:
        id: Auto-increment primary key assigned by the store on insert
        content: Submitted text, never blank
        received_at: UTC timestamp set when the row is constructed
    """
    
    __tablename__ = "payloads"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    received_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    
    def __repr__(self) -> str:
        return f"<Payload(id={self.id}, content_length={len(self.content or '')})>"
