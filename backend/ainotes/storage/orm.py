"""
SQLAlchemy models: users and their notes.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    notes = relationship("NoteRow", back_populates="author", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<UserRow(id='{self.id}')>"


class NoteRow(Base):
    """A note: heading and body stored together in `text`, split on the first newline."""

    __tablename__ = "notes"
    __table_args__ = (
        Index("idx_notes_author_created", "author_id", "created_at"),
    )

    id = Column(String(64), primary_key=True)
    author_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    text = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    author = relationship("UserRow", back_populates="notes")

    def __repr__(self):
        return f"<NoteRow(id='{self.id}', author_id='{self.author_id}')>"
