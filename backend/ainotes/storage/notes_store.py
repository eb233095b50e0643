from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from ainotes.errors import DuplicateNoteError, NoteNotFoundError
from ainotes.storage.database import Database
from ainotes.storage.orm import NoteRow, utc_now


@dataclass(frozen=True)
class Note:
    id: str
    author_id: str
    text: str
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author_id": self.author_id,
            "text": self.text,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


def _as_utc(ts: datetime) -> datetime:
    # SQLite drops the offset on the way back
    return ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts


def _to_note(row: NoteRow) -> Note:
    return Note(
        id=row.id,
        author_id=row.author_id,
        text=row.text,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


class NotesStore:
    """Notes persistence. Every read and write is scoped to the author."""

    def __init__(self, db: Database):
        self.db = db

    def create_note(self, author_id: str, note_id: str, text: str = "") -> Note:
        with self.db.session() as session:
            now = utc_now()
            row = NoteRow(id=note_id, author_id=author_id, text=text, created_at=now, updated_at=now)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as e:
                raise DuplicateNoteError(note_id) from e
            return _to_note(row)

    def list_notes(self, author_id: str) -> list[Note]:
        """All notes of the author, newest first."""
        with self.db.session() as session:
            rows = session.scalars(
                select(NoteRow)
                .where(NoteRow.author_id == author_id)
                .order_by(NoteRow.created_at.desc())
            ).all()
            return [_to_note(r) for r in rows]

    def get_note(self, author_id: str, note_id: str) -> Note | None:
        with self.db.session() as session:
            row = session.scalars(
                select(NoteRow).where(NoteRow.id == note_id, NoteRow.author_id == author_id)
            ).one_or_none()
            return _to_note(row) if row is not None else None

    def update_note(self, author_id: str, note_id: str, text: str) -> Note:
        with self.db.session() as session:
            row = session.scalars(
                select(NoteRow).where(NoteRow.id == note_id, NoteRow.author_id == author_id)
            ).one_or_none()
            if row is None:
                raise NoteNotFoundError(note_id)

            row.text = text
            row.updated_at = utc_now()
            session.flush()
            return _to_note(row)

    def delete_note(self, author_id: str, note_id: str) -> None:
        # id and author must both match: a foreign note looks like a missing one
        with self.db.session() as session:
            result = session.execute(
                delete(NoteRow).where(NoteRow.id == note_id, NoteRow.author_id == author_id)
            )
            if result.rowcount == 0:
                raise NoteNotFoundError(note_id)
