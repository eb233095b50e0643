"""
Note actions called by the editor UI.

Each action needs a resolved user and reports failures through the returned
ActionResult instead of raising, so callers never branch on exceptions.
"""
from __future__ import annotations

import logging
from typing import Optional

from ainotes.errors import UnauthenticatedError, handle_error
from ainotes.models.notes import ActionResult
from ainotes.storage.notes_store import NotesStore

logger = logging.getLogger(__name__)


def _require_user(user_id: Optional[str], message: str) -> str:
    if user_id is None:
        raise UnauthenticatedError(message)
    return user_id


def create_note_action(store: NotesStore, user_id: Optional[str], note_id: str) -> ActionResult:
    """Create an empty note with a client-chosen id."""
    try:
        author_id = _require_user(user_id, "You must be logged in to create a note")
        store.create_note(author_id=author_id, note_id=note_id, text="")
        logger.info("Note created: note_id=%s user_id=%s", note_id, author_id)
        return ActionResult()
    except Exception as e:
        return handle_error(e)


def update_note_action(
    store: NotesStore, user_id: Optional[str], note_id: str, text: str
) -> ActionResult:
    """Overwrite the text of one of the caller's notes."""
    try:
        author_id = _require_user(user_id, "You must be logged in to update a note")
        store.update_note(author_id=author_id, note_id=note_id, text=text)
        logger.info("Note updated: note_id=%s user_id=%s chars=%d", note_id, author_id, len(text))
        return ActionResult()
    except Exception as e:
        return handle_error(e)


def delete_note_action(store: NotesStore, user_id: Optional[str], note_id: str) -> ActionResult:
    try:
        author_id = _require_user(user_id, "You must be logged in to delete a note")
        store.delete_note(author_id=author_id, note_id=note_id)
        logger.info("Note deleted: note_id=%s user_id=%s", note_id, author_id)
        return ActionResult()
    except Exception as e:
        return handle_error(e)
