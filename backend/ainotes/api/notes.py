from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Path

from ainotes.actions.notes import create_note_action, delete_note_action, update_note_action
from ainotes.models.notes import NOTE_ID_MAX_LENGTH, ActionResult, NoteCreate, NoteOut, NoteUpdate
from ainotes.storage.database import db
from ainotes.storage.notes_store import NotesStore
from ainotes.utils.jwt_auth import get_current_user, get_user

router = APIRouter(prefix="/notes", tags=["notes"])

store = NotesStore(db)

NoteId = Annotated[str, Path(min_length=1, max_length=NOTE_ID_MAX_LENGTH)]


@router.get("", response_model=list[NoteOut])
def list_notes(user_id: str = Depends(get_current_user)) -> list[NoteOut]:
    notes = store.list_notes(author_id=user_id)
    return [NoteOut(**n.to_dict()) for n in notes]


@router.get("/{note_id}", response_model=NoteOut)
def get_note(note_id: NoteId, user_id: str = Depends(get_current_user)) -> NoteOut:
    note = store.get_note(author_id=user_id, note_id=note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteOut(**note.to_dict())


# Actions: always 200, failures travel in error_message


@router.post("", response_model=ActionResult)
def create_note(payload: NoteCreate, user_id: Optional[str] = Depends(get_user)) -> ActionResult:
    return create_note_action(store, user_id, payload.id)


@router.put("/{note_id}", response_model=ActionResult)
def update_note(
    note_id: NoteId,
    payload: NoteUpdate,
    user_id: Optional[str] = Depends(get_user),
) -> ActionResult:
    return update_note_action(store, user_id, note_id, payload.text)


@router.delete("/{note_id}", response_model=ActionResult)
def delete_note(note_id: NoteId, user_id: Optional[str] = Depends(get_user)) -> ActionResult:
    return delete_note_action(store, user_id, note_id)
