from pydantic import BaseModel, Field

NOTE_ID_MAX_LENGTH = 64


class NoteCreate(BaseModel):
    # ids are generated by the client (uuid4 in practice)
    id: str = Field(min_length=1, max_length=NOTE_ID_MAX_LENGTH)


class NoteUpdate(BaseModel):
    text: str


class NoteOut(BaseModel):
    id: str
    author_id: str
    text: str
    created_at: str
    updated_at: str


class ActionResult(BaseModel):
    """Uniform result of a note action: error_message is None on success."""

    error_message: str | None = None
