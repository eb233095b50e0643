from typing import Optional

from fastapi import APIRouter, Depends

from ainotes.actions.ai import ask_ai_about_notes
from ainotes.ai.gemini import GeminiClient, create_llm
from ainotes.models.ai import AskRequest, AskResponse
from ainotes.storage.database import db
from ainotes.storage.notes_store import NotesStore
from ainotes.utils.jwt_auth import get_user

router = APIRouter(prefix="/ai", tags=["ai"])

store = NotesStore(db)


def get_llm() -> Optional[GeminiClient]:
    return create_llm()


@router.post("/ask", response_model=AskResponse)
def ask(
    payload: AskRequest,
    user_id: Optional[str] = Depends(get_user),
    llm: Optional[GeminiClient] = Depends(get_llm),
) -> AskResponse:
    answer = ask_ai_about_notes(store, user_id, payload.questions, payload.responses, llm)
    return AskResponse(response=answer)
