"""
Ask the assistant a question answered from the caller's own notes.

The result is always an HTML string: an answer, a canned message, or a
readable error. Nothing is retried and nothing is raised to the caller.
"""
from __future__ import annotations

import html
import logging
from typing import Optional, Sequence

from ainotes.ai.formatting import format_notes, sanitize_response
from ainotes.ai.gemini import GeminiClient
from ainotes.ai.prompt import build_history, build_prompt
from ainotes.errors import AppError, UnauthenticatedError
from ainotes.storage.notes_store import NotesStore

logger = logging.getLogger(__name__)

NO_NOTES_MESSAGE = "<p>You don't have any notes yet.</p>"
MISSING_KEY_MESSAGE = "<p>Configuration error: API key not set. Please contact support.</p>"
EMPTY_RESPONSE_MESSAGE = "<p>The AI couldn't generate a response. Please try again.</p>"


def _error_text(error: Exception) -> str:
    message = error.message if isinstance(error, AppError) else str(error)
    return html.escape(message or "Unknown error")


def ask_ai_about_notes(
    store: NotesStore,
    user_id: Optional[str],
    questions: Sequence[str],
    responses: Sequence[str],
    llm: Optional[GeminiClient],
) -> str:
    """Answer the last of `questions` using the notes of `user_id`.

    `responses` holds the answers to the earlier questions and is used as
    conversation history. `llm` is None when no API key is configured.
    """
    try:
        if user_id is None:
            raise UnauthenticatedError("You must be logged in to ask AI questions")
        if not questions:
            raise AppError("At least one question is required")

        notes = store.list_notes(author_id=user_id)
        if not notes:
            return NO_NOTES_MESSAGE
        logger.info("Answering question for user_id=%s from %d notes", user_id, len(notes))

        if llm is None:
            return MISSING_KEY_MESSAGE

        prompt = build_prompt(
            question=questions[-1],
            formatted_notes=format_notes(notes),
            history=build_history(questions, responses),
        )

        try:
            raw = llm.generate(prompt)
        except Exception as e:
            logger.error("Model call failed: %s", e)
            return f"<p>Error with AI service: {_error_text(e)}</p>"

        logger.info("Model responded for user_id=%s", user_id)
        return sanitize_response(raw) or EMPTY_RESPONSE_MESSAGE
    except Exception as e:
        if not isinstance(e, AppError):
            logger.exception("Error in ask_ai_about_notes")
        return f"<p>An error occurred: {_error_text(e)}</p>"
