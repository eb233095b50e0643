"""
Domain errors and the shared error-normalization helper.

Actions never raise to their callers: every failure is turned into an
ActionResult by handle_error() at the action boundary.
"""
from __future__ import annotations

import logging

from ainotes.models.notes import ActionResult

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class AppError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnauthenticatedError(AppError):
    """Raised when an action runs without a resolved user."""


class NoteNotFoundError(AppError):
    """Raised when a note does not exist for the given author."""

    def __init__(self, note_id: str):
        self.note_id = note_id
        super().__init__("Note not found")


class DuplicateNoteError(AppError):
    def __init__(self, note_id: str):
        self.note_id = note_id
        super().__init__("A note with this id already exists")


class UserExistsError(AppError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("User exists")


class MissingApiKeyError(AppError):
    """Raised when the generative-model API key is not configured."""

    def __init__(self, message: str = "API key not set"):
        super().__init__(message)


class AIServiceError(AppError):
    """Raised when the generative-model call fails."""


def handle_error(error: Exception) -> ActionResult:
    """Convert any exception into a uniform ActionResult.

    Domain errors keep their message; anything else is logged with its
    traceback and reported with a generic message.
    """
    if isinstance(error, AppError):
        logger.info("Action failed: %s (%s)", error.message, type(error).__name__)
        return ActionResult(error_message=error.message)

    logger.exception("Unexpected error in action")
    return ActionResult(error_message=UNEXPECTED_ERROR_MESSAGE)
