"""
Client-side note editing helpers.

A note's text is its heading and its body joined by one newline. NoteEditor
keeps the two parts, recomposes the text on every edit and pushes it through
`save(note_id, text)` once edits have been quiet for `delay` seconds. The
timer belongs to the editor instance, so two open editors never cancel each
other's pending saves.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

HEADING_PLACEHOLDER = "Enter note heading..."
DEFAULT_SAVE_DELAY = 1.5

SaveFn = Callable[[str, str], Any]


def split_note_text(text: str) -> tuple[str, str]:
    """Split stored text into (heading, body) on the first newline."""
    heading, _, body = text.partition("\n")
    return heading, body


def compose_note_text(heading: str, body: str) -> str:
    return f"{heading}\n{body}"


class NoteEditor:
    def __init__(
        self,
        note_id: str,
        save: SaveFn,
        text: str = "",
        delay: float = DEFAULT_SAVE_DELAY,
    ):
        self.note_id = note_id
        self.delay = delay
        self._save = save
        self.heading, self.body = split_note_text(text)

        self._lock = threading.Lock()
        # held around every save so texts reach the server in edit order
        self._save_lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[str] = None
        # bumped on every schedule so a timer that already fired can tell it is stale
        self._generation = 0

    @property
    def text(self) -> str:
        return compose_note_text(self.heading, self.body)

    @property
    def display_heading(self) -> str:
        return self.heading or HEADING_PLACEHOLDER

    @property
    def has_pending_save(self) -> bool:
        with self._lock:
            return self._pending is not None

    def set_heading(self, heading: str) -> None:
        self.edit(heading=heading)

    def set_body(self, body: str) -> None:
        self.edit(body=body)

    def edit(self, heading: Optional[str] = None, body: Optional[str] = None) -> None:
        if heading is not None:
            self.heading = heading
        if body is not None:
            self.body = body
        self._schedule(self.text)

    def _schedule(self, text: str) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = text
            self._timer = threading.Timer(self.delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, generation: int) -> None:
        with self._save_lock:
            with self._lock:
                if generation != self._generation or self._pending is None:
                    return
                text = self._pending
                self._pending = None
                self._timer = None

            try:
                self._push(text)
            except Exception:
                # no caller to report to from the timer thread
                logger.exception("Autosave failed for note_id=%s", self.note_id)

    def _push(self, text: str) -> None:
        result = self._save(self.note_id, text)
        error = result.get("error_message") if isinstance(result, dict) else None
        if error:
            logger.warning("Autosave rejected for note_id=%s: %s", self.note_id, error)

    def _take_pending(self) -> Optional[str]:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1
            text, self._pending = self._pending, None
            return text

    def flush(self) -> bool:
        """Save the pending text right away. Returns False when nothing was pending.

        Waits for a timer save that is already running, so the newer text
        always lands last.
        """
        with self._save_lock:
            text = self._take_pending()
            if text is None:
                return False
            self._push(text)
            return True

    def cancel(self) -> None:
        """Drop the pending save, if any."""
        self._take_pending()

    def close(self) -> None:
        # flush also waits out an in-flight timer save
        self.flush()

    def __enter__(self) -> "NoteEditor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
