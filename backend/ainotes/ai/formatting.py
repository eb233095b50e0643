"""
Text shaping around the model call: notes into a prompt block, and model
output back into clean HTML.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable

from ainotes.storage.notes_store import Note

RULE = "=" * 15

# ```html / ``` and the ''' variant some models emit
_FENCE_RE = re.compile(r"(?:```|''')(?:html|markdown|md)?", re.IGNORECASE)


def _fmt_ts(ts: datetime) -> str:
    return ts.isoformat(sep=" ", timespec="seconds")


def format_note(note: Note, number: int) -> str:
    return "\n".join([
        f"{RULE} NOTE {number} (ID: {note.id}) {RULE}",
        "",
        note.text,
        "",
        f"Created: {_fmt_ts(note.created_at)}",
        f"Last updated: {_fmt_ts(note.updated_at)}",
        f"{RULE} END OF NOTE {number} {RULE}",
    ])


def format_notes(notes: Iterable[Note]) -> str:
    """Number the notes from 1 in the given order and join them with a blank line."""
    return "\n\n".join(format_note(n, i) for i, n in enumerate(notes, start=1))


def sanitize_response(text: str | None) -> str:
    """Strip code-fence markers the model adds despite being told not to."""
    if not text:
        return ""
    return _FENCE_RE.sub("", text).strip()
