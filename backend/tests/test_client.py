import httpx
import pytest
from conftest import PASSWORD

from ainotes.client import NotesClient
from ainotes.editor import NoteEditor


@pytest.fixture()
def notes_client(client):
    api = NotesClient(http=client)
    api.register("userA", PASSWORD)
    api.login("userA", PASSWORD)
    return api


def test_create_generates_id(notes_client):
    result = notes_client.create_note()
    assert result["error_message"] is None
    assert len(result["id"]) == 36

    notes = notes_client.list_notes()
    assert [n["id"] for n in notes] == [result["id"]]
    assert notes[0]["text"] == ""


def test_editor_autosaves_through_client(notes_client):
    note_id = notes_client.create_note("n1")["id"]

    editor = NoteEditor(note_id, notes_client.update_note, delay=60)
    editor.set_heading("Lecture 3")
    editor.set_body("<p>Entropy always increases.</p>")
    editor.flush()

    assert notes_client.get_note(note_id)["text"] == "Lecture 3\n<p>Entropy always increases.</p>"


def test_delete_through_client(notes_client):
    notes_client.create_note("n1")
    assert notes_client.delete_note("n1") == {"error_message": None}
    assert notes_client.delete_note("n1") == {"error_message": "Note not found"}


def test_ask_through_client(notes_client, fake_llm):
    notes_client.create_note("n1")
    notes_client.update_note("n1", "Title\nbody")
    fake_llm.reply = "<p>answer</p>"

    assert notes_client.ask(["q1"]) == "<p>answer</p>"


def test_reads_without_login_raise(client):
    api = NotesClient(http=client)
    with pytest.raises(httpx.HTTPStatusError):
        api.list_notes()
    # actions report instead of raising
    assert api.create_note("n1")["error_message"] == "You must be logged in to create a note"
