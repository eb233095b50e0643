"""
HTTP client for the AI Notes API, used by editors and scripts.
"""
from __future__ import annotations

import uuid
from typing import Any, Optional, Sequence

import httpx


class NotesClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        # an injected client (e.g. a TestClient) keeps its own base_url
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.token = token

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        r = self._http.request(method, path, headers=self._headers(), **kwargs)
        r.raise_for_status()
        return r.json()

    def register(self, user_id: str, password: str) -> dict:
        return self._request("POST", "/auth/register", json={"user_id": user_id, "password": password})

    def login(self, user_id: str, password: str) -> str:
        data = self._request("POST", "/auth/login", json={"user_id": user_id, "password": password})
        self.token = data["access_token"]
        return self.token

    def list_notes(self) -> list[dict]:
        return self._request("GET", "/notes")

    def get_note(self, note_id: str) -> dict:
        return self._request("GET", f"/notes/{note_id}")

    def create_note(self, note_id: Optional[str] = None) -> dict:
        """Create an empty note; the id is generated here unless given.

        Returns the action result with the note id added under "id".
        """
        note_id = note_id or str(uuid.uuid4())
        result = self._request("POST", "/notes", json={"id": note_id})
        return {"id": note_id, **result}

    def update_note(self, note_id: str, text: str) -> dict:
        return self._request("PUT", f"/notes/{note_id}", json={"text": text})

    def delete_note(self, note_id: str) -> dict:
        return self._request("DELETE", f"/notes/{note_id}")

    def ask(self, questions: Sequence[str], responses: Sequence[str] = ()) -> str:
        data = self._request(
            "POST", "/ai/ask", json={"questions": list(questions), "responses": list(responses)}
        )
        return data["response"]

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "NotesClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
