from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ainotes.errors import UserExistsError
from ainotes.storage.database import Database
from ainotes.storage.orm import UserRow


@dataclass(frozen=True)
class UserRecord:
    user_id: str
    hashed_password: str
    created_at: datetime


class UsersStore:
    def __init__(self, db: Database):
        self.db = db

    def get(self, user_id: str) -> Optional[UserRecord]:
        with self.db.session() as session:
            row = session.get(UserRow, user_id)
            if row is None:
                return None
            return UserRecord(
                user_id=row.id,
                hashed_password=row.hashed_password,
                created_at=row.created_at,
            )

    def create(self, user_id: str, hashed_password: str) -> UserRecord:
        with self.db.session() as session:
            row = UserRow(id=user_id, hashed_password=hashed_password)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as e:
                raise UserExistsError(user_id) from e
            return UserRecord(
                user_id=row.id,
                hashed_password=row.hashed_password,
                created_at=row.created_at,
            )
