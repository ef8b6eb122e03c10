"""
In-memory user store.

Records live in an insertion-ordered list for the lifetime of the process.
Every public method holds the store lock for its whole duration, so
check-then-write sequences stay atomic when handlers run in worker threads.
"""

from __future__ import annotations

import dataclasses
import threading
from dataclasses import dataclass
from typing import List, Optional


class DuplicateUsernameError(ValueError):
    """Raised when uniqueness is requested and the username is taken."""


@dataclass(frozen=True)
class UserRecord:
    id: int
    username: Optional[str]
    password_hash: str


class UserStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._users: List[UserRecord] = []
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _index_of(self, user_id: int) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def _username_taken(self, username: Optional[str], exclude_id: Optional[int] = None) -> bool:
        return any(
            u.username == username and u.id != exclude_id for u in self._users
        )

    def append(
        self,
        username: Optional[str],
        password_hash: str,
        *,
        unique: bool = False,
    ) -> UserRecord:
        """Store a new user under the next id and return the record."""
        with self._lock:
            if unique and self._username_taken(username):
                raise DuplicateUsernameError(username)
            user = UserRecord(id=self._next_id, username=username, password_hash=password_hash)
            self._next_id += 1
            self._users.append(user)
            return user

    def list_all(self) -> List[UserRecord]:
        with self._lock:
            return list(self._users)

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        with self._lock:
            index = self._index_of(user_id)
            return None if index is None else self._users[index]

    def find_by_username(self, username: Optional[str]) -> Optional[UserRecord]:
        """First match wins; duplicates are possible unless enforced on write."""
        with self._lock:
            return next((u for u in self._users if u.username == username), None)

    def update_username(
        self,
        user_id: int,
        username: Optional[str],
        *,
        unique: bool = False,
    ) -> Optional[UserRecord]:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            if unique and self._username_taken(username, exclude_id=user_id):
                raise DuplicateUsernameError(username)
            user = dataclasses.replace(self._users[index], username=username)
            self._users[index] = user
            return user

    def remove(self, user_id: int) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._users[index]
            return True

    def clear(self) -> None:
        """Drop every record and restart ids at 1."""
        with self._lock:
            self._users.clear()
            self._next_id = 1
