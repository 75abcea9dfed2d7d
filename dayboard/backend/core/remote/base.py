"""
Remote Backend Interface.

The hosted relational store is reached through a small, table-oriented client
surface mirroring the query builder of the backend-as-a-service SDK:
equality filters, optional ordering, and "return the affected rows" writes.
Auth is email/password with an opaque session blob.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Protocol

from dayboard.backend.core.remote.changes import ChangeFeed

PROFILES = "profiles"
CATEGORIES = "categories"
SCHEDULES = "schedules"
TODOS = "todos"
MEMOS = "memos"
BOOKMARKS = "it_bookmarks"

TABLES = (PROFILES, CATEGORIES, SCHEDULES, TODOS, MEMOS, BOOKMARKS)

Row = dict[str, Any]
Filters = dict[str, Any]


@dataclass
class AuthUser:
    id: str
    email: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Session:
    """
    Authenticated session returned by sign-in.

    Attributes:
        access_token: Bearer token sent with table requests
        refresh_token: Token the hosted auth API can exchange for a new session
        user: The signed-in user
    """

    access_token: str
    refresh_token: str
    user: AuthUser

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session:
        user = data.get("user") or {}
        return cls(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token", ""),
            user=AuthUser(
                id=user["id"],
                email=user.get("email", ""),
                metadata=user.get("metadata") or user.get("user_metadata") or {},
            ),
        )


class RemoteBackend(Protocol):
    """Operations the stores and the auth gate rely on."""

    changes: ChangeFeed

    def select(
        self,
        table: str,
        filters: Filters | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Row]: ...

    def insert(self, table: str, rows: list[Row]) -> list[Row]: ...

    def update(self, table: str, values: Row, filters: Filters) -> list[Row]: ...

    def delete(self, table: str, filters: Filters) -> list[Row]: ...

    def sign_up(self, email: str, password: str, metadata: dict[str, Any] | None = None) -> AuthUser: ...

    def sign_in(self, email: str, password: str) -> Session: ...

    def restore_session(self, session: Session) -> Session: ...

    def sign_out(self) -> None: ...
