"""
In-Memory Backend.

A process-local stand-in for the hosted store, used for local mode, the CLI
demo and the test suite. It keeps the behaviours the application relies on:

- server-side defaults (``id``, ``created_at``, ``updated_at``, ``completed``)
- equality filters and single-column ordering
- an email/password user registry with opaque access tokens
- a change event after every write, delivered to every store sharing the
  instance (several "devices" of one owner)
"""

from __future__ import annotations

import copy
import hashlib
import logging
import secrets
import threading
import uuid
from datetime import datetime, timezone
from typing import Any

from dayboard.backend.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from dayboard.backend.core.remote.base import (
    MEMOS,
    PROFILES,
    SCHEDULES,
    TABLES,
    TODOS,
    AuthUser,
    Filters,
    Row,
    Session,
)
from dayboard.backend.core.remote.changes import ChangeFeed, ChangeKind

logger = logging.getLogger(__name__)

# Tables whose rows carry an updated_at stamp maintained by the server.
_TOUCHED_TABLES = {MEMOS, PROFILES}
_COMPLETABLE_TABLES = {SCHEDULES, TODOS}


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _hash_password(password: str, salt: str) -> str:
    return hashlib.sha256(f"{salt}:{password}".encode()).hexdigest()


def _matches(row: Row, filters: Filters | None) -> bool:
    if not filters:
        return True
    return all(row.get(key) == value for key, value in filters.items())


class InMemoryBackend:
    """Thread-safe table store with change publication."""

    def __init__(self) -> None:
        self._tables: dict[str, list[Row]] = {name: [] for name in TABLES}
        self._users: dict[str, dict[str, Any]] = {}
        self._tokens: dict[str, str] = {}
        self._lock = threading.RLock()
        self._current: Session | None = None
        self.changes = ChangeFeed()

    # ── Tables ──────────────────────────────────────────────────────────────

    def _table(self, table: str) -> list[Row]:
        try:
            return self._tables[table]
        except KeyError as exc:
            raise NotFoundError(f"Unknown table: {table}") from exc

    def select(
        self,
        table: str,
        filters: Filters | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Row]:
        with self._lock:
            rows = [copy.deepcopy(r) for r in self._table(table) if _matches(r, filters)]
        if order_by:
            rows.sort(key=lambda r: (r.get(order_by) is None, r.get(order_by) or ""), reverse=descending)
        return rows

    def insert(self, table: str, rows: list[Row]) -> list[Row]:
        now = utc_now_iso()
        created: list[Row] = []
        with self._lock:
            target = self._table(table)
            for row in rows:
                record = dict(row)
                record.setdefault("id", str(uuid.uuid4()))
                if any(r["id"] == record["id"] for r in target):
                    raise ConflictError(f"Duplicate key in {table}: {record['id']}")
                if table != PROFILES:
                    record.setdefault("created_at", now)
                if table in _TOUCHED_TABLES:
                    record.setdefault("updated_at", now)
                if table in _COMPLETABLE_TABLES:
                    record.setdefault("completed", False)
                target.append(record)
                created.append(copy.deepcopy(record))
        logger.debug("Inserted %d row(s) into %s", len(created), table)
        self.changes.publish_rows(table, ChangeKind.INSERT, created)
        return created

    def update(self, table: str, values: Row, filters: Filters) -> list[Row]:
        if not filters:
            raise ValidationError("Refusing to update without a filter")
        changes = {k: v for k, v in values.items() if k != "id"}
        if table in _TOUCHED_TABLES and "updated_at" not in changes:
            changes["updated_at"] = utc_now_iso()
        before: list[Row] = []
        after: list[Row] = []
        with self._lock:
            for row in self._table(table):
                if _matches(row, filters):
                    before.append(copy.deepcopy(row))
                    row.update(changes)
                    after.append(copy.deepcopy(row))
        self.changes.publish_rows(table, ChangeKind.UPDATE, after, before)
        return after

    def delete(self, table: str, filters: Filters) -> list[Row]:
        if not filters:
            raise ValidationError("Refusing to delete without a filter")
        with self._lock:
            rows = self._table(table)
            removed = [r for r in rows if _matches(r, filters)]
            self._tables[table] = [r for r in rows if not _matches(r, filters)]
        self.changes.publish_rows(table, ChangeKind.DELETE, removed)
        return removed

    # ── Auth ────────────────────────────────────────────────────────────────

    def sign_up(self, email: str, password: str, metadata: dict[str, Any] | None = None) -> AuthUser:
        with self._lock:
            if email in self._users:
                raise ConflictError("User already registered")
            salt = secrets.token_hex(8)
            user = AuthUser(id=str(uuid.uuid4()), email=email, metadata=dict(metadata or {}))
            self._users[email] = {"user": user, "salt": salt, "hash": _hash_password(password, salt)}
        logger.info("Registered user %s", email)
        return user

    def sign_in(self, email: str, password: str) -> Session:
        with self._lock:
            entry = self._users.get(email)
            if entry is None or entry["hash"] != _hash_password(password, entry["salt"]):
                raise AuthError("Invalid login credentials")
            token = secrets.token_urlsafe(24)
            self._tokens[token] = email
            session = Session(access_token=token, refresh_token=secrets.token_urlsafe(24), user=entry["user"])
            self._current = session
        return session

    def restore_session(self, session: Session) -> Session:
        with self._lock:
            email = self._tokens.get(session.access_token)
            if email is None:
                raise AuthError("Session expired or invalid")
            restored = Session(session.access_token, session.refresh_token, self._users[email]["user"])
            self._current = restored
        return restored

    def sign_out(self) -> None:
        with self._lock:
            if self._current is not None:
                self._tokens.pop(self._current.access_token, None)
            self._current = None
