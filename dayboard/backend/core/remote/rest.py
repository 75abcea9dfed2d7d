"""
Hosted Backend over HTTP.

Talks to a Supabase-style backend-as-a-service directly through its REST
surfaces using ``requests``:

- ``/rest/v1/<table>``      PostgREST table API (``col=eq.value`` filters,
                            ``order=col.desc``, ``Prefer: return=representation``)
- ``/auth/v1/signup``       email/password registration
- ``/auth/v1/token``        password grant
- ``/auth/v1/user``         session validation
- ``/auth/v1/logout``       session revocation

Writes made through this client are published to its change feed so stores
attached to the same client see them; changes made from other devices are
picked up by an explicit resync.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from dayboard.backend.core.errors import (
    AuthError,
    ConflictError,
    DayboardError,
    NotFoundError,
    RemoteError,
    ValidationError,
)
from dayboard.backend.core.remote.base import AuthUser, Filters, Row, Session
from dayboard.backend.core.remote.changes import ChangeFeed, ChangeKind

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def error_from_response(response: requests.Response) -> DayboardError:
    """Map a failed HTTP response onto the error taxonomy."""
    try:
        payload = response.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    message = (
        payload.get("message")
        or payload.get("msg")
        or payload.get("error_description")
        or payload.get("error")
        or response.reason
        or f"HTTP {response.status_code}"
    )
    status = response.status_code
    if status in (401, 403):
        return AuthError(message)
    if status == 404:
        return NotFoundError(message)
    if status == 409 or payload.get("code") == "23505":
        return ConflictError(message)
    if status in (400, 422):
        return ValidationError(message)
    return RemoteError(message, status=status)


class RestBackend:
    """PostgREST + GoTrue client."""

    def __init__(
        self,
        url: str,
        anon_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialise the client.

        Args:
            url: Project base URL, e.g. ``https://xyz.supabase.co``
            anon_key: Public (anon) API key
            timeout: Per-request timeout in seconds
            session: Optional pre-configured ``requests.Session``
        """
        if not url or not anon_key:
            raise ValidationError("Backend URL and API key are required")
        self.url = url.rstrip("/")
        self.anon_key = anon_key
        self.timeout = timeout
        self.http = session or requests.Session()
        self.changes = ChangeFeed()
        self._session: Session | None = None

    # ── Plumbing ────────────────────────────────────────────────────────────

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        token = self._session.access_token if self._session else self.anon_key
        headers = {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | list[tuple[str, str]] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self.url}{path}"
        try:
            response = self.http.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(headers),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise RemoteError(f"Backend unreachable: {exc}") from exc

        if not response.ok:
            error = error_from_response(response)
            logger.warning("%s %s -> %d %s", method, path, response.status_code, error.message)
            raise error
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteError("Backend returned malformed JSON", status=response.status_code) from exc

    @staticmethod
    def _filter_params(filters: Filters | None) -> list[tuple[str, str]]:
        return [(key, f"eq.{_encode_value(value)}") for key, value in (filters or {}).items()]

    # ── Tables ──────────────────────────────────────────────────────────────

    def select(
        self,
        table: str,
        filters: Filters | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Row]:
        params = [("select", "*"), *self._filter_params(filters)]
        if order_by:
            params.append(("order", f"{order_by}.{'desc' if descending else 'asc'}"))
        return self._request("GET", f"/rest/v1/{table}", params=params) or []

    def insert(self, table: str, rows: list[Row]) -> list[Row]:
        created = self._request(
            "POST",
            f"/rest/v1/{table}",
            json=rows,
            headers={"Prefer": "return=representation"},
        ) or []
        self.changes.publish_rows(table, ChangeKind.INSERT, created)
        return created

    def update(self, table: str, values: Row, filters: Filters) -> list[Row]:
        if not filters:
            raise ValidationError("Refusing to update without a filter")
        updated = self._request(
            "PATCH",
            f"/rest/v1/{table}",
            params=self._filter_params(filters),
            json=values,
            headers={"Prefer": "return=representation"},
        ) or []
        self.changes.publish_rows(table, ChangeKind.UPDATE, updated)
        return updated

    def delete(self, table: str, filters: Filters) -> list[Row]:
        if not filters:
            raise ValidationError("Refusing to delete without a filter")
        removed = self._request(
            "DELETE",
            f"/rest/v1/{table}",
            params=self._filter_params(filters),
            headers={"Prefer": "return=representation"},
        ) or []
        self.changes.publish_rows(table, ChangeKind.DELETE, removed)
        return removed

    # ── Auth ────────────────────────────────────────────────────────────────

    @staticmethod
    def _user_from_payload(payload: dict[str, Any]) -> AuthUser:
        return AuthUser(
            id=payload["id"],
            email=payload.get("email", ""),
            metadata=payload.get("user_metadata") or {},
        )

    def sign_up(self, email: str, password: str, metadata: dict[str, Any] | None = None) -> AuthUser:
        payload = self._request(
            "POST",
            "/auth/v1/signup",
            json={"email": email, "password": password, "data": metadata or {}},
        )
        user = payload.get("user", payload) if isinstance(payload, dict) else None
        if not user or "id" not in user:
            raise RemoteError("Sign-up succeeded but no user was returned")
        return self._user_from_payload(user)

    def sign_in(self, email: str, password: str) -> Session:
        try:
            payload = self._request(
                "POST",
                "/auth/v1/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
            )
        except ValidationError as exc:
            # The auth API answers bad credentials with 400.
            raise AuthError(exc.message) from exc
        try:
            session = Session(
                access_token=payload["access_token"],
                refresh_token=payload.get("refresh_token", ""),
                user=self._user_from_payload(payload["user"]),
            )
        except (KeyError, TypeError) as exc:
            raise RemoteError("Malformed sign-in response") from exc
        self._session = session
        return session

    def restore_session(self, session: Session) -> Session:
        previous = self._session
        self._session = session
        try:
            user = self._request("GET", "/auth/v1/user")
        except DayboardError:
            self._session = previous
            raise
        restored = Session(session.access_token, session.refresh_token, self._user_from_payload(user))
        self._session = restored
        return restored

    def sign_out(self) -> None:
        if self._session is None:
            return
        try:
            self._request("POST", "/auth/v1/logout")
        finally:
            self._session = None
