"""
Authentication Gate.

Three-state machine guarding every owner-scoped operation:

    UNAUTHENTICATED ──start() with stored session──▶ LOADING
    LOADING ──session valid, profile fetched/created──▶ AUTHENTICATED
    LOADING ──no/invalid session──▶ UNAUTHENTICATED
    UNAUTHENTICATED ──sign_in()──▶ LOADING ──▶ AUTHENTICATED
    AUTHENTICATED ──logout() / SIGNED_OUT──▶ UNAUTHENTICATED

Leaving AUTHENTICATED clears local storage and notifies listeners, which is
where callers hook their "back to the login screen" behaviour.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum

from dayboard.backend.core.auth.session import DEFAULT_EMAIL_DOMAIN, SessionStorage, synthetic_email
from dayboard.backend.core.errors import AuthError, ConflictError, DayboardError, ValidationError
from dayboard.backend.core.remote.base import PROFILES, RemoteBackend, Session
from dayboard.backend.core.stores.categories import CategoryStore
from dayboard.backend.core.stores.models import Profile
from dayboard.backend.core.utils.storage import LocalStorage

logger = logging.getLogger(__name__)

MIN_HANDLE_LENGTH = 3
MIN_PASSWORD_LENGTH = 6

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"


class AuthState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    LOADING = "loading"
    AUTHENTICATED = "authenticated"


AuthListener = Callable[["AuthState", "Profile | None"], None]


class AuthGate:
    """
    Holds the current session and user profile.

    Attributes:
        state: Current :class:`AuthState`
        profile: Profile of the signed-in user (AUTHENTICATED only)
        session: Active backend session (AUTHENTICATED only)
    """

    def __init__(
        self,
        backend: RemoteBackend,
        storage: LocalStorage,
        email_domain: str = DEFAULT_EMAIL_DOMAIN,
    ) -> None:
        self.backend = backend
        self.storage = storage
        self.sessions = SessionStorage(storage)
        self.email_domain = email_domain
        self.state = AuthState.UNAUTHENTICATED
        self.profile: Profile | None = None
        self.session: Session | None = None
        self._listeners: list[AuthListener] = []

    # ── Listeners ───────────────────────────────────────────────────────────

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return _unsubscribe

    def _transition(self, state: AuthState) -> None:
        if state is self.state:
            return
        logger.debug("Auth state %s -> %s", self.state.value, state.value)
        self.state = state
        for listener in list(self._listeners):
            listener(state, self.profile)

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED

    @property
    def owner_id(self) -> str:
        if not self.is_authenticated or self.profile is None:
            raise AuthError("Sign in required")
        return self.profile.id

    # ── Startup and sign-in ─────────────────────────────────────────────────

    def start(self) -> AuthState:
        """Resume a remembered session, if one was stored."""
        stored = self.sessions.load()
        if stored is None:
            return self.state
        self._transition(AuthState.LOADING)
        try:
            session = self.backend.restore_session(stored)
            self._establish(session)
        except DayboardError as e:
            logger.warning("Stored session rejected: %s", e.message)
            self.sessions.clear()
            self._reset()
        return self.state

    def sign_in(self, handle: str, password: str, remember_me: bool = False) -> Profile:
        if not handle or not password:
            raise ValidationError("Username and password are required")
        email = synthetic_email(handle, self.email_domain)
        self._transition(AuthState.LOADING)
        try:
            session = self.backend.sign_in(email, password)
            profile = self._establish(session)
        except DayboardError:
            self._reset()
            raise
        if remember_me:
            self.sessions.save(session)
        logger.info("Signed in as %s", handle)
        return profile

    def sign_up(self, handle: str, password: str, confirm_password: str) -> Profile:
        """
        Register a new handle and seed its default categories.

        Raises:
            ValidationError: Missing fields, mismatched or short password, short handle
            ConflictError: The handle is already taken
        """
        if not handle or not password:
            raise ValidationError("Username and password are required")
        if password != confirm_password:
            raise ValidationError("Passwords do not match")
        if len(handle) < MIN_HANDLE_LENGTH:
            raise ValidationError(f"Username must be at least {MIN_HANDLE_LENGTH} characters")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        email = synthetic_email(handle, self.email_domain)

        if self.backend.select(PROFILES, {"username": handle}):
            raise ConflictError(f"Username '{handle}' is already in use")

        user = self.backend.sign_up(email, password, {"full_name": handle, "username": handle})
        profile = Profile(id=user.id, username=handle, full_name=handle, updated_at=_utc_now())
        try:
            self.backend.insert(PROFILES, [profile.to_dict()])
            CategoryStore(self.backend, user.id).create_defaults()
        except DayboardError as e:
            # Registration stands; the profile is created lazily at first login instead.
            logger.warning("Profile seeding incomplete for %s: %s", handle, e.message)
        logger.info("Registered %s", handle)
        return profile

    # ── Sign-out ────────────────────────────────────────────────────────────

    def logout(self) -> None:
        """Sign out remotely, then clear local storage and state."""
        try:
            self.backend.sign_out()
        finally:
            self._teardown()

    def handle_auth_event(self, event: str, session: Session | None = None) -> None:
        """React to an auth-state notification pushed by the backend client."""
        if event == SIGNED_IN and session is not None:
            try:
                self._establish(session)
            except DayboardError as e:
                logger.error("Could not load profile after sign-in: %s", e.message)
                self._reset()
        elif event == SIGNED_OUT:
            self._teardown()

    # ── Internals ───────────────────────────────────────────────────────────

    def _establish(self, session: Session) -> Profile:
        profile = self.load_profile(session)
        if self.is_authenticated and self.profile is not None and self.profile.id != profile.id:
            # A different user took over; listeners drop everything scoped to the old owner.
            logger.info("Session switched from %s to %s", self.profile.username, profile.username)
            self._reset()
        self.session = session
        self.profile = profile
        self._transition(AuthState.AUTHENTICATED)
        return profile

    def load_profile(self, session: Session) -> Profile:
        """Fetch the user's profile, creating an empty one on first login."""
        rows = self.backend.select(PROFILES, {"id": session.user.id})
        if rows:
            return Profile.from_row(rows[0])
        metadata = session.user.metadata
        profile = Profile(
            id=session.user.id,
            username=metadata.get("username") or metadata.get("full_name", ""),
            full_name=metadata.get("full_name", ""),
            updated_at=_utc_now(),
        )
        created = self.backend.insert(PROFILES, [profile.to_dict()])
        logger.info("Created profile for %s", session.user.email)
        return Profile.from_row(created[0]) if created else profile

    def _reset(self) -> None:
        self.session = None
        self.profile = None
        self._transition(AuthState.UNAUTHENTICATED)

    def _teardown(self) -> None:
        self.storage.clear()
        self._reset()


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
