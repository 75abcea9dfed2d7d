"""
Login Identity Helpers.

- synthetic_email : derive an email-shaped login from a display handle
- SessionStorage  : remembered session blob in local storage
"""

from __future__ import annotations

import logging
import re

from dayboard.backend.core.errors import ValidationError
from dayboard.backend.core.remote.base import Session
from dayboard.backend.core.utils.storage import LocalStorage

logger = logging.getLogger(__name__)

DEFAULT_EMAIL_DOMAIN = "todoapp.com"
SESSION_KEY = "supabase_session"

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def synthetic_email(handle: str, domain: str = DEFAULT_EMAIL_DOMAIN) -> str:
    """
    Map a display handle onto the email address used for login.

    Non-alphanumerics are stripped and the rest lowercased, so the mapping is
    many-to-one; sign-up rejects handles whose profile already exists.

    Example:
        ``"John_Doe 123"`` → ``"johndoe123@todoapp.com"``
    """
    local = _NON_ALNUM.sub("", handle or "").lower()
    if not local:
        raise ValidationError("Username must contain letters or digits")
    return f"{local}@{domain}"


class SessionStorage:
    """Persists the "remember me" session across restarts."""

    def __init__(self, storage: LocalStorage, key: str = SESSION_KEY) -> None:
        self.storage = storage
        self.key = key

    def save(self, session: Session) -> None:
        self.storage.set(self.key, session.to_dict())

    def load(self) -> Session | None:
        data = self.storage.get(self.key)
        if not data:
            return None
        try:
            return Session.from_dict(data)
        except (KeyError, TypeError) as e:
            logger.warning("Discarding malformed stored session: %s", e)
            self.storage.remove(self.key)
            return None

    def clear(self) -> None:
        self.storage.remove(self.key)
