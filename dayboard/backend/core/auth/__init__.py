"""Auth subpackage – synthetic login emails, remembered sessions, the auth gate."""

from __future__ import annotations

from dayboard.backend.core.auth.gate import SIGNED_IN, SIGNED_OUT, AuthGate, AuthState
from dayboard.backend.core.auth.session import SessionStorage, synthetic_email

__all__ = ["SIGNED_IN", "SIGNED_OUT", "AuthGate", "AuthState", "SessionStorage", "synthetic_email"]
