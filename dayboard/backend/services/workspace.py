"""
Workspace – the application's dependency container.

Built once at start-up from the configuration and passed by reference to
whatever needs it (API lifespan, CLI commands, tests). The owner-scoped
stores only exist while the auth gate is AUTHENTICATED: they are built,
attached to the change feed and loaded on sign-in, and detached and dropped on
sign-out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, tzinfo
from pathlib import Path
from typing import Any

from dayboard.backend.core.auth import AuthGate, AuthState
from dayboard.backend.core.errors import AuthError
from dayboard.backend.core.glossary import DailyTerms
from dayboard.backend.core.planning import local_today, resolve_timezone
from dayboard.backend.core.remote import create_backend
from dayboard.backend.core.stores import (
    BookmarkStore,
    CategoryStore,
    MemoStore,
    OwnerScopedStore,
    Profile,
    ScheduleStore,
    TodoStore,
)
from dayboard.backend.core.utils.config import get_default_config
from dayboard.backend.core.utils.storage import LocalStorage
from dayboard.backend.core.weather import PlaceSearchClient, SavedLocations, WeatherClient

logger = logging.getLogger(__name__)


@dataclass
class OwnerStores:
    """The signed-in owner's stores, one per table."""

    schedules: ScheduleStore
    todos: TodoStore
    categories: CategoryStore
    memos: MemoStore
    bookmarks: BookmarkStore

    @classmethod
    def build(cls, backend: Any, owner_id: str, tz: tzinfo | None = None) -> OwnerStores:
        return cls(
            schedules=ScheduleStore(backend, owner_id, tz),
            todos=TodoStore(backend, owner_id, tz),
            categories=CategoryStore(backend, owner_id),
            memos=MemoStore(backend, owner_id),
            bookmarks=BookmarkStore(backend, owner_id),
        )

    def all(self) -> list[OwnerScopedStore]:
        return [self.schedules, self.todos, self.categories, self.memos, self.bookmarks]


class Workspace:
    """
    Owns the backend client, local storage, auth gate and widget clients.

    Args:
        config: Configuration dictionary (see ``load_config``)
        backend: Pre-built backend; defaults to the one selected by config
        storage: Pre-built local storage; defaults to ``storage.path``
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        backend: Any = None,
        storage: LocalStorage | None = None,
    ) -> None:
        self.config = config or get_default_config()
        self.backend = backend if backend is not None else create_backend(self.config)
        self.storage = storage or LocalStorage(Path(self.config["storage"]["path"]))
        # Calendar days, "today" and naive input times are taken in this zone.
        self.tz = resolve_timezone(self.config["calendar"]["timezone"])

        self.auth = AuthGate(
            self.backend,
            self.storage,
            email_domain=self.config["auth"]["email_domain"],
        )
        weather_cfg = self.config["weather"]
        self.weather = WeatherClient(
            api_key=weather_cfg.get("api_key", ""),
            base_url=weather_cfg["base_url"],
            units=weather_cfg.get("units", "metric"),
            lang=weather_cfg.get("lang", "kr"),
            timeout=float(weather_cfg.get("timeout", 10)),
        )
        places_cfg = self.config["places"]
        self.places = PlaceSearchClient(
            api_key=places_cfg.get("api_key", ""),
            base_url=places_cfg["base_url"],
            timeout=float(places_cfg.get("timeout", 10)),
        )
        self.locations = SavedLocations(self.storage)
        self.daily_terms = DailyTerms(self.storage)

        self._stores: OwnerStores | None = None
        self.auth.subscribe(self._on_auth_change)

    # ── Lifecycle ───────────────────────────────────────────────────────────

    def start(self) -> AuthState:
        """Resume a remembered session, if any."""
        return self.auth.start()

    def close(self) -> None:
        self._drop_stores()

    def _on_auth_change(self, state: AuthState, profile: Profile | None) -> None:
        if state is AuthState.AUTHENTICATED and profile is not None:
            self._open_stores(profile.id)
        elif state is AuthState.UNAUTHENTICATED:
            self._drop_stores()

    def _open_stores(self, owner_id: str) -> None:
        self._drop_stores()
        stores = OwnerStores.build(self.backend, owner_id, self.tz)
        for store in stores.all():
            store.attach()
        self._stores = stores
        self.resync()
        logger.info("Workspace opened for %s", owner_id)

    def _drop_stores(self) -> None:
        if self._stores is None:
            return
        for store in self._stores.all():
            store.detach()
            store.clear()
        self._stores = None

    # ── Access ──────────────────────────────────────────────────────────────

    @property
    def stores(self) -> OwnerStores:
        if self._stores is None:
            raise AuthError("Sign in required")
        return self._stores

    def today(self) -> date:
        return local_today(self.tz)

    def resync(self) -> None:
        """Full reload of every store from the backend."""
        for store in self.stores.all():
            store.load()
