"""API route handlers.

All endpoints are gathered in a single router so they can be included into
the FastAPI application in ``app.py``. Handlers are plain ``def`` functions:
every store operation may block on the backend, so FastAPI runs them in its
thread pool.
"""

from __future__ import annotations

import logging
from datetime import date, tzinfo

from fastapi import APIRouter, Request, Response

from dayboard import __version__
from dayboard.backend.core.glossary import TERMS, search_terms
from dayboard.backend.core.planning import progress_message, schedule_progress
from dayboard.backend.core.stores import Bookmark, Profile, ScheduleStore
from dayboard.backend.schemas import (
    AuthStateOut,
    BookmarkIn,
    BookmarkOut,
    BookmarkToggleOut,
    CategoryIn,
    CategoryOut,
    CategoryUpdateIn,
    DailyTermsOut,
    DayOut,
    HealthOut,
    HomeSummaryOut,
    KeywordIn,
    LoginIn,
    MemoIn,
    MemoOut,
    MemoUpdateIn,
    PlaceOut,
    ProfileOut,
    ProgressOut,
    RegisterIn,
    SavedLocationIn,
    SavedLocationOut,
    ScheduleIn,
    ScheduleOut,
    ScheduleUpdateIn,
    SyncOut,
    TermOut,
    WeatherOut,
)
from dayboard.backend.services import (
    OwnerStores,
    Workspace,
    category_out,
    day_view,
    home_summary,
    memo_out,
    schedule_out,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _workspace(request: Request) -> Workspace:
    return request.app.state.workspace


def _stores(request: Request) -> OwnerStores:
    """Stores of the signed-in owner; raises AuthError when nobody is signed in."""
    return _workspace(request).stores


def _tz(request: Request) -> tzinfo:
    return _workspace(request).tz


def _profile_out(profile: Profile | None) -> ProfileOut | None:
    if profile is None:
        return None
    return ProfileOut(
        id=profile.id,
        username=profile.username,
        full_name=profile.full_name,
        avatar_url=profile.avatar_url or "",
    )


def _auth_state(ws: Workspace) -> AuthStateOut:
    return AuthStateOut(state=ws.auth.state.value, profile=_profile_out(ws.auth.profile))


# ── Health ─────────────────────────────────────────────────────────────────


@router.get("/health", response_model=HealthOut, include_in_schema=False)
async def health_check() -> HealthOut:
    """Liveness check (suppressed from access log via log filter)."""
    return HealthOut(version=__version__)


# ── Auth ───────────────────────────────────────────────────────────────────


@router.get("/auth/state", response_model=AuthStateOut)
def get_auth_state(request: Request) -> AuthStateOut:
    return _auth_state(_workspace(request))


@router.post("/auth/register", response_model=ProfileOut, status_code=201)
def register(request: Request, body: RegisterIn) -> ProfileOut:
    """Create an account. The caller still has to log in afterwards."""
    profile = _workspace(request).auth.sign_up(body.username, body.password, body.confirm_password)
    return _profile_out(profile)


@router.post("/auth/login", response_model=AuthStateOut)
def login(request: Request, body: LoginIn) -> AuthStateOut:
    ws = _workspace(request)
    ws.auth.sign_in(body.username, body.password, remember_me=body.remember_me)
    return _auth_state(ws)


@router.post("/auth/logout", response_model=AuthStateOut)
def logout(request: Request) -> AuthStateOut:
    ws = _workspace(request)
    ws.auth.logout()
    return _auth_state(ws)


# ── Schedules ──────────────────────────────────────────────────────────────


def _list_items(
    store: ScheduleStore,
    stores: OwnerStores,
    status: str,
    category_id: str | None,
    search: str | None,
    tz: tzinfo,
) -> list[ScheduleOut]:
    items = store.filter(status=status, category_id=category_id, search=search)
    return [schedule_out(item, stores.categories, tz=tz) for item in items]


@router.get("/schedules", response_model=list[ScheduleOut])
def list_schedules(
    request: Request,
    status: str = "all",
    category_id: str | None = None,
    search: str | None = None,
) -> list[ScheduleOut]:
    stores = _stores(request)
    return _list_items(stores.schedules, stores, status, category_id, search, _tz(request))


@router.post("/schedules", response_model=ScheduleOut, status_code=201)
def create_schedule(request: Request, body: ScheduleIn) -> ScheduleOut:
    stores = _stores(request)
    item = stores.schedules.create(body.model_dump())
    return schedule_out(item, stores.categories, tz=_tz(request))


@router.get("/schedules/{item_id}", response_model=ScheduleOut)
def get_schedule(request: Request, item_id: str) -> ScheduleOut:
    stores = _stores(request)
    return schedule_out(stores.schedules.get(item_id), stores.categories, tz=_tz(request))


@router.patch("/schedules/{item_id}", response_model=ScheduleOut)
def update_schedule(request: Request, item_id: str, body: ScheduleUpdateIn) -> ScheduleOut:
    stores = _stores(request)
    item = stores.schedules.update(item_id, body.model_dump(exclude_unset=True))
    return schedule_out(item, stores.categories, tz=_tz(request))


@router.delete("/schedules/{item_id}", status_code=204)
def delete_schedule(request: Request, item_id: str) -> Response:
    _stores(request).schedules.remove(item_id)
    return Response(status_code=204)


@router.post("/schedules/{item_id}/toggle", response_model=ScheduleOut)
def toggle_schedule(request: Request, item_id: str) -> ScheduleOut:
    stores = _stores(request)
    return schedule_out(stores.schedules.toggle_completed(item_id), stores.categories, tz=_tz(request))


@router.post("/schedules/{item_id}/keywords", response_model=ScheduleOut)
def add_keyword(request: Request, item_id: str, body: KeywordIn) -> ScheduleOut:
    stores = _stores(request)
    return schedule_out(stores.schedules.add_keyword(item_id, body.keyword), stores.categories, tz=_tz(request))


@router.delete("/schedules/{item_id}/keywords/{keyword}", response_model=ScheduleOut)
def remove_keyword(request: Request, item_id: str, keyword: str) -> ScheduleOut:
    stores = _stores(request)
    return schedule_out(stores.schedules.remove_keyword(item_id, keyword), stores.categories, tz=_tz(request))


@router.get("/schedules/{item_id}/progress", response_model=ProgressOut)
def get_schedule_progress(request: Request, item_id: str) -> ProgressOut:
    percent = schedule_progress(_stores(request).schedules.get(item_id), tz=_tz(request))
    return ProgressOut(percent=percent, message=progress_message(percent))


# ── Calendar and home ──────────────────────────────────────────────────────


@router.get("/calendar/{day}", response_model=DayOut)
def get_calendar_day(request: Request, day: date) -> DayOut:
    """Schedules occurring on ``day``, most important first."""
    return day_view(_stores(request), day, tz=_tz(request))


@router.get("/home", response_model=HomeSummaryOut)
def get_home(request: Request, day: date | None = None) -> HomeSummaryOut:
    ws = _workspace(request)
    return home_summary(ws.stores, day or ws.today(), tz=ws.tz)


# ── Categories ─────────────────────────────────────────────────────────────


@router.get("/categories", response_model=list[CategoryOut])
def list_categories(request: Request) -> list[CategoryOut]:
    return [category_out(c) for c in _stores(request).categories.items]


@router.post("/categories", response_model=CategoryOut, status_code=201)
def create_category(request: Request, body: CategoryIn) -> CategoryOut:
    return category_out(_stores(request).categories.create(body.model_dump()))


@router.patch("/categories/{category_id}", response_model=CategoryOut)
def update_category(request: Request, category_id: str, body: CategoryUpdateIn) -> CategoryOut:
    categories = _stores(request).categories
    return category_out(categories.update(category_id, body.model_dump(exclude_unset=True)))


@router.delete("/categories/{category_id}", status_code=204)
def delete_category(request: Request, category_id: str) -> Response:
    _stores(request).categories.remove(category_id)
    return Response(status_code=204)


# ── To-dos ─────────────────────────────────────────────────────────────────


@router.get("/todos", response_model=list[ScheduleOut])
def list_todos(
    request: Request,
    status: str = "all",
    category_id: str | None = None,
    search: str | None = None,
) -> list[ScheduleOut]:
    """To-do list view: filter by status (all / active / completed), category and text."""
    stores = _stores(request)
    return _list_items(stores.todos, stores, status, category_id, search, _tz(request))


@router.post("/todos", response_model=ScheduleOut, status_code=201)
def create_todo(request: Request, body: ScheduleIn) -> ScheduleOut:
    stores = _stores(request)
    return schedule_out(stores.todos.create(body.model_dump()), stores.categories, tz=_tz(request))


@router.patch("/todos/{item_id}", response_model=ScheduleOut)
def update_todo(request: Request, item_id: str, body: ScheduleUpdateIn) -> ScheduleOut:
    stores = _stores(request)
    item = stores.todos.update(item_id, body.model_dump(exclude_unset=True))
    return schedule_out(item, stores.categories, tz=_tz(request))


@router.delete("/todos/{item_id}", status_code=204)
def delete_todo(request: Request, item_id: str) -> Response:
    _stores(request).todos.remove(item_id)
    return Response(status_code=204)


@router.post("/todos/{item_id}/toggle", response_model=ScheduleOut)
def toggle_todo(request: Request, item_id: str) -> ScheduleOut:
    stores = _stores(request)
    return schedule_out(stores.todos.toggle_completed(item_id), stores.categories, tz=_tz(request))


# ── Memos ──────────────────────────────────────────────────────────────────


@router.get("/memos", response_model=list[MemoOut])
def list_memos(request: Request, recent: int | None = None) -> list[MemoOut]:
    memos = _stores(request).memos
    items = memos.recent(recent) if recent is not None else memos.items
    return [memo_out(m) for m in items]


@router.post("/memos", response_model=MemoOut, status_code=201)
def create_memo(request: Request, body: MemoIn) -> MemoOut:
    return memo_out(_stores(request).memos.create(body.model_dump()))


@router.patch("/memos/{memo_id}", response_model=MemoOut)
def update_memo(request: Request, memo_id: str, body: MemoUpdateIn) -> MemoOut:
    return memo_out(_stores(request).memos.update(memo_id, body.model_dump(exclude_unset=True)))


@router.delete("/memos/{memo_id}", status_code=204)
def delete_memo(request: Request, memo_id: str) -> Response:
    _stores(request).memos.remove(memo_id)
    return Response(status_code=204)


# ── Bookmarks and glossary ─────────────────────────────────────────────────


def _bookmark_out(bookmark: Bookmark) -> BookmarkOut:
    return BookmarkOut(id=bookmark.id, term=bookmark.term, created_at=bookmark.created_at)


@router.get("/bookmarks", response_model=list[BookmarkOut])
def list_bookmarks(request: Request) -> list[BookmarkOut]:
    return [_bookmark_out(b) for b in _stores(request).bookmarks.items]


@router.post("/bookmarks", response_model=BookmarkOut, status_code=201)
def create_bookmark(request: Request, body: BookmarkIn) -> BookmarkOut:
    return _bookmark_out(_stores(request).bookmarks.add(body.term))


@router.delete("/bookmarks/{bookmark_id}", status_code=204)
def delete_bookmark(request: Request, bookmark_id: str) -> Response:
    _stores(request).bookmarks.remove(bookmark_id)
    return Response(status_code=204)


@router.post("/bookmarks/toggle", response_model=BookmarkToggleOut)
def toggle_bookmark(request: Request, body: BookmarkIn) -> BookmarkToggleOut:
    bookmarked = _stores(request).bookmarks.toggle(body.term)
    return BookmarkToggleOut(term=body.term, bookmarked=bookmarked)


@router.get("/terms", response_model=list[TermOut])
def list_terms(request: Request, q: str | None = None) -> list[TermOut]:
    """Glossary terms, optionally filtered; bookmark flags only when signed in."""
    ws = _workspace(request)
    terms = search_terms(q) if q else list(TERMS)
    marked: set[str] = set()
    if ws.auth.is_authenticated:
        marked = {b.term for b in ws.stores.bookmarks.items}
    return [TermOut(id=term_id, label=label, bookmarked=label in marked) for term_id, label in terms]


@router.get("/terms/daily", response_model=DailyTermsOut)
def get_daily_terms(request: Request, day: date | None = None) -> DailyTermsOut:
    day = day or _workspace(request).today()
    return DailyTermsOut(day=day, terms=_workspace(request).daily_terms.today(day))


@router.post("/terms/daily/reshuffle", response_model=DailyTermsOut)
def reshuffle_daily_terms(request: Request, day: date | None = None) -> DailyTermsOut:
    day = day or _workspace(request).today()
    return DailyTermsOut(day=day, terms=_workspace(request).daily_terms.reshuffle(day))


# ── Weather ────────────────────────────────────────────────────────────────


@router.get("/weather", response_model=WeatherOut)
def get_weather(request: Request, lat: float | None = None, lon: float | None = None) -> WeatherOut:
    """Current conditions; without coordinates the configured default location is used."""
    ws = _workspace(request)
    if lat is None or lon is None:
        default = ws.config["weather"]["default_location"]
        lat, lon = default["latitude"], default["longitude"]
    report = ws.weather.current(lat, lon)
    return WeatherOut(**report.to_dict())


@router.get("/places", response_model=list[PlaceOut])
def search_places(request: Request, query: str) -> list[PlaceOut]:
    return [PlaceOut(**place.to_dict()) for place in _workspace(request).places.search(query)]


@router.get("/locations", response_model=list[SavedLocationOut])
def list_locations(request: Request) -> list[SavedLocationOut]:
    return [SavedLocationOut(**loc.to_dict()) for loc in _workspace(request).locations.list()]


@router.post("/locations", response_model=SavedLocationOut, status_code=201)
def save_location(request: Request, body: SavedLocationIn) -> SavedLocationOut:
    location = _workspace(request).locations.add(body.name, body.latitude, body.longitude)
    return SavedLocationOut(**location.to_dict())


@router.delete("/locations/{name}", status_code=204)
def delete_location(request: Request, name: str) -> Response:
    _workspace(request).locations.remove(name)
    return Response(status_code=204)


# ── Sync ───────────────────────────────────────────────────────────────────


@router.post("/sync", response_model=SyncOut)
def sync(request: Request) -> SyncOut:
    """Full reload of every store; the way to pick up changes made elsewhere."""
    ws = _workspace(request)
    ws.resync()
    stores = ws.stores
    return SyncOut(
        schedules=len(stores.schedules),
        todos=len(stores.todos),
        categories=len(stores.categories),
        memos=len(stores.memos),
        bookmarks=len(stores.bookmarks),
    )
