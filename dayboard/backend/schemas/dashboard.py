"""Pydantic schemas for API request / response validation."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

# ── Request models ──────────────────────────────────────────────────────────


class RegisterIn(BaseModel):
    username: str
    password: str
    confirm_password: str


class LoginIn(BaseModel):
    username: str
    password: str
    remember_me: bool = False


class ScheduleIn(BaseModel):
    title: str
    start_date: datetime
    end_date: datetime
    category_id: str | None = None
    priority: str = "MEDIUM"
    keywords: list[str] = Field(default_factory=list)
    completed: bool = False


class ScheduleUpdateIn(BaseModel):
    """Partial update; only fields that were sent are applied."""

    title: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    category_id: str | None = None
    priority: str | None = None
    keywords: list[str] | None = None
    completed: bool | None = None


class KeywordIn(BaseModel):
    keyword: str


class CategoryIn(BaseModel):
    name: str
    color: str | None = None


class CategoryUpdateIn(BaseModel):
    name: str | None = None
    color: str | None = None


class MemoIn(BaseModel):
    title: str = ""
    content: str = ""


class MemoUpdateIn(BaseModel):
    title: str | None = None
    content: str | None = None


class BookmarkIn(BaseModel):
    term: str


class SavedLocationIn(BaseModel):
    name: str
    latitude: float
    longitude: float


# ── Response models ─────────────────────────────────────────────────────────


class HealthOut(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ErrorOut(BaseModel):
    error: str
    detail: str


class ProfileOut(BaseModel):
    id: str
    username: str = ""
    full_name: str = ""
    avatar_url: str = ""


class AuthStateOut(BaseModel):
    state: str
    profile: ProfileOut | None = None


class CategoryOut(BaseModel):
    id: str
    name: str
    color: str


class ScheduleOut(BaseModel):
    """A schedule or to-do item, decorated for display."""

    id: str
    title: str
    start_date: str
    end_date: str
    category_id: str | None = None
    category: CategoryOut
    priority: str
    priority_label: str
    priority_color: str
    keywords: list[str] = Field(default_factory=list)
    completed: bool = False
    progress: int = 0
    created_at: str | None = None


class ProgressOut(BaseModel):
    percent: int
    message: str | None = None


class DayOut(BaseModel):
    day: date
    schedules: list[ScheduleOut]
    progress: ProgressOut


class MemoOut(BaseModel):
    id: str
    title: str
    content: str
    created_at: str | None = None
    updated_at: str | None = None


class HomeSummaryOut(BaseModel):
    """Everything the home dashboard renders on first paint."""

    day: date
    today: list[ScheduleOut]
    week: list[ScheduleOut]
    today_completion: int
    month_completion: int
    progress: ProgressOut
    recent_memos: list[MemoOut]


class BookmarkOut(BaseModel):
    id: str
    term: str
    created_at: str | None = None


class BookmarkToggleOut(BaseModel):
    term: str
    bookmarked: bool


class TermOut(BaseModel):
    id: str
    label: str
    bookmarked: bool = False


class DailyTermsOut(BaseModel):
    day: date
    terms: list[str]


class WeatherOut(BaseModel):
    location: str
    temperature: float
    feels_like: float
    humidity: int
    wind_speed: float
    description: str
    icon: str
    icon_url: str


class PlaceOut(BaseModel):
    name: str
    address: str
    latitude: float
    longitude: float


class SavedLocationOut(BaseModel):
    name: str
    latitude: float
    longitude: float


class SyncOut(BaseModel):
    """Row counts per store after a full resync."""

    schedules: int
    todos: int
    categories: int
    memos: int
    bookmarks: int
