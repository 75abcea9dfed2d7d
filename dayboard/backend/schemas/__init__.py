"""Schema package – re-exports all public symbols for convenient imports."""

from __future__ import annotations

from dayboard.backend.schemas.dashboard import (
    AuthStateOut,
    BookmarkIn,
    BookmarkOut,
    BookmarkToggleOut,
    CategoryIn,
    CategoryOut,
    CategoryUpdateIn,
    DailyTermsOut,
    DayOut,
    ErrorOut,
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

__all__ = [
    "AuthStateOut",
    "BookmarkIn",
    "BookmarkOut",
    "BookmarkToggleOut",
    "CategoryIn",
    "CategoryOut",
    "CategoryUpdateIn",
    "DailyTermsOut",
    "DayOut",
    "ErrorOut",
    "HealthOut",
    "HomeSummaryOut",
    "KeywordIn",
    "LoginIn",
    "MemoIn",
    "MemoOut",
    "MemoUpdateIn",
    "PlaceOut",
    "ProfileOut",
    "ProgressOut",
    "RegisterIn",
    "SavedLocationIn",
    "SavedLocationOut",
    "ScheduleIn",
    "ScheduleOut",
    "ScheduleUpdateIn",
    "SyncOut",
    "TermOut",
    "WeatherOut",
]
