"""Services package – re-exports the workspace container and view builders."""

from __future__ import annotations

from dayboard.backend.services.dashboard import (
    category_out,
    day_view,
    home_summary,
    memo_out,
    progress_out,
    schedule_out,
)
from dayboard.backend.services.workspace import OwnerStores, Workspace

__all__ = [
    "OwnerStores",
    "Workspace",
    "category_out",
    "day_view",
    "home_summary",
    "memo_out",
    "progress_out",
    "schedule_out",
]
