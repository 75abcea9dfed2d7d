"""
Unit tests for the workspace container and the dashboard view builders.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from dayboard.backend.core.auth import SIGNED_IN, synthetic_email
from dayboard.backend.core.errors import AuthError
from dayboard.backend.core.remote.base import SCHEDULES
from dayboard.backend.core.remote.memory import InMemoryBackend
from dayboard.backend.services import Workspace, day_view, home_summary

USERNAME = "alice"
PASSWORD = "secret1"


@pytest.fixture
def signed_in(workspace: Workspace) -> Workspace:
    workspace.auth.sign_up(USERNAME, PASSWORD, PASSWORD)
    workspace.auth.sign_in(USERNAME, PASSWORD)
    return workspace


def _schedule(title: str, start: str, end: str, **extra) -> dict:
    return {"title": title, "start_date": start, "end_date": end, **extra}


class TestWorkspaceLifecycle:
    def test_stores_require_sign_in(self, workspace: Workspace) -> None:
        with pytest.raises(AuthError):
            workspace.stores

    def test_sign_in_opens_and_loads_stores(self, signed_in: Workspace, backend: InMemoryBackend) -> None:
        stores = signed_in.stores
        assert len(stores.categories) == 5
        assert all(store.loaded for store in stores.all())
        assert all(store.attached for store in stores.all())
        assert backend.changes.subscriber_count(SCHEDULES) == 1

    def test_logout_drops_stores(self, signed_in: Workspace, backend: InMemoryBackend) -> None:
        stores = signed_in.stores
        signed_in.auth.logout()
        with pytest.raises(AuthError):
            signed_in.stores
        assert not stores.schedules.attached
        assert backend.changes.subscriber_count(SCHEDULES) == 0

    def test_resync_picks_up_missed_rows(self, signed_in: Workspace, backend: InMemoryBackend) -> None:
        owner = signed_in.auth.owner_id
        signed_in.stores.schedules.detach()
        backend.insert(SCHEDULES, [_schedule("elsewhere", "2024-01-10", "2024-01-10", user_id=owner)])
        assert len(signed_in.stores.schedules) == 0
        signed_in.resync()
        assert [s.title for s in signed_in.stores.schedules.items] == ["elsewhere"]

    def test_start_resumes_remembered_session(self, config: dict, backend: InMemoryBackend, storage) -> None:
        first = Workspace(config, backend=backend, storage=storage)
        first.auth.sign_up(USERNAME, PASSWORD, PASSWORD)
        first.auth.sign_in(USERNAME, PASSWORD, remember_me=True)
        first.close()

        second = Workspace(config, backend=backend, storage=storage)
        second.start()
        assert second.auth.is_authenticated
        assert len(second.stores.categories) == 5


    def test_switching_user_rescopes_stores(self, signed_in: Workspace, backend: InMemoryBackend) -> None:
        signed_in.stores.schedules.create(_schedule("alice only", "2024-01-10", "2024-01-10"))
        signed_in.auth.sign_up("bobby", PASSWORD, PASSWORD)
        session = backend.sign_in(synthetic_email("bobby"), PASSWORD)

        signed_in.auth.handle_auth_event(SIGNED_IN, session)

        stores = signed_in.stores
        assert signed_in.auth.profile.username == "bobby"
        assert stores.schedules.owner_id == signed_in.auth.owner_id == session.user.id
        assert stores.schedules.items == []
        assert len(stores.categories) == 5
        assert backend.changes.subscriber_count(SCHEDULES) == 1


class TestDashboard:
    @pytest.fixture
    def filled(self, signed_in: Workspace) -> Workspace:
        stores = signed_in.stores
        work = stores.categories.items[0]
        stores.schedules.create(
            _schedule("Report", "2024-01-10T00:00:00Z", "2024-01-12T00:00:00Z", priority="LOW", category_id=work.id)
        )
        stores.schedules.create(
            _schedule("Standup", "2024-01-11T09:00:00Z", "2024-01-11T09:15:00Z", priority="HIGH", completed=True)
        )
        stores.schedules.create(_schedule("Trip", "2024-01-20T00:00:00Z", "2024-01-21T00:00:00Z"))
        stores.memos.create({"title": "one"})
        stores.memos.create({"title": "two"})
        stores.memos.create({"title": "three"})
        stores.memos.create({"title": "four"})
        return signed_in

    def test_day_view(self, filled: Workspace, now: datetime) -> None:
        view = day_view(filled.stores, date(2024, 1, 11), now)
        assert [s.title for s in view.schedules] == ["Standup", "Report"]
        assert view.schedules[1].category.name == "업무"
        assert view.schedules[1].progress == 50
        assert view.schedules[0].priority_label == "중요"

    def test_uncategorized_placeholder(self, filled: Workspace, now: datetime) -> None:
        view = day_view(filled.stores, date(2024, 1, 20), now)
        assert view.schedules[0].category.name == "미분류"
        assert view.schedules[0].category.color == "#808080"

    def test_home_summary(self, filled: Workspace, now: datetime) -> None:
        summary = home_summary(filled.stores, date(2024, 1, 11), now)
        assert [s.title for s in summary.today] == ["Report", "Standup"]
        assert {s.title for s in summary.week} == {"Report", "Standup"}
        assert summary.today_completion == 50
        assert summary.month_completion == 33
        assert [m.title for m in summary.recent_memos] == ["four", "three", "two"]

    def test_days_follow_display_timezone(self, signed_in: Workspace, now: datetime) -> None:
        # 08:00-10:00 on Jan 10 in Seoul
        signed_in.stores.schedules.create(_schedule("Breakfast", "2024-01-09T23:00:00Z", "2024-01-10T01:00:00Z"))
        tz = signed_in.tz
        assert day_view(signed_in.stores, date(2024, 1, 9), now, tz).schedules == []
        assert [s.title for s in day_view(signed_in.stores, date(2024, 1, 10), now, tz).schedules] == ["Breakfast"]
        summary = home_summary(signed_in.stores, date(2024, 1, 10), now, tz)
        assert [s.title for s in summary.today] == ["Breakfast"]

    def test_naive_input_is_local_wall_time(self, signed_in: Workspace) -> None:
        item = signed_in.stores.schedules.create(_schedule("Lunch", "2024-01-10T12:00", "2024-01-10T13:00"))
        assert item.start_date == "2024-01-10T12:00:00+09:00"
