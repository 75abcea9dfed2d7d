"""
Unit tests for the owner-scoped stores (schedules, to-dos, categories, memos).
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from dayboard.backend.core.errors import AuthError, NotFoundError, ValidationError
from dayboard.backend.core.remote.base import CATEGORIES, SCHEDULES
from dayboard.backend.core.remote.memory import InMemoryBackend
from dayboard.backend.core.stores import (
    DEFAULT_CATEGORIES,
    UNCATEGORIZED,
    CategoryStore,
    MemoStore,
    ScheduleStore,
    TodoStore,
)
from dayboard.backend.core.stores.categories import FALLBACK_COLOR


@pytest.fixture
def schedules(backend: InMemoryBackend) -> ScheduleStore:
    return ScheduleStore(backend, "owner-1")


def _fields(**overrides) -> dict:
    fields = {
        "title": "Write report",
        "start_date": "2024-01-10T09:00:00Z",
        "end_date": "2024-01-12T18:00:00Z",
    }
    fields.update(overrides)
    return fields


class TestScheduleCreate:
    def test_create_fills_server_defaults(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        assert item.id
        assert item.user_id == "owner-1"
        assert item.completed is False
        assert item.priority == "MEDIUM"
        assert item.created_at is not None
        assert schedules.items == [item]

    def test_dates_are_normalised(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        assert item.start_date == "2024-01-10T09:00:00+00:00"

    def test_title_required(self, schedules: ScheduleStore, backend: InMemoryBackend) -> None:
        with pytest.raises(ValidationError):
            schedules.create(_fields(title="   "))
        assert backend.select(SCHEDULES) == []

    def test_start_after_end_rejected_before_write(self, schedules: ScheduleStore, backend: InMemoryBackend) -> None:
        with pytest.raises(ValidationError, match="after end"):
            schedules.create(_fields(start_date="2024-01-12T00:00:00Z", end_date="2024-01-10T00:00:00Z"))
        assert backend.select(SCHEDULES) == []

    def test_invalid_date_rejected(self, schedules: ScheduleStore) -> None:
        with pytest.raises(ValidationError):
            schedules.create(_fields(start_date="someday"))

    def test_unknown_priority_rejected(self, schedules: ScheduleStore) -> None:
        with pytest.raises(ValidationError):
            schedules.create(_fields(priority="URGENT"))

    def test_priority_is_uppercased(self, schedules: ScheduleStore) -> None:
        assert schedules.create(_fields(priority="high")).priority == "HIGH"

    def test_keywords_stored_newline_delimited(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields(keywords=["draft", " ", "review"]))
        assert item.description == "draft\nreview"
        assert item.keywords == ["draft", "review"]

    def test_naive_input_stamped_with_store_zone(self, backend: InMemoryBackend) -> None:
        store = ScheduleStore(backend, "owner-1", ZoneInfo("Asia/Seoul"))
        item = store.create(_fields(start_date="2024-01-10T09:00", end_date="2024-01-10T18:00"))
        assert item.start_date == "2024-01-10T09:00:00+09:00"
        assert item.end_date == "2024-01-10T18:00:00+09:00"

    def test_empty_owner_rejected(self, backend: InMemoryBackend) -> None:
        with pytest.raises(AuthError):
            ScheduleStore(backend, "")


class TestScheduleUpdate:
    def test_partial_update(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        updated = schedules.update(item.id, {"title": "Final report"})
        assert updated.title == "Final report"
        assert updated.start_date == item.start_date
        assert schedules.get(item.id).title == "Final report"

    def test_update_checks_order_against_current(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        with pytest.raises(ValidationError):
            schedules.update(item.id, {"start_date": "2024-02-01T00:00:00Z"})
        assert schedules.get(item.id).start_date == item.start_date

    def test_update_beside_unparseable_stored_date(
        self, schedules: ScheduleStore, backend: InMemoryBackend
    ) -> None:
        row = {**_fields(title="Imported", start_date="garbage"), "id": "legacy", "user_id": "owner-1"}
        backend.insert(SCHEDULES, [row])
        schedules.load()
        updated = schedules.update("legacy", {"end_date": "2024-01-13T18:00:00Z"})
        assert updated.end_date == "2024-01-13T18:00:00+00:00"
        assert updated.start_date == "garbage"

    def test_empty_update_returns_current(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        assert schedules.update(item.id, {"unknown": 1}) == item

    def test_unknown_id(self, schedules: ScheduleStore) -> None:
        with pytest.raises(NotFoundError):
            schedules.update("missing", {"title": "x"})

    def test_toggle_completed(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        assert schedules.toggle_completed(item.id).completed is True
        assert schedules.toggle_completed(item.id).completed is False

    def test_keywords(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        item = schedules.add_keyword(item.id, "draft")
        item = schedules.add_keyword(item.id, "draft")
        item = schedules.add_keyword(item.id, "review")
        assert item.keywords == ["draft", "review"]
        item = schedules.remove_keyword(item.id, "draft")
        assert item.keywords == ["review"]

    def test_blank_keyword_rejected(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        with pytest.raises(ValidationError):
            schedules.add_keyword(item.id, "  ")


class TestScheduleRemoveAndLoad:
    def test_remove(self, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        schedules.remove(item.id)
        assert len(schedules) == 0
        with pytest.raises(NotFoundError):
            schedules.get(item.id)

    def test_remove_unknown(self, schedules: ScheduleStore) -> None:
        with pytest.raises(NotFoundError):
            schedules.remove("missing")

    def test_load_is_owner_scoped(self, backend: InMemoryBackend) -> None:
        ScheduleStore(backend, "owner-1").create(_fields(title="mine"))
        ScheduleStore(backend, "owner-2").create(_fields(title="theirs"))

        store = ScheduleStore(backend, "owner-1")
        loaded = store.load()
        assert [s.title for s in loaded] == ["mine"]
        assert store.loaded

    def test_other_owner_cannot_update(self, backend: InMemoryBackend, schedules: ScheduleStore) -> None:
        item = schedules.create(_fields())
        intruder = ScheduleStore(backend, "owner-2")
        intruder._upsert(item.to_dict())
        with pytest.raises(NotFoundError):
            intruder.update(item.id, {"title": "hijacked"})
        assert intruder.find(item.id) is None
        assert backend.select(SCHEDULES)[0]["title"] == "Write report"


class TestScheduleFilter:
    @pytest.fixture
    def filled(self, schedules: ScheduleStore) -> ScheduleStore:
        schedules.create(_fields(title="Gym", category_id="c1", completed=True))
        schedules.create(_fields(title="Read book", category_id="c2", keywords=["novel"]))
        schedules.create(_fields(title="Groceries", category_id="c1"))
        return schedules

    def test_status(self, filled: ScheduleStore) -> None:
        assert [s.title for s in filled.filter(status="active")] == ["Read book", "Groceries"]
        assert [s.title for s in filled.filter(status="completed")] == ["Gym"]
        assert len(filled.filter()) == 3

    def test_category(self, filled: ScheduleStore) -> None:
        assert [s.title for s in filled.filter(category_id="c1")] == ["Gym", "Groceries"]

    def test_search_title_and_keywords(self, filled: ScheduleStore) -> None:
        assert [s.title for s in filled.filter(search="gro")] == ["Groceries"]
        assert [s.title for s in filled.filter(search="NOVEL")] == ["Read book"]

    def test_unknown_status(self, filled: ScheduleStore) -> None:
        with pytest.raises(ValidationError):
            filled.filter(status="later")


class TestTodoStore:
    def test_separate_table(self, backend: InMemoryBackend) -> None:
        todos = TodoStore(backend, "owner-1")
        todos.create(_fields(title="Call mom"))
        assert backend.select(SCHEDULES) == []
        assert len(backend.select("todos")) == 1


class TestCategoryStore:
    def test_create_defaults(self, backend: InMemoryBackend) -> None:
        store = CategoryStore(backend, "owner-1")
        created = store.create_defaults()
        assert [c.name for c in created] == [c["name"] for c in DEFAULT_CATEGORIES]
        assert len(backend.select(CATEGORIES, {"user_id": "owner-1"})) == 5

    def test_lookup_dangling_reference(self, backend: InMemoryBackend) -> None:
        store = CategoryStore(backend, "owner-1")
        assert store.lookup("gone") is UNCATEGORIZED
        assert store.lookup(None).name == "미분류"
        assert store.lookup(None).color == "#808080"

    def test_lookup_existing(self, backend: InMemoryBackend) -> None:
        store = CategoryStore(backend, "owner-1")
        work = store.create({"name": "업무", "color": "#FF6B6B"})
        assert store.lookup(work.id) == work

    def test_name_required(self, backend: InMemoryBackend) -> None:
        with pytest.raises(ValidationError):
            CategoryStore(backend, "owner-1").create({"name": ""})

    def test_color_resolution(self, backend: InMemoryBackend) -> None:
        store = CategoryStore(backend, "owner-1")
        store.create({"name": "공부", "color": "#45B7D1"})
        assert store.color_for("공부") == "#45B7D1"
        assert store.color_for("nothing") == FALLBACK_COLOR
        store.set_color("공부", "bg-purple-500")
        assert store.color_for("공부") == "bg-purple-500"


class TestMemoStore:
    def test_newest_first(self, backend: InMemoryBackend) -> None:
        memos = MemoStore(backend, "owner-1")
        memos.create({"title": "first"})
        memos.create({"title": "second"})
        assert [m.title for m in memos.items] == ["second", "first"]
        assert [m.title for m in memos.recent(1)] == ["second"]

    def test_needs_title_or_content(self, backend: InMemoryBackend) -> None:
        memos = MemoStore(backend, "owner-1")
        with pytest.raises(ValidationError):
            memos.create({"title": " ", "content": "  "})
        assert memos.create({"content": "body only"}).title == ""

    def test_update_touches_updated_at(self, backend: InMemoryBackend) -> None:
        memos = MemoStore(backend, "owner-1")
        memo = memos.create({"title": "draft"})
        updated = memos.update(memo.id, {"content": "text"})
        assert updated.content == "text"
        assert updated.updated_at is not None
