"""Category store with color lookups and the sign-up defaults."""

from __future__ import annotations

from typing import Any

from dayboard.backend.core.errors import ValidationError
from dayboard.backend.core.remote.base import CATEGORIES, Row
from dayboard.backend.core.stores.base import OwnerScopedStore
from dayboard.backend.core.stores.models import UNCATEGORIZED, Category

FALLBACK_COLOR = "bg-gray-500"

DEFAULT_COLORS: list[dict[str, str]] = [
    {"name": "파랑", "value": "bg-blue-500"},
    {"name": "빨강", "value": "bg-red-500"},
    {"name": "초록", "value": "bg-green-500"},
    {"name": "노랑", "value": "bg-yellow-500"},
    {"name": "보라", "value": "bg-purple-500"},
    {"name": "주황", "value": "bg-orange-500"},
]

DEFAULT_CATEGORIES: list[dict[str, str]] = [
    {"name": "업무", "color": "#FF6B6B"},
    {"name": "개인", "color": "#4ECDC4"},
    {"name": "공부", "color": "#45B7D1"},
    {"name": "운동", "color": "#96CEB4"},
    {"name": "취미", "color": "#FFEEAD"},
]


class CategoryStore(OwnerScopedStore[Category]):
    table = CATEGORIES

    def __init__(self, backend, owner_id: str) -> None:
        super().__init__(backend, owner_id)
        # Local color overrides by category name; never written back.
        self._color_overrides: dict[str, str] = {}

    def from_row(self, row: Row) -> Category:
        return Category.from_row(row)

    def validate_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        name = str(fields.get("name") or "").strip()
        if not name:
            raise ValidationError("Category name is required")
        color = str(fields.get("color") or DEFAULT_COLORS[0]["value"]).strip()
        return {"name": name, "color": color}

    def validate_update(self, current: Category, fields: dict[str, Any]) -> dict[str, Any]:
        values = {k: v for k, v in fields.items() if k in ("name", "color")}
        if "name" in values and not str(values["name"] or "").strip():
            raise ValidationError("Category name is required")
        return values

    def lookup(self, category_id: str | None) -> Category:
        """Category by id, or the uncategorized placeholder when it is missing."""
        if category_id:
            found = self.find(category_id)
            if found is not None:
                return found
        return UNCATEGORIZED

    def color_for(self, name: str) -> str:
        if name in self._color_overrides:
            return self._color_overrides[name]
        for category in self.items:
            if category.name == name:
                return category.color
        return FALLBACK_COLOR

    def set_color(self, name: str, color: str) -> None:
        self._color_overrides[name] = color

    def create_defaults(self) -> list[Category]:
        """Insert the starter categories in one write."""
        rows = self.backend.insert(
            self.table,
            [{**category, "user_id": self.owner_id} for category in DEFAULT_CATEGORIES],
        )
        return [self._upsert(row) for row in rows]
