"""
Local Key/Value Storage.

Durable storage for small opaque blobs (the remembered session, saved weather
locations, the day's glossary terms), kept as one JSON document on disk.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class LocalStorage:
    """JSON-file backed key/value store."""

    def __init__(self, path: str | Path) -> None:
        """
        Initialise the storage.

        Args:
            path: JSON file to persist to; parent directories are created
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._data: dict[str, Any] = self._read()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)
        tmp.replace(self.path)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            self._write()

    def remove(self, key: str) -> None:
        with self._lock:
            if self._data.pop(key, None) is not None:
                self._write()

    def clear(self) -> None:
        with self._lock:
            self._data = {}
            self._write()

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)
