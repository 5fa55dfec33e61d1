"""
core/store.py — Key-value persistence backends for the session engine.

The engine only needs three calls: get(key), set(key, value) and
remove(key). Values are strings or numbers; a missing key reads as None.

Backends:
    MemoryStore   — plain dict, used by tests and throwaway sessions.
    JsonFileStore — one JSON object on disk, rewritten on every write so a
                    crash or reload at any point sees the latest state.

Adding a backend:
    1. Subclass KeyValueStore
    2. Implement get(), set() and remove()
"""

from __future__ import annotations
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Union

logger = logging.getLogger(__name__)

StoreValue = Union[str, int, float]


class KeyValueStore(ABC):
    """Abstract synchronous key-value store."""

    @abstractmethod
    def get(self, key: str) -> StoreValue | None:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: StoreValue) -> None:
        """Store a value under key, replacing any previous value."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key. Removing an absent key is a no-op."""
        ...

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


class MemoryStore(KeyValueStore):
    """Dict-backed store. Contents vanish with the process.

    Attributes:
        _data: The backing dict. Pass one in to pre-seed the store.
    """

    def __init__(self, data: dict[str, StoreValue] | None = None) -> None:
        self._data: dict[str, StoreValue] = dict(data or {})

    def get(self, key: str) -> StoreValue | None:
        return self._data.get(key)

    def set(self, key: str, value: StoreValue) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def as_dict(self) -> dict[str, StoreValue]:
        """Return a copy of the current contents."""
        return dict(self._data)


class JsonFileStore(MemoryStore):
    """Store persisted as a single JSON object on disk.

    The file is loaded once on construction. Every set() and remove()
    rewrites it through a temp file and os.replace(), so the file on disk
    is always a complete document.

    A missing file starts an empty store. An unreadable or malformed file
    is logged and also starts an empty store; it is overwritten on the
    next write.

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__()
        self.path = os.fspath(path)
        self._data = self._load()

    def _load(self) -> dict[str, StoreValue]:
        """Read the JSON file, falling back to an empty dict."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable store file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store file %s: top level is not an object", self.path)
            return {}
        return data

    def _flush(self) -> None:
        """Write the whole store to disk atomically."""
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(self._data, fh, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def set(self, key: str, value: StoreValue) -> None:
        super().set(key, value)
        self._flush()

    def remove(self, key: str) -> None:
        if key not in self._data:
            return
        super().remove(key)
        self._flush()
