"""Key-value persistence and the recent colors list."""

import json
import logging
import os
from abc import ABC, abstractmethod

from . import config

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Minimal persistence interface handed to the palette session."""

    @abstractmethod
    def get(self, key, default=None):
        pass

    @abstractmethod
    def set(self, key, value):
        pass


class MemoryStore(KeyValueStore):
    def __init__(self, data=None):
        self._data = dict(data or {})

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """Store backed by a single JSON object on disk.

    The file is read on every ``get`` and rewritten on every ``set``. A missing
    or unreadable file behaves as an empty store.
    """

    def __init__(self, path):
        self.path = path

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key, default=None):
        return self._load().get(key, default)

    def set(self, key, value):
        data = self._load()
        data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)


class RecentColors:
    """Most-recently-used hex values, newest first, without duplicates."""

    def __init__(
        self, store, key=config.RECENT_COLORS_KEY, limit=config.RECENT_COLORS_LIMIT
    ):
        self.store = store
        self.key = key
        self.limit = limit

    def items(self):
        value = self.store.get(self.key, [])
        if not isinstance(value, list):
            return []
        return [c for c in value if isinstance(c, str)]

    def push(self, hex_color):
        updated = [hex_color] + [c for c in self.items() if c != hex_color]
        updated = updated[: self.limit]
        self.store.set(self.key, updated)
        logger.debug("Recent colors: %s", updated)
        return updated
