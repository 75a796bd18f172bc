"""Persisted user settings backed by a small key-value cache file.

Entries are stored as ``{key: {"value": ..., "timestamp": ...}}`` in one JSON
file. Reads may pass ``max_age`` to treat older entries as missing. Settings
are a convenience: I/O and decoding problems are logged, never raised.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, ValidationError, field_validator

from . import constants

logger = logging.getLogger(__name__)


class CacheEntry(BaseModel):
    value: Any
    timestamp: float


class UserSettings(BaseModel):
    language: str = constants.DEFAULT_LANGUAGE
    play_speed: float = constants.DEFAULT_PLAY_SPEED

    @field_validator("language")
    @classmethod
    def _known_language(cls, value: str) -> str:
        if value not in constants.SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {value}")
        return value

    @field_validator("play_speed")
    @classmethod
    def _positive_speed(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"Play speed must be positive, got {value}")
        return value


class SettingsStore:
    """Key-value cache persisted as JSON, with timestamped entries."""

    def __init__(
        self,
        path: Path | str | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._path = (
            Path(path)
            if path is not None
            else Path.home() / constants.DEFAULT_SETTINGS_FILENAME
        )
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, CacheEntry]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return {key: CacheEntry.model_validate(entry) for key, entry in raw.items()}
        except (OSError, ValueError, AttributeError) as exc:
            logger.warning("Ignoring unreadable settings cache %s: %s", self._path, exc)
            return {}

    def _save(self, entries: dict[str, CacheEntry]) -> None:
        payload = {key: entry.model_dump() for key, entry in entries.items()}
        try:
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write settings cache %s: %s", self._path, exc)

    def get(self, key: str, max_age: float | None = None) -> Any:
        """Stored value for *key*, or None if missing or older than *max_age*."""
        entry = self._load().get(key)
        if entry is None:
            return None
        if max_age is not None and self._clock() - entry.timestamp >= max_age:
            logger.debug("Cache entry %s expired", key)
            return None
        return entry.value

    def is_fresh(
        self, key: str, max_age: float = constants.CACHE_DURATION_SECONDS
    ) -> bool:
        return self.get(key, max_age=max_age) is not None

    def put(self, key: str, value: Any) -> None:
        entries = self._load()
        entries[key] = CacheEntry(value=value, timestamp=self._clock())
        self._save(entries)

    def load_settings(self) -> UserSettings:
        stored = self.get(constants.SETTINGS_KEY)
        if stored is None:
            return UserSettings()
        try:
            return UserSettings.model_validate(stored)
        except ValidationError as exc:
            logger.warning("Stored settings are invalid, using defaults: %s", exc)
            return UserSettings()

    def save_settings(self, **changes: Any) -> UserSettings:
        """Merge *changes* into the stored settings and persist the result.

        Raises pydantic ``ValidationError`` if a change is invalid.
        """
        current = self.load_settings()
        updated = UserSettings.model_validate({**current.model_dump(), **changes})
        self.put(constants.SETTINGS_KEY, updated.model_dump())
        return updated
