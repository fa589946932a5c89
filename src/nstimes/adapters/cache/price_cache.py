"""JSON file backed price cache."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from nstimes.domain.contracts.price_cache import PriceCacheProtocol
from nstimes.domain.errors import PriceCacheError
from nstimes.domain.models.cache_entry import CacheEntry
from nstimes.domain.models.cache_stats import CacheStats

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_FILE_ADAPTER = TypeAdapter(dict[str, Any])


class PriceCache(PriceCacheProtocol):
    """Price cache persisted to a single JSON file.

    Keys are "station1-station2-class" with the two station names sorted, so
    A->B and B->A share an entry. Entries expire on January 1st after they
    were stored. Every mutation rewrites the whole file while holding the
    lock, so concurrent writers never persist a stale snapshot.
    """

    def __init__(self, path: str | Path, today: Callable[[], date] = date.today) -> None:
        """Load the cache from ``path``, or start empty.

        A missing file starts an empty cache and creates the parent
        directory. A malformed file is logged and ignored; invalid entries in
        an otherwise readable file are logged and skipped.

        Args:
            path: Path to the cache file.
            today: Provider of the local calendar date.

        Raises:
            PriceCacheError: If the directory cannot be created or the file
                cannot be read.
        """
        self._path = Path(path)
        self._today = today
        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry] = self._load()

    @property
    def path(self) -> Path:
        """Path of the backing file."""
        return self._path

    @staticmethod
    def normalize_key(from_station: str, to_station: str, travel_class: int) -> str:
        """Build the cache key for an unordered station pair and travel class."""
        first, second = sorted((from_station, to_station))
        return f"{first}-{second}-{travel_class}"

    def _load(self) -> dict[str, CacheEntry]:
        if not self._path.exists():
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise PriceCacheError(
                    f"Failed to create cache directory {self._path.parent}: {e}"
                ) from e
            return {}

        try:
            content = self._path.read_bytes()
        except OSError as e:
            raise PriceCacheError(f"Failed to read cache file {self._path}: {e}") from e

        try:
            raw_entries = _FILE_ADAPTER.validate_json(content)
        except ValidationError as e:
            logger.warning(
                f"Failed to parse cache file {self._path}, starting fresh: "
                f"{e.error_count()} error(s)"
            )
            return {}

        entries: dict[str, CacheEntry] = {}
        invalid: list[str] = []
        for key, raw in raw_entries.items():
            try:
                entries[key] = CacheEntry.model_validate(raw)
            except ValidationError:
                invalid.append(key)
        if invalid:
            logger.warning(
                f"Ignoring {len(invalid)} invalid entr{'y' if len(invalid) == 1 else 'ies'} "
                f"in cache file {self._path}: {', '.join(invalid)}"
            )
        return entries

    def _save(self) -> None:
        """Write all entries to disk. Caller must hold the lock.

        The file is replaced atomically, so a failed write leaves the
        previous contents in place.
        """
        data = {key: entry.model_dump(mode="json") for key, entry in self._entries.items()}
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise PriceCacheError(f"Failed to write cache file {self._path}: {e}") from e

    def get(self, from_station: str, to_station: str, travel_class: int) -> int | None:
        """Get a cached price.

        Returns:
            Price in cents, or None if not cached or expired.
        """
        key = self.normalize_key(from_station, to_station, travel_class)
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or entry.is_expired(self._today()):
            return None
        return entry.price_cents

    def set(self, from_station: str, to_station: str, travel_class: int, price_cents: int) -> None:
        """Store a price and persist the cache.

        If the file cannot be written the in-memory change is rolled back.

        Raises:
            PriceCacheError: If the cache file cannot be written.
        """
        key = self.normalize_key(from_station, to_station, travel_class)
        entry = CacheEntry.create(price_cents, travel_class, self._today())

        with self._lock:
            previous = self._entries.get(key)
            self._entries[key] = entry
            try:
                self._save()
            except PriceCacheError:
                if previous is None:
                    del self._entries[key]
                else:
                    self._entries[key] = previous
                raise

    def cleanup(self) -> int:
        """Remove expired entries, persisting only if something was removed.

        Returns:
            Number of removed entries.

        Raises:
            PriceCacheError: If the cache file cannot be written.
        """
        today = self._today()
        with self._lock:
            expired = {
                key: entry for key, entry in self._entries.items() if entry.is_expired(today)
            }
            if not expired:
                return 0

            for key in expired:
                del self._entries[key]
            try:
                self._save()
            except PriceCacheError:
                self._entries.update(expired)
                raise

        logger.info(f"Removed {len(expired)} expired price(s) from {self._path}")
        return len(expired)

    def stats(self) -> CacheStats:
        """Count total, valid and expired entries."""
        today = self._today()
        with self._lock:
            total = len(self._entries)
            expired = sum(1 for entry in self._entries.values() if entry.is_expired(today))
        return CacheStats(total=total, valid=total - expired, expired=expired)


class NullPriceCache(PriceCacheProtocol):
    """Price cache that never stores anything, used when caching is disabled."""

    def get(self, from_station: str, to_station: str, travel_class: int) -> int | None:
        """Always a miss."""
        _ = from_station, to_station, travel_class
        return None

    def set(self, from_station: str, to_station: str, travel_class: int, price_cents: int) -> None:
        """Discard the price."""
        _ = from_station, to_station, travel_class, price_cents

    def cleanup(self) -> int:
        """Nothing to clean up."""
        return 0

    def stats(self) -> CacheStats:
        """Always empty."""
        return CacheStats(total=0, valid=0, expired=0)
