"""
Journal entry store.

Keeps every journal entry and the user profile in one JSON file used as a
flat key-value store. Each mutation rewrites the whole entry collection.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional

from moodjournal.config import ENTRIES_KEY, PROFILE_KEY, STORE_PATH
from moodjournal.journal.entry import JournalEntry, UserProfile, ValidationError

logger = logging.getLogger(__name__)


class StorageError(IOError):
    """Raised when the store cannot be read or written during a mutation."""


class EntryStore:
    """
    Persists journal entries and the user profile.

    Reads recover from missing or damaged data by returning empty results;
    writes raise StorageError so callers can report the failure.
    """

    def __init__(self, store_path: Path = STORE_PATH):
        """
        Initialize the store.

        Args:
            store_path: Path to the store JSON file.
        """
        self.store_path = Path(store_path)
        self._lock = threading.Lock()

    def _read_store(self) -> dict[str, Any]:
        """
        Read the whole key-value file.

        Returns:
            Mapping of storage keys to their values (empty if no file yet).

        Raises:
            StorageError: If the file exists but cannot be read or parsed.
        """
        if not self.store_path.exists():
            return {}

        try:
            with open(self.store_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise StorageError(f"Could not read store {self.store_path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Store {self.store_path} does not hold a JSON object")
        return data

    def _write_store(self, data: dict[str, Any]) -> None:
        """
        Replace the key-value file with new contents.

        Args:
            data: Mapping of storage keys to values.

        Raises:
            StorageError: If the file cannot be written.
        """
        try:
            self.store_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.store_path.parent,
                prefix=f".{self.store_path.name}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.store_path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Could not write store {self.store_path}: {e}") from e

    def _raw_entries(self, data: dict[str, Any]) -> list[Any]:
        records = data.get(ENTRIES_KEY) or []
        if not isinstance(records, list):
            raise StorageError(f"'{ENTRIES_KEY}' in {self.store_path} is not a list")
        return records

    def load_all(self) -> list[JournalEntry]:
        """
        Load every stored entry in stored order.

        Unreadable stores and malformed records are logged and skipped.

        Returns:
            List of entries (empty on read failure).
        """
        try:
            records = self._raw_entries(self._read_store())
        except StorageError as e:
            logger.error(f"Error retrieving journal entries: {e}")
            return []

        entries = []
        for record in records:
            try:
                entries.append(JournalEntry.from_dict(record))
            except ValidationError as e:
                logger.warning(f"Skipping malformed journal entry: {e}")
        return entries

    def get(self, entry_id: str) -> Optional[JournalEntry]:
        """
        Get a specific entry by id.

        Args:
            entry_id: The id to look up.

        Returns:
            The entry or None if not found.
        """
        for entry in self.load_all():
            if entry.id == entry_id:
                return entry
        return None

    def upsert(self, entry: JournalEntry) -> None:
        """
        Save an entry, replacing any stored entry with the same id.

        New entries are appended to the collection.

        Args:
            entry: The entry to save.

        Raises:
            StorageError: If the store cannot be read or written.
        """
        with self._lock:
            data = self._read_store()
            records = self._raw_entries(data)
            record = entry.to_dict()

            for idx, existing in enumerate(records):
                if isinstance(existing, dict) and existing.get("id") == entry.id:
                    records[idx] = record
                    logger.debug(f"Updated journal entry {entry.id}")
                    break
            else:
                records.append(record)
                logger.debug(f"Added journal entry {entry.id}")

            data[ENTRIES_KEY] = records
            self._write_store(data)

    def delete_by_id(self, entry_id: str) -> bool:
        """
        Remove every stored entry with the given id.

        Args:
            entry_id: Id of the entry to remove.

        Returns:
            True if an entry was removed, False otherwise.

        Raises:
            StorageError: If the store cannot be read or written.
        """
        with self._lock:
            data = self._read_store()
            if ENTRIES_KEY not in data:
                return False

            records = self._raw_entries(data)
            kept = [
                r for r in records
                if not (isinstance(r, dict) and r.get("id") == entry_id)
            ]
            data[ENTRIES_KEY] = kept
            self._write_store(data)

        removed = len(kept) < len(records)
        if removed:
            logger.debug(f"Deleted journal entry {entry_id}")
        return removed

    def load_profile(self) -> Optional[UserProfile]:
        """
        Load the saved user profile.

        Returns:
            The profile, or None if none is saved or it cannot be read.
        """
        try:
            record = self._read_store().get(PROFILE_KEY)
            if record is None:
                return None
            return UserProfile.from_dict(record)
        except (StorageError, ValidationError) as e:
            logger.error(f"Error retrieving user profile: {e}")
            return None

    def save_profile(self, profile: UserProfile) -> None:
        """
        Save the user profile, replacing any previous one.

        Args:
            profile: Profile to save.

        Raises:
            StorageError: If the store cannot be read or written.
        """
        with self._lock:
            data = self._read_store()
            data[PROFILE_KEY] = profile.to_dict()
            self._write_store(data)
