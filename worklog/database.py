"""Durable record storage backed by JSON files."""
import copy
import json
import logging
import os
import tempfile
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Optional

from worklog.config import settings
from worklog.exceptions import PersistFailure


logger = logging.getLogger(__name__)

# Record keys
ENTRIES = "entries"
SETTINGS = "settings"
ACTIVE_SESSION = "active_session"

RECORD_KEYS = (ENTRIES, SETTINGS, ACTIVE_SESSION)

Subscriber = Callable[[Any], None]


class RecordStore:
    """
    Independently keyed records with change notification.

    The base class keeps records in memory only. Subclasses override
    ``_write`` to make a batch of updates durable; the in-memory copy is
    only changed once ``_write`` returned without raising.
    """

    def __init__(self, records: Optional[dict[str, Any]] = None):
        """Initialize store with optional starting records."""
        self._records: dict[str, Any] = copy.deepcopy(records) if records else {}
        self._subscribers: dict[str, list[Subscriber]] = defaultdict(list)

    def get(self, key: str, default: Any = None) -> Any:
        """Return a copy of the record stored under key."""
        if key not in self._records:
            return copy.deepcopy(default)
        return copy.deepcopy(self._records[key])

    def set(self, key: str, value: Any) -> None:
        """Replace a single record."""
        self.set_many({key: value})

    def set_many(self, updates: dict[str, Any]) -> None:
        """
        Replace several records at once.

        Either every record in updates is written or none is.

        Raises:
            PersistFailure: If the durable write failed
        """
        updates = copy.deepcopy(updates)
        self._write(updates)
        self._records.update(updates)

        for key, value in updates.items():
            for callback in list(self._subscribers[key]):
                callback(copy.deepcopy(value))

    def subscribe(self, key: str, callback: Subscriber) -> Callable[[], None]:
        """
        Register callback for changes to key.

        Returns:
            Callable that removes the subscription
        """
        self._subscribers[key].append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers[key]:
                self._subscribers[key].remove(callback)

        return unsubscribe

    def _write(self, updates: dict[str, Any]) -> None:
        """Persist updates. In-memory stores have nothing to do."""


class InMemoryRecordStore(RecordStore):
    """Record store without durability, used in tests."""


class JsonFileRecordStore(RecordStore):
    """Record store writing one JSON file per key."""

    def __init__(self, directory: Path):
        """
        Open the store and load any existing records.

        Raises:
            PersistFailure: If the directory or a record file cannot be read
        """
        super().__init__()
        self.directory = Path(directory)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistFailure(f"Cannot create data directory {self.directory}: {e}") from e
        self._load()

    def path_for(self, key: str) -> Path:
        """Return the file path of a record."""
        return self.directory / f"{key}.json"

    def _load(self) -> None:
        for key in RECORD_KEYS:
            path = self.path_for(key)
            if not path.exists():
                continue
            try:
                with path.open("r", encoding="utf-8") as fh:
                    self._records[key] = json.load(fh)
            except (OSError, json.JSONDecodeError) as e:
                raise PersistFailure(f"Cannot read {path}: {e}") from e
        logger.debug("Loaded %d records from %s", len(self._records), self.directory)

    def _write(self, updates: dict[str, Any]) -> None:
        staged: list[tuple[Path, Path]] = []
        try:
            for key, value in updates.items():
                staged.append((self._stage(value), self.path_for(key)))
        except (OSError, TypeError, ValueError) as e:
            self._discard(staged)
            raise PersistFailure(f"Cannot write records {sorted(updates)}: {e}") from e

        replaced: list[str] = []
        try:
            for (tmp_path, target), key in zip(staged, updates):
                os.replace(tmp_path, target)
                replaced.append(key)
        except OSError as e:
            self._discard(staged)
            self._restore(replaced)
            raise PersistFailure(f"Cannot write records {sorted(updates)}: {e}") from e

    def _stage(self, value: Any) -> Path:
        fd, name = tempfile.mkstemp(dir=self.directory, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(value, fh, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
        except BaseException:
            os.unlink(name)
            raise
        return Path(name)

    def _discard(self, staged: list[tuple[Path, Path]]) -> None:
        for tmp_path, _ in staged:
            if tmp_path.exists():
                tmp_path.unlink()

    def _restore(self, keys: list[str]) -> None:
        """Put back the previous content of records already replaced."""
        for key in keys:
            path = self.path_for(key)
            try:
                if key in self._records:
                    os.replace(self._stage(self._records[key]), path)
                elif path.exists():
                    path.unlink()
            except OSError:
                logger.exception("Could not restore record %s after failed write", key)


def log_changes(store: RecordStore) -> list[Callable[[], None]]:
    """
    Log every change to the store's records at debug level.

    Returns:
        Callables that remove the subscriptions
    """
    def subscriber(key: str) -> Subscriber:
        def on_change(value: Any) -> None:
            if isinstance(value, list):
                logger.debug("Record %s changed: %d items", key, len(value))
            elif value is None:
                logger.debug("Record %s cleared", key)
            else:
                logger.debug("Record %s changed", key)
        return on_change

    return [store.subscribe(key, subscriber(key)) for key in RECORD_KEYS]


class Database:
    """Durable store connection manager."""

    store: RecordStore | None = None
    unsubscribers: list[Callable[[], None]] = []

    def connect(self, directory: Optional[Path] = None) -> None:
        """Open the JSON record store in the data directory."""
        directory = directory or settings.data_dir
        self.store = JsonFileRecordStore(directory)
        self.unsubscribers = log_changes(self.store)
        logger.info("Opened record store: %s", directory)

    def disconnect(self) -> None:
        """Drop the store reference."""
        if self.store is not None:
            for unsubscribe in self.unsubscribers:
                unsubscribe()
            self.unsubscribers = []
            self.store = None
            logger.info("Closed record store")


# Global database instance
database = Database()


def get_database() -> RecordStore:
    """Dependency to get the record store."""
    if database.store is None:
        raise RuntimeError("Database not connected")
    return database.store
