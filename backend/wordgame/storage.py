"""Flat-file persistence for the in-memory collections.

Each store keeps its whole collection in memory and mirrors it to a single
JSON file. There is no incremental append: every save rewrites the file.
"""
import json
import logging
import os
import tempfile
from typing import Callable, List, TypeVar

from .errors import StorageError

T = TypeVar('T')


class JsonFileStorage:
    """Load/save a list of record dicts as one JSON array on disk."""

    def __init__(self, path: str, logger=None):
        self.path = path
        self.logger = logger or logging.getLogger(__name__)

    def load(self) -> List[dict]:
        """Return the stored records; a missing or empty file yields ``[]``.

        Raises StorageError when the file exists but cannot be read or does
        not hold a JSON array.
        """
        if not os.path.exists(self.path):
            self.logger.info(f"[storage-load] {self.path} missing, starting empty")
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Error loading data from file {self.path}") from exc

        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise StorageError(f"Error deserializing data from file {self.path}") from exc
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise StorageError(f"Unexpected data layout in file {self.path}: expected a list of records")

        self.logger.info(f"[storage-load] {self.path} records={len(data)}")
        return data

    def load_as(self, factory: Callable[[dict], T]) -> List[T]:
        """Load and convert every record with ``factory`` (e.g. ``ScoreEntry.from_dict``)."""
        records = self.load()
        try:
            return [factory(item) for item in records]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"Malformed record in file {self.path}") from exc

    def save(self, records: List[dict]) -> None:
        """Overwrite the file with ``records``.

        The data goes to a temp file in the target directory first and is
        then renamed over the target, so a crash mid-write leaves the old
        file intact.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix='.tmp-', suffix='.json', dir=directory)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Failed to save data to file {self.path}") from exc
        self.logger.debug(f"[storage-save] {self.path} records={len(records)}")
