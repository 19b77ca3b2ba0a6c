import logging
import random
import threading
from typing import Iterable, List, Optional

from ..errors import ConflictError, NotFoundError, StorageError
from ..models import WordEntry, generate_word_id
from ..storage import JsonFileStorage


def _normalized(entry: WordEntry, entry_id: Optional[str] = None) -> WordEntry:
    return WordEntry(
        category=entry.category.lower(),
        word=entry.word.lower(),
        hint=entry.hint,
        id=entry_id,
    )


class WordStore:
    """The word dictionary: categorised entries with a stable id each.

    Words are unique across the dictionary, compared case-insensitively.
    Uniqueness is checked by scanning the list under the lock before every
    insert/update; every mutation rewrites the backing file before returning.
    """

    def __init__(self, path: str, logger=None, rng: Optional[random.Random] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._storage = JsonFileStorage(path, logger=self.logger)
        self._lock = threading.Lock()
        self._rng = rng or random.Random()
        self._words: List[WordEntry] = []
        filled_ids = 0
        seen_words, seen_ids = set(), set()
        for loaded in self._storage.load_as(WordEntry.from_dict):
            if not loaded.id:
                loaded.id = generate_word_id()
                filled_ids += 1
            entry = _normalized(loaded, loaded.id)
            if entry.word in seen_words or entry.id in seen_ids:
                raise StorageError(f"Duplicate word or id {entry.word!r}/{entry.id!r} in file {path}")
            seen_words.add(entry.word)
            seen_ids.add(entry.id)
            self._words.append(entry)
        if filled_ids:
            # Persist generated ids so they survive restarts
            self._storage.save([e.to_dict() for e in self._words])
            self.logger.info(f"[word-load] assigned ids to {filled_ids} entries")

    # -- helpers (caller holds the lock) --

    def _find_by_word(self, word: str) -> Optional[WordEntry]:
        key = word.lower()
        for entry in self._words:
            if entry.word == key:
                return entry
        return None

    def _find_by_id(self, entry_id: str) -> Optional[WordEntry]:
        for entry in self._words:
            if entry.id == entry_id:
                return entry
        return None

    def _commit(self, words: List[WordEntry]) -> None:
        self._storage.save([e.to_dict() for e in words])
        self._words = words

    # -- queries --

    def find_by_word(self, word: str) -> Optional[WordEntry]:
        with self._lock:
            entry = self._find_by_word(word)
            return entry.copy() if entry else None

    def find_by_id(self, entry_id: str) -> Optional[WordEntry]:
        with self._lock:
            entry = self._find_by_id(entry_id)
            return entry.copy() if entry else None

    def find_by_category(self, category: str) -> List[WordEntry]:
        key = category.lower()
        with self._lock:
            return [e.copy() for e in self._words if e.category == key]

    def exists(self, word: str) -> bool:
        with self._lock:
            return self._find_by_word(word) is not None

    def list(self) -> List[WordEntry]:
        """All entries ordered by word text."""
        with self._lock:
            entries = [e.copy() for e in self._words]
        return sorted(entries, key=lambda e: e.word)

    def categories(self) -> List[str]:
        with self._lock:
            return sorted({e.category for e in self._words})

    def random_by_category(self, category: str) -> Optional[WordEntry]:
        """Uniformly pick a word from ``category``; None if it has no words."""
        candidates = self.find_by_category(category)
        if not candidates:
            return None
        return self._rng.choice(candidates)

    # -- mutations --

    def add(self, entry: WordEntry) -> WordEntry:
        new_entry = _normalized(entry, generate_word_id())
        with self._lock:
            if self._find_by_word(new_entry.word) is not None:
                raise ConflictError(f"Word {new_entry.word} already exists")
            self._commit(self._words + [new_entry])
        self.logger.info(f"[word-add] id={new_entry.id} word={new_entry.word} category={new_entry.category}")
        return new_entry.copy()

    def update_by_id(self, entry_id: str, entry: WordEntry) -> WordEntry:
        replacement = _normalized(entry, entry_id)
        with self._lock:
            if self._find_by_id(entry_id) is None:
                raise NotFoundError(f"Word with id {entry_id} not found")
            clash = self._find_by_word(replacement.word)
            if clash is not None and clash.id != entry_id:
                raise ConflictError(f"Word {replacement.word} already exists")
            self._commit([replacement if e.id == entry_id else e for e in self._words])
        self.logger.info(f"[word-update] id={entry_id} word={replacement.word}")
        return replacement.copy()

    def delete_by_id(self, entry_id: str) -> bool:
        """Remove the entry; False when no entry has ``entry_id``."""
        with self._lock:
            remaining = [e for e in self._words if e.id != entry_id]
            if len(remaining) == len(self._words):
                return False
            self._commit(remaining)
        self.logger.info(f"[word-delete] id={entry_id}")
        return True

    def seed(self, entries: Iterable[WordEntry]) -> int:
        """Replace the dictionary with ``entries``; later duplicates are skipped."""
        seeded: List[WordEntry] = []
        seen = set()
        for entry in entries:
            normalized = _normalized(entry, entry.id or generate_word_id())
            if normalized.word in seen:
                continue
            seen.add(normalized.word)
            seeded.append(normalized)
        with self._lock:
            self._commit(seeded)
        self.logger.info(f"[word-seed] size={len(seeded)}")
        return len(seeded)

    def __len__(self):
        with self._lock:
            return len(self._words)
