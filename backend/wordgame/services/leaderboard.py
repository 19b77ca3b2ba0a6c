import logging
import threading
from typing import Iterable, List, Tuple

from ..errors import NotFoundError, StorageError, ValidationError
from ..models import ScoreEntry
from ..storage import JsonFileStorage


def _sorted_desc(entries: List[ScoreEntry]) -> List[ScoreEntry]:
    # sorted() is stable: equal scores keep their relative order
    return sorted(entries, key=lambda e: e.score, reverse=True)


class LeaderboardStore:
    """Best score per nickname, kept sorted descending and mirrored to disk.

    One lock covers read, mutate, sort and persist. A failed save leaves the
    in-memory leaderboard untouched.
    """

    def __init__(self, path: str, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self._storage = JsonFileStorage(path, logger=self.logger)
        self._lock = threading.Lock()
        loaded = self._storage.load_as(ScoreEntry.from_dict)
        seen = set()
        for entry in loaded:
            key = entry.nickname.strip().casefold()
            if key in seen:
                raise StorageError(f"Duplicate nickname {entry.nickname!r} in file {path}")
            seen.add(key)
        self._scores: List[ScoreEntry] = _sorted_desc(loaded)

    def _index_of(self, nickname: str) -> int:
        key = nickname.strip().casefold()
        for i, entry in enumerate(self._scores):
            if entry.nickname.strip().casefold() == key:
                return i
        return -1

    def _commit(self, scores: List[ScoreEntry]) -> None:
        self._storage.save([e.to_dict() for e in scores])
        self._scores = scores

    def submit(self, nickname: str, score: int) -> Tuple[bool, int]:
        """Record ``score`` for ``nickname`` if it beats the stored one.

        Returns ``(changed, rank)``; the rank is read in the same critical
        section as the write, so it matches the leaderboard this call left.
        """
        if not isinstance(nickname, str) or not nickname.strip():
            raise ValidationError('Nickname cannot be empty', {'nickname': 'Nickname cannot be empty'})
        if score < 0:
            raise ValidationError('Score cannot be negative', {'score': 'Score cannot be negative'})
        nickname = nickname.strip()

        with self._lock:
            idx = self._index_of(nickname)
            updated = [e.copy() for e in self._scores]
            if idx == -1:
                updated.append(ScoreEntry(nickname, score))
            elif score > updated[idx].score:
                updated[idx] = ScoreEntry(nickname, score)
            else:
                self.logger.info(f"[score-keep] nickname={nickname} stored={updated[idx].score} submitted={score}")
                return False, idx + 1
            self._commit(_sorted_desc(updated))
            rank = self._index_of(nickname) + 1
            self.logger.info(f"[score-upsert] nickname={nickname} score={score} rank={rank} size={len(updated)}")
            return True, rank

    def upsert(self, nickname: str, score: int) -> bool:
        """Record ``score`` for ``nickname``; True when the leaderboard changed."""
        changed, _ = self.submit(nickname, score)
        return changed

    def list(self) -> List[ScoreEntry]:
        with self._lock:
            return [e.copy() for e in self._scores]

    def top_n(self, n: int) -> List[ScoreEntry]:
        if n < 0:
            raise ValidationError('Limit cannot be negative', {'limit': 'Limit cannot be negative'})
        with self._lock:
            return [e.copy() for e in self._scores[:n]]

    def rank_of(self, nickname: str) -> int:
        """1-based position of ``nickname`` on the leaderboard."""
        with self._lock:
            idx = self._index_of(nickname)
        if idx == -1:
            raise NotFoundError(f"Nickname {nickname} not found")
        return idx + 1

    def score_of(self, nickname: str) -> int:
        with self._lock:
            idx = self._index_of(nickname)
            if idx != -1:
                return self._scores[idx].score
        raise NotFoundError(f"Nickname {nickname} not found")

    def seed(self, entries: Iterable[ScoreEntry]) -> None:
        """Replace the whole leaderboard, keeping one best entry per nickname."""
        best = {}
        for entry in entries:
            key = entry.nickname.casefold()
            if key not in best or entry.score > best[key].score:
                best[key] = entry.copy()
        with self._lock:
            self._commit(_sorted_desc(list(best.values())))
        self.logger.info(f"[score-seed] size={len(best)}")

    def __len__(self):
        with self._lock:
            return len(self._scores)
