import uuid


def _required_text(data, field):
    value = data[field]
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} must be a non-blank string, got {value!r}")
    return value


def generate_word_id():
    """Generate a unique identifier for a new dictionary entry."""
    return uuid.uuid4().hex


class WordEntry:
    def __init__(self, category, word, hint, id=None):
        self.id = id
        self.category = category
        self.word = word
        self.hint = hint

    def copy(self):
        return WordEntry(self.category, self.word, self.hint, id=self.id)

    def to_dict(self):
        return {
            'id': self.id,
            'category': self.category,
            'word': self.word,
            'hint': self.hint,
        }

    @classmethod
    def from_dict(cls, data):
        entry_id = data.get('id')
        if entry_id is not None and not isinstance(entry_id, str):
            raise ValueError(f"id must be a string, got {entry_id!r}")
        return cls(
            category=_required_text(data, 'category'),
            word=_required_text(data, 'word'),
            hint=_required_text(data, 'hint'),
            id=entry_id or None,
        )

    def __eq__(self, other):
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"WordEntry(id={self.id!r}, category={self.category!r}, word={self.word!r})"


class ScoreEntry:
    def __init__(self, nickname, score):
        self.nickname = nickname
        self.score = score

    def copy(self):
        return ScoreEntry(self.nickname, self.score)

    def to_dict(self):
        return {
            'nickname': self.nickname,
            'score': self.score,
        }

    @classmethod
    def from_dict(cls, data):
        score = data['score']
        # bool is an int subclass; floats and bools are not valid scores
        if not isinstance(score, int) or isinstance(score, bool) or score < 0:
            raise ValueError(f"score must be a non-negative integer, got {score!r}")
        return cls(nickname=_required_text(data, 'nickname'), score=score)

    def __eq__(self, other):
        if not isinstance(other, ScoreEntry):
            return NotImplemented
        return (self.nickname, self.score) == (other.nickname, other.score)

    def __repr__(self):
        return f"ScoreEntry(nickname={self.nickname!r}, score={self.score})"
