"""Request payload validation for the JSON endpoints.

Each validator collects every field problem before raising, so the client
gets a ``fields`` map with one message per bad field.
"""
import re

from .errors import ValidationError
from .models import WordEntry

ALPHABETIC = re.compile(r'[a-zA-Z]+')


def _is_int(value):
    # bool is an int subclass; reject true/false for numeric fields
    return isinstance(value, int) and not isinstance(value, bool)


def _require_object(data):
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def validate_score_submission(data):
    """Return (nickname, time_taken_ms, attempts, used_hint, word_length)."""
    data = _require_object(data)
    errors = {}

    nickname = data.get('nickname')
    if not isinstance(nickname, str) or not nickname.strip():
        errors['nickname'] = 'Nickname cannot be empty'

    time_taken = data.get('timeTaken')
    if not _is_int(time_taken):
        errors['timeTaken'] = 'Time taken must be an integer number of milliseconds'
    elif time_taken < 0:
        errors['timeTaken'] = 'Time taken cannot be negative'

    attempts = data.get('attempts')
    if not _is_int(attempts):
        errors['attempts'] = 'Attempts must be an integer'
    elif attempts < 0:
        errors['attempts'] = 'Attempts cannot be negative'

    used_hint = data.get('usedHint', False)
    if not isinstance(used_hint, bool):
        errors['usedHint'] = 'usedHint must be true or false'

    word_length = data.get('wordLength')
    if not _is_int(word_length):
        errors['wordLength'] = 'Word length must be an integer'
    elif word_length <= 0:
        errors['wordLength'] = 'Word length must be positive'

    if errors:
        raise ValidationError('Invalid score submission', errors)
    return nickname.strip(), time_taken, attempts, used_hint, word_length


def _check_alphabetic(data, field, label, errors):
    value = data.get(field)
    if not isinstance(value, str) or not value:
        errors[field] = f'{label} cannot be empty'
    elif not ALPHABETIC.fullmatch(value):
        errors[field] = f'{label} must contain only alphabetic characters (a-z or A-Z)'


def validate_word_entry(data):
    """Build a WordEntry from a request body. Any ``id`` in the body is ignored."""
    data = _require_object(data)
    errors = {}
    _check_alphabetic(data, 'category', 'Category', errors)
    _check_alphabetic(data, 'word', 'Word', errors)

    hint = data.get('hint')
    if not isinstance(hint, str) or not hint.strip():
        errors['hint'] = 'Hint cannot be empty'

    if errors:
        raise ValidationError('Invalid word entry', errors)
    return WordEntry(category=data['category'], word=data['word'], hint=hint)


def require_text(value, field, label):
    """Validate a single non-blank query/path parameter."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'Invalid {label}', {field: f'{label.capitalize()} cannot be empty'})
    return value.strip()


def parse_limit(value):
    """Parse an optional ``?limit=`` query value; None when absent."""
    if value is None or value == '':
        return None
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ValidationError('Invalid limit', {'limit': 'Limit must be an integer'})
    if limit < 0:
        raise ValidationError('Invalid limit', {'limit': 'Limit cannot be negative'})
    return limit
