import math

BASE_POINTS_PER_LETTER = 100
MAX_TIME_BONUS = 500
TIME_DECAY_PER_SECOND = 0.1
ATTEMPT_PENALTY = 25
HINT_PENALTY = 100


def calculate_score(time_taken_ms: int, attempts: int, used_hint: bool, word_length: int) -> int:
    """Score a solved word.

    Longer words earn more; the time bonus decays exponentially with the
    seconds spent; each attempt and a used hint cost points. Never negative.
    Inputs are trusted: callers reject negative time/attempts and
    non-positive word lengths before calling.
    """
    base_score = word_length * BASE_POINTS_PER_LETTER
    seconds = time_taken_ms / 1000.0
    time_bonus = int(round(MAX_TIME_BONUS * math.exp(-TIME_DECAY_PER_SECOND * seconds)))
    attempts_penalty = attempts * ATTEMPT_PENALTY
    hint_penalty = HINT_PENALTY if used_hint else 0
    return max(base_score + time_bonus - attempts_penalty - hint_penalty, 0)
