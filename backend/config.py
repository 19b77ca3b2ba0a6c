import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DATA_DIR = os.path.join(BASE_DIR, 'data')


def _env_flag(name, default='0'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Flat files holding the serialized collections (rewritten on every mutation)
    WORDS_FILE = os.environ.get('WORDS_FILE') or os.path.join(DATA_DIR, 'words.json')
    SCORES_FILE = os.environ.get('SCORES_FILE') or os.path.join(DATA_DIR, 'scores.json')
    # GET /api/scores size. 0 returns the full leaderboard.
    LEADERBOARD_LIMIT = int(os.environ.get('LEADERBOARD_LIMIT', '0'))
    # Answer 409 instead of 200 when a submitted score does not beat the stored one
    SCORES_CONFLICT_ON_STALE = _env_flag('SCORES_CONFLICT_ON_STALE')
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173',
        ).split(',')
        if origin.strip()
    ]
