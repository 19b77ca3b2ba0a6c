from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)

SAMPLE_WORDS = [
    ('animals', 'tiger', 'Big striped cat'),
    ('animals', 'eagle', 'Flying predator'),
    ('colors', 'blue', 'Color of the sky'),
    ('colors', 'green', 'Color of grass'),
    ('fruits', 'banana', 'Yellow fruit'),
    ('fruits', 'apple', 'Keeps the doctor away'),
    ('jobs', 'doctor', 'Heals people'),
    ('jobs', 'teacher', 'Works in a school'),
    ('countries', 'france', 'Known for the Eiffel Tower'),
    ('countries', 'canada', 'Has maple syrup'),
]

SAMPLE_SCORES = [
    ('Champion1', 980),
    ('WordMaster', 850),
    ('GuessingPro', 720),
    ('FastGuesser', 690),
    ('WordNinja', 650),
    ('LuckyPlayer', 600),
    ('GameExpert', 580),
    ('QuickGuesser', 530),
    ('Wordsmith', 470),
    ('Newbie', 320),
]


def get_word_store():
    return current_app.extensions['word_store']


def get_leaderboard():
    return current_app.extensions['leaderboard']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    # Load both collections up front; a corrupt file aborts startup
    from wordgame.services import LeaderboardStore, WordStore
    flask_app.extensions['word_store'] = WordStore(flask_app.config['WORDS_FILE'], logger=flask_app.logger)
    flask_app.extensions['leaderboard'] = LeaderboardStore(flask_app.config['SCORES_FILE'], logger=flask_app.logger)

    from wordgame.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Import and register blueprints here
    from wordgame.main import main
    flask_app.register_blueprint(main)

    from wordgame.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api/scores')

    from wordgame.api.words import words
    # Path kept as /wordEntry to match the frontend API client
    flask_app.register_blueprint(words, url_prefix='/wordEntry')

    from wordgame.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('seed-words')
    def seed_words_command():
        """Replaces the word dictionary with the sample words."""
        from wordgame.models import WordEntry
        store = flask_app.extensions['word_store']
        count = store.seed(WordEntry(category, word, hint) for category, word, hint in SAMPLE_WORDS)
        click.echo(f'Word dictionary has been reset with {count} words!')

    @click.command('seed-scores')
    def seed_scores_command():
        """Replaces the leaderboard with the sample scores."""
        from wordgame.models import ScoreEntry
        leaderboard = flask_app.extensions['leaderboard']
        leaderboard.seed(ScoreEntry(nickname, score) for nickname, score in SAMPLE_SCORES)
        click.echo(f'Leaderboard has been reset with {len(leaderboard)} scores!')

    flask_app.cli.add_command(seed_words_command)
    flask_app.cli.add_command(seed_scores_command)

    return flask_app
