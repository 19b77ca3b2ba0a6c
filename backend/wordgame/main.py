from flask import Blueprint, jsonify

from wordgame import get_leaderboard, get_word_store

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({
        'message': 'Welcome to the word game server!',
        'words': len(get_word_store()),
        'scores': len(get_leaderboard()),
    })
