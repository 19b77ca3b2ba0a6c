from flask import Blueprint, jsonify, request
from wordgame import socketio, get_word_store
from wordgame.errors import NotFoundError
from wordgame.validation import validate_word_entry, require_text


words = Blueprint('words', __name__)


def _notify_words_changed(action, entry_id):
    socketio.emit('words_update', {'action': action, 'id': entry_id}, namespace='/ws')


@words.route('', methods=['GET'])
def list_words():
    return jsonify([e.to_dict() for e in get_word_store().list()])


@words.route('/getRandomWord', methods=['GET'])
def get_random_word():
    category = require_text(request.args.get('category'), 'category', 'category')
    entry = get_word_store().random_by_category(category)
    if entry is None:
        raise NotFoundError(f"No words found in category: {category}")
    return jsonify(entry.to_dict())


@words.route('/getCategories', methods=['GET'])
def get_categories():
    return jsonify(get_word_store().categories())


@words.route('/add', methods=['POST'])
def add_word():
    entry = validate_word_entry(request.get_json(silent=True))
    created = get_word_store().add(entry)
    _notify_words_changed('added', created.id)
    return jsonify(created.to_dict())


@words.route('/update/<string:entry_id>', methods=['PUT'])
def update_word(entry_id):
    entry = validate_word_entry(request.get_json(silent=True))
    updated = get_word_store().update_by_id(entry_id, entry)
    _notify_words_changed('updated', updated.id)
    return jsonify(updated.to_dict())


@words.route('/delete/<string:entry_id>', methods=['DELETE'])
def delete_word(entry_id):
    if not get_word_store().delete_by_id(entry_id):
        # Another client may have removed it first
        raise NotFoundError(f"Word with id {entry_id} not found, it may have been deleted already")
    _notify_words_changed('deleted', entry_id)
    return jsonify({'status': 'OK'})


@words.route('/word/<string:word>', methods=['GET'])
def get_by_word(word):
    entry = get_word_store().find_by_word(word)
    if entry is None:
        raise NotFoundError(f"Word {word} not found")
    return jsonify(entry.to_dict())


@words.route('/word/<string:word>/exists', methods=['GET'])
def word_exists(word):
    return jsonify({'exists': get_word_store().exists(word)})


@words.route('/<string:entry_id>', methods=['GET'])
def get_by_id(entry_id):
    entry = get_word_store().find_by_id(entry_id)
    if entry is None:
        raise NotFoundError(f"Word with id {entry_id} not found")
    return jsonify(entry.to_dict())
