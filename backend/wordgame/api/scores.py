from flask import Blueprint, jsonify, request, current_app
from wordgame import socketio, get_leaderboard
from wordgame.services import calculate_score
from wordgame.validation import validate_score_submission, parse_limit


scores = Blueprint('scores', __name__)


def _leaderboard_payload(limit=None):
    leaderboard = get_leaderboard()
    entries = leaderboard.list() if not limit else leaderboard.top_n(limit)
    return [e.to_dict() for e in entries]


@scores.route('', methods=['POST'])
def submit_score():
    nickname, time_taken_ms, attempts, used_hint, word_length = validate_score_submission(
        request.get_json(silent=True)
    )
    score = calculate_score(time_taken_ms, attempts, used_hint, word_length)

    leaderboard = get_leaderboard()
    changed, rank = leaderboard.submit(nickname, score)
    current_app.logger.info(
        f"[score-submit] nickname={nickname} score={score} changed={changed} rank={rank}"
    )

    if changed:
        limit = int(current_app.config.get('LEADERBOARD_LIMIT', 0))
        socketio.emit('leaderboard_update', {'scores': _leaderboard_payload(limit)},
                      to='leaderboard', namespace='/ws')

    payload = {
        'score': score,
        'nickname': nickname,
        'rank': rank,
        'status': changed,
    }
    if not changed and current_app.config.get('SCORES_CONFLICT_ON_STALE'):
        return jsonify(payload), 409
    return jsonify(payload)


@scores.route('', methods=['GET'])
def get_scores():
    limit = parse_limit(request.args.get('limit'))
    if limit is None:
        limit = int(current_app.config.get('LEADERBOARD_LIMIT', 0))
    return jsonify(_leaderboard_payload(limit))


@scores.route('/<string:nickname>/rank', methods=['GET'])
def get_rank(nickname):
    leaderboard = get_leaderboard()
    return jsonify({
        'nickname': nickname,
        'rank': leaderboard.rank_of(nickname),
        'score': leaderboard.score_of(nickname),
    })
