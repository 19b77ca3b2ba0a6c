from flask_socketio import join_room, leave_room, emit
from flask import current_app
from wordgame import socketio, get_leaderboard

LEADERBOARD_ROOM = 'leaderboard'
DEFAULT_SUBSCRIBE_LIMIT = 20


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_subscribe_leaderboard(data=None):
    """Join the leaderboard room and send the current standings."""
    if data is not None and not isinstance(data, dict):
        emit('error', {'message': 'subscribe_leaderboard expects an object payload'})
        return
    limit = (data or {}).get('limit')
    if limit is None:
        limit = int(current_app.config.get('LEADERBOARD_LIMIT', 0)) or DEFAULT_SUBSCRIBE_LIMIT
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 0:
        emit('error', {'message': 'limit must be a non-negative integer'})
        return
    join_room(LEADERBOARD_ROOM)
    entries = get_leaderboard().top_n(limit)
    emit('subscribed', {'room': LEADERBOARD_ROOM, 'scores': [e.to_dict() for e in entries]})


def handle_unsubscribe_leaderboard(data=None):
    leave_room(LEADERBOARD_ROOM)
    emit('unsubscribed', {'room': LEADERBOARD_ROOM})


def handle_ping(data=None):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'subscribe_leaderboard': handle_subscribe_leaderboard,
        'unsubscribe_leaderboard': handle_unsubscribe_leaderboard,
        'ping': handle_ping,
    }
    for event, handler in handlers.items():
        socketio.on_event(event, handler, namespace='/ws')
        if testing:
            socketio.on_event(event, handler, namespace='/')
