from flask_login import current_user
from flask_socketio import join_room, leave_room, emit
from facematch import socketio


def player_room(user_id: int) -> str:
    return f"player:{user_id}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_scoreboard(data=None):
    # Rooms are keyed by the signed-in player, never by client-supplied ids
    if not current_user.is_authenticated:
        emit('error', {'message': 'sign in required'})
        return
    room = player_room(current_user.id)
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_scoreboard(data=None):
    if not current_user.is_authenticated:
        return
    room = player_room(current_user.id)
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('join_scoreboard', handle_join_scoreboard, namespace='/ws')
    socketio.on_event('leave_scoreboard', handle_leave_scoreboard, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
