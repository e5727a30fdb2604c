from flask_socketio import join_room, leave_room, emit
from hijaiyyah import socketio
from hijaiyyah.services.sessions import get_session


def _room(session_id) -> str:
    return f"session:{session_id}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_session(data):
    """Subscribe this socket to ``session_update`` pushes for one session."""
    session_id = (data or {}).get('session_id')
    if isinstance(session_id, bool) or not isinstance(session_id, int):
        emit('error', {'message': 'session_id is required'})
        return
    session = get_session(session_id)
    if session is None:
        emit('error', {'message': f'Game session with id {session_id} not found'})
        return
    join_room(_room(session_id))
    emit('joined', {'room': _room(session_id), 'session': session.to_dict()})


def handle_leave_session(data):
    session_id = (data or {}).get('session_id')
    if session_id is None:
        emit('error', {'message': 'session_id is required'})
        return
    leave_room(_room(session_id))
    emit('left', {'room': _room(session_id)})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('join_session', handle_join_session, namespace='/ws')
    socketio.on_event('leave_session', handle_leave_session, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')

    if testing:
        # Test-only mirror on default namespace
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('join_session', handle_join_session, namespace='/')
        socketio.on_event('leave_session', handle_leave_session, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')
