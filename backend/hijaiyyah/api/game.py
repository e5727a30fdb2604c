from flask import Blueprint, jsonify, request, current_app
from hijaiyyah import socketio
from hijaiyyah.models import utcnow
from hijaiyyah.services import content, progress, sessions
from hijaiyyah.services.errors import ValidationError


game = Blueprint('game', __name__)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data

def _int_arg(name: str, default=None):
    raw = request.args.get(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")

def _emit_session_update(session) -> None:
    socketio.emit('session_update', session.to_dict(), to=f"session:{session.id}", namespace='/ws')


@game.route('/health', methods=['GET'])
def healthcheck():
    return jsonify({'status': 'ok', 'timestamp': utcnow().isoformat()})


@game.route('/sessions', methods=['POST'])
def create_session():
    data = _json_body()
    cfg = current_app.config
    session = sessions.create_session(
        player_name=data.get('player_name'),
        current_level=data.get('current_level', cfg.get('DEFAULT_START_LEVEL', 1)),
        lives_remaining=data.get('lives_remaining', cfg.get('DEFAULT_LIVES', 3)),
    )
    return jsonify(session.to_dict()), 201


@game.route('/sessions/<int:session_id>', methods=['GET'])
def get_session(session_id):
    session = sessions.get_session(session_id)
    if session is None:
        return jsonify({'error': f'Game session with id {session_id} not found'}), 404
    return jsonify(session.to_dict())


@game.route('/sessions/<int:session_id>', methods=['PATCH'])
def update_session(session_id):
    changes = sessions.SessionUpdate.from_payload(_json_body())
    session = sessions.update_session(session_id, changes)
    _emit_session_update(session)
    return jsonify(session.to_dict())


@game.route('/sessions/<int:session_id>/progress', methods=['GET'])
def get_session_progress(session_id):
    limit = int(current_app.config.get('RECENT_ANSWERS_LIMIT', progress.RECENT_ANSWERS))
    result = progress.get_session_progress(session_id, recent_limit=limit)
    if result is None:
        return jsonify({'error': f'Game session with id {session_id} not found'}), 404
    return jsonify(result)


@game.route('/sessions/<int:session_id>/answers', methods=['POST'])
def submit_answer(session_id):
    data = _json_body()
    result = sessions.submit_answer(
        session_id=session_id,
        question_id=data.get('question_id'),
        selected_answer=data.get('selected_answer'),
        time_taken_seconds=data.get('time_taken_seconds'),
    )
    _emit_session_update(result.session)
    return jsonify(result.to_dict()), 201


@game.route('/levels', methods=['GET'])
def get_all_levels():
    return jsonify([level.to_dict() for level in content.get_all_levels()])


@game.route('/levels/<int:level_number>', methods=['GET'])
def get_level(level_number):
    level = content.get_level(level_number)
    if level is None:
        return jsonify({'error': f'Level {level_number} not found'}), 404
    return jsonify(level.to_dict())


@game.route('/levels/<int:level_number>/letters', methods=['GET'])
def get_letters_by_level(level_number):
    return jsonify([letter.to_dict() for letter in content.get_letters_by_level(level_number)])


@game.route('/letters', methods=['GET'])
def get_hijaiyyah_letters():
    return jsonify([letter.to_dict() for letter in content.get_hijaiyyah_letters()])


@game.route('/questions', methods=['GET'])
def get_questions():
    level_id = _int_arg('level_id')
    if level_id is None:
        return jsonify({'error': 'level_id is required'}), 400
    default_limit = int(current_app.config.get('DEFAULT_QUESTION_LIMIT', content.DEFAULT_QUESTION_LIMIT))
    questions = content.get_questions(
        level_id,
        question_type=request.args.get('type') or None,
        limit=_int_arg('limit', default_limit),
    )
    return jsonify([q.to_dict() for q in questions])
