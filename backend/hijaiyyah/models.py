from hijaiyyah import db
from datetime import datetime, timezone

QUESTION_TYPES = ('visual_identification', 'auditory_identification')


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _iso(value):
    return value.isoformat() if value else None


class HijaiyyahLetter(db.Model):
    __tablename__ = 'hijaiyyah_letter'
    id = db.Column(db.Integer, primary_key=True)
    letter = db.Column(db.String(8), nullable=False)  # display glyph
    name = db.Column(db.String(64), nullable=False)
    pronunciation = db.Column(db.String(64), nullable=False)
    audio_url = db.Column(db.Text, nullable=True)
    level = db.Column(db.Integer, nullable=False, index=True)  # level_number, not a FK
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'letter': self.letter,
            'name': self.name,
            'pronunciation': self.pronunciation,
            'audio_url': self.audio_url,
            'level': self.level,
            'created_at': _iso(self.created_at),
        }


class GameLevel(db.Model):
    __tablename__ = 'game_level'
    id = db.Column(db.Integer, primary_key=True)
    level_number = db.Column(db.Integer, unique=True, nullable=False, index=True)
    name = db.Column(db.String(128), nullable=False)
    description = db.Column(db.Text, nullable=True)
    questions_required = db.Column(db.Integer, nullable=False)
    letters_introduced = db.Column(db.JSON, nullable=False, default=list)  # list of letter ids
    is_unlocked = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    questions = db.relationship('Question', backref='level', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'level_number': self.level_number,
            'name': self.name,
            'description': self.description,
            'questions_required': self.questions_required,
            'letters_introduced': list(self.letters_introduced or []),
            'is_unlocked': self.is_unlocked,
            'created_at': _iso(self.created_at),
        }


class GameSession(db.Model):
    __tablename__ = 'game_session'
    id = db.Column(db.Integer, primary_key=True)
    player_name = db.Column(db.String(128), nullable=False)
    current_level = db.Column(db.Integer, default=1, nullable=False)
    current_score = db.Column(db.Integer, default=0, nullable=False)  # signed, no floor
    lives_remaining = db.Column(db.Integer, default=3, nullable=False)
    session_start = db.Column(db.DateTime, default=utcnow, nullable=False)
    session_end = db.Column(db.DateTime, nullable=True)  # set once, on deactivation
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    answers = db.relationship('GameAnswer', backref='session', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'player_name': self.player_name,
            'current_level': self.current_level,
            'current_score': self.current_score,
            'lives_remaining': self.lives_remaining,
            'session_start': _iso(self.session_start),
            'session_end': _iso(self.session_end),
            'is_active': self.is_active,
            'created_at': _iso(self.created_at),
        }


class Question(db.Model):
    __tablename__ = 'question'
    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.Enum(*QUESTION_TYPES, name='question_type'), nullable=False)
    level_id = db.Column(db.Integer, db.ForeignKey('game_level.id'), nullable=False, index=True)
    letter_id = db.Column(db.Integer, db.ForeignKey('hijaiyyah_letter.id'), nullable=False)
    correct_answer = db.Column(db.Text, nullable=False)
    options = db.Column(db.JSON, nullable=False)  # must contain correct_answer exactly once
    difficulty = db.Column(db.Integer, default=1, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    letter = db.relationship('HijaiyyahLetter')

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'level_id': self.level_id,
            'letter_id': self.letter_id,
            'correct_answer': self.correct_answer,
            'options': list(self.options or []),
            'difficulty': self.difficulty,
            'created_at': _iso(self.created_at),
        }


class GameAnswer(db.Model):
    """Append-only answer log row. Never updated or deleted by gameplay."""
    __tablename__ = 'game_answer'
    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(db.Integer, db.ForeignKey('game_session.id'), nullable=False, index=True)
    question_id = db.Column(db.Integer, db.ForeignKey('question.id'), nullable=False)
    selected_answer = db.Column(db.Text, nullable=False)
    is_correct = db.Column(db.Boolean, nullable=False)
    time_taken_seconds = db.Column(db.Integer, nullable=False)  # truncated on insert
    points_earned = db.Column(db.Integer, default=0, nullable=False)
    answered_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'session_id': self.session_id,
            'question_id': self.question_id,
            'selected_answer': self.selected_answer,
            'is_correct': self.is_correct,
            'time_taken_seconds': self.time_taken_seconds,
            'points_earned': self.points_earned,
            'answered_at': _iso(self.answered_at),
            'created_at': _iso(self.created_at),
        }
