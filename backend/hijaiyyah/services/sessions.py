from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from flask import current_app

from hijaiyyah import db
from hijaiyyah.models import GameAnswer, GameSession, Question, utcnow
from .errors import InactiveSessionError, NotFoundError, ValidationError
from .scoring import score_answer, stored_time
from .validation import require_bool, require_int, require_positive_number, require_string


class _Unset:
    """Marker for a partial-update field the caller did not supply."""

    def __repr__(self):
        return 'UNSET'

    def __bool__(self):
        return False


UNSET: Any = _Unset()

# Largest time the INTEGER time_taken_seconds column holds
MAX_ANSWER_SECONDS = 2**31 - 1


@dataclass(frozen=True)
class SessionUpdate:
    current_level: Union[int, _Unset] = UNSET
    current_score: Union[int, _Unset] = UNSET
    lives_remaining: Union[int, _Unset] = UNSET
    is_active: Union[bool, _Unset] = UNSET

    def __post_init__(self):
        if self.current_level is not UNSET:
            require_int(self.current_level, 'current_level', minimum=1)
        if self.current_score is not UNSET:
            require_int(self.current_score, 'current_score')
        if self.lives_remaining is not UNSET:
            require_int(self.lives_remaining, 'lives_remaining', minimum=0)
        if self.is_active is not UNSET:
            require_bool(self.is_active, 'is_active')

    @classmethod
    def from_payload(cls, payload: dict) -> 'SessionUpdate':
        """Build an update from a JSON body, validating each supplied field."""
        if not isinstance(payload, dict):
            raise ValidationError('Request body must be a JSON object')
        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(payload) - allowed)
        if unknown:
            raise ValidationError(f"Unknown session field(s): {', '.join(unknown)}")
        return cls(**payload)

    def supplied(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}


@dataclass
class AnswerResult:
    """A freshly logged answer plus the time exactly as the client sent it."""
    answer: GameAnswer
    time_taken_seconds: float
    session: GameSession

    @property
    def points_earned(self) -> int:
        return self.answer.points_earned

    def to_dict(self):
        payload = self.answer.to_dict()
        payload['time_taken_seconds'] = self.time_taken_seconds
        return payload


def create_session(player_name: str, current_level: int = 1, lives_remaining: int = 3) -> GameSession:
    """Start a new game. Score always starts at 0 and the session is active."""
    require_string(player_name, 'player_name', allow_empty=False)
    require_int(current_level, 'current_level', minimum=1)
    require_int(lives_remaining, 'lives_remaining', minimum=0)

    session = GameSession(
        player_name=player_name,
        current_level=current_level,
        lives_remaining=lives_remaining,
        current_score=0,
        is_active=True,
        session_end=None,
    )
    db.session.add(session)
    db.session.commit()
    current_app.logger.info(
        f"[session-create] session={session.id} player={player_name!r} level={current_level} lives={lives_remaining}"
    )
    return session


def get_session(session_id: int) -> Optional[GameSession]:
    return db.session.get(GameSession, session_id)


def update_session(session_id: int, changes: SessionUpdate) -> GameSession:
    """Apply only the supplied fields of ``changes``.

    Deactivating an active session stamps ``session_end``; reactivating
    leaves ``session_end`` as it was.
    """
    session = db.session.get(GameSession, session_id)
    if session is None:
        raise NotFoundError(f"Game session with id {session_id} not found")

    supplied = changes.supplied()
    was_active = session.is_active
    for name, value in supplied.items():
        setattr(session, name, value)
    if supplied.get('is_active') is False and was_active:
        session.session_end = utcnow()
        current_app.logger.info(f"[session-end] session={session.id} score={session.current_score}")

    db.session.add(session)
    db.session.commit()
    current_app.logger.info(f"[session-update] session={session.id} fields={sorted(supplied)}")
    return session


def submit_answer(session_id: int, question_id: int, selected_answer: str, time_taken_seconds: float) -> AnswerResult:
    """Check, score and log one answer, then add its points to the session.

    The log insert and the score increment share one transaction, and the
    increment is done by the database so concurrent submissions for the same
    session cannot lose points.
    """
    require_int(question_id, 'question_id')
    require_string(selected_answer, 'selected_answer')
    require_positive_number(time_taken_seconds, 'time_taken_seconds', maximum=MAX_ANSWER_SECONDS)

    session = db.session.get(GameSession, session_id)
    if session is None:
        raise NotFoundError(f"Game session with id {session_id} not found")
    if not session.is_active:
        raise InactiveSessionError(f"Game session with id {session_id} is not active")

    question = db.session.get(Question, question_id)
    if question is None:
        raise NotFoundError(f"Question with id {question_id} not found")

    is_correct = selected_answer == question.correct_answer
    points = score_answer(is_correct, time_taken_seconds)

    answer = GameAnswer(
        session_id=session.id,
        question_id=question.id,
        selected_answer=selected_answer,
        is_correct=is_correct,
        time_taken_seconds=stored_time(time_taken_seconds),
        points_earned=points,
    )
    try:
        db.session.add(answer)
        GameSession.query.filter_by(id=session.id).update(
            {GameSession.current_score: GameSession.current_score + points},
            synchronize_session=False,
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception(f"[answer-failed] session={session_id} question={question_id}")
        raise

    db.session.refresh(session)
    current_app.logger.info(
        f"[answer] session={session.id} question={question.id} correct={is_correct} "
        f"points={points} score={session.current_score}"
    )
    return AnswerResult(answer=answer, time_taken_seconds=time_taken_seconds, session=session)
