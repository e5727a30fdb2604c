from typing import Optional

from sqlalchemy import case, func

from hijaiyyah import db
from hijaiyyah.models import GameAnswer, GameLevel, GameSession

RECENT_ANSWERS = 5


def completion_percentage(total_questions: int, questions_required: Optional[int]) -> float:
    """Share of the level's required questions answered, capped at 100."""
    if not questions_required or questions_required <= 0:
        return 0
    return round(min(total_questions / questions_required * 100, 100), 2)


def get_session_progress(session_id: int, recent_limit: int = RECENT_ANSWERS) -> Optional[dict]:
    """Read-only statistics for a session, computed from its answer log.

    Returns None for an unknown session. A missing level only zeroes the
    completion percentage; the remaining stats come from the log alone.
    """
    session = db.session.get(GameSession, session_id)
    if session is None:
        return None

    total, correct, average_time = (
        db.session.query(
            func.count(GameAnswer.id),
            func.sum(case((GameAnswer.is_correct, 1), else_=0)),
            func.avg(GameAnswer.time_taken_seconds),
        )
        .filter(GameAnswer.session_id == session.id)
        .one()
    )
    total = total or 0
    average_time = round(float(average_time), 2) if total else 0

    recent = (
        GameAnswer.query
        .filter_by(session_id=session.id)
        .order_by(GameAnswer.answered_at.desc(), GameAnswer.id.desc())
        .limit(recent_limit)
        .all()
    )

    level = GameLevel.query.filter_by(level_number=session.current_level).first()
    completion = completion_percentage(total, level.questions_required) if level else 0

    return {
        'session': session.to_dict(),
        'total_questions': total,
        'correct_answers': int(correct or 0),
        'average_time_per_question': average_time,
        'completion_percentage': completion,
        'recent_answers': [a.to_dict() for a in recent],
    }
