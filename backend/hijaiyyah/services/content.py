"""Read-only queries over letters, levels and questions."""
from typing import List, Optional

from sqlalchemy import func

from hijaiyyah.models import QUESTION_TYPES, GameLevel, HijaiyyahLetter, Question
from .errors import ValidationError
from .validation import require_int

DEFAULT_QUESTION_LIMIT = 10


def get_all_levels() -> List[GameLevel]:
    return GameLevel.query.order_by(GameLevel.level_number.asc()).all()


def get_level(level_number: int) -> Optional[GameLevel]:
    return GameLevel.query.filter_by(level_number=level_number).first()


def get_hijaiyyah_letters() -> List[HijaiyyahLetter]:
    return HijaiyyahLetter.query.order_by(HijaiyyahLetter.level.asc(), HijaiyyahLetter.id.asc()).all()


def get_letters_by_level(level_number: int) -> List[HijaiyyahLetter]:
    return HijaiyyahLetter.query.filter_by(level=level_number).order_by(HijaiyyahLetter.id.asc()).all()


def get_questions(level_id: int, question_type: Optional[str] = None, limit: int = DEFAULT_QUESTION_LIMIT) -> List[Question]:
    """Up to ``limit`` questions for a level, in a fresh random order each call."""
    require_int(level_id, 'level_id')
    require_int(limit, 'limit', minimum=1)
    query = Question.query.filter_by(level_id=level_id)
    if question_type is not None:
        if question_type not in QUESTION_TYPES:
            raise ValidationError(f"question_type must be one of: {', '.join(QUESTION_TYPES)}")
        query = query.filter_by(type=question_type)
    return query.order_by(func.random()).limit(limit).all()
