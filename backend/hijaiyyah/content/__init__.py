"""Reference content: Hijaiyyah letters, levels and generated questions."""
import random
from typing import Dict, List, Optional

from flask import current_app

from hijaiyyah import db
from hijaiyyah.models import GameLevel, HijaiyyahLetter, Question
from .letters import HIJAIYYAH_LETTERS, LETTERS_PER_LEVEL, LEVELS

OPTIONS_PER_QUESTION = 4


def build_options(correct: str, pool: List[str], rng: random.Random) -> List[str]:
    """Correct answer plus distinct distractors from ``pool``, shuffled.

    The correct answer appears exactly once.
    """
    distractors = [p for p in dict.fromkeys(pool) if p != correct]
    picked = rng.sample(distractors, min(OPTIONS_PER_QUESTION - 1, len(distractors)))
    options = picked + [correct]
    rng.shuffle(options)
    return options


def seed_content(rng: Optional[random.Random] = None) -> Dict[str, int]:
    """Insert letters, levels and questions. No-op when letters already exist.

    Returns the number of rows created per table (empty when skipped).
    """
    if HijaiyyahLetter.query.first() is not None:
        return {}
    rng = rng or random.Random()

    letters = []
    for idx, (glyph, name, pronunciation) in enumerate(HIJAIYYAH_LETTERS):
        letter = HijaiyyahLetter(
            letter=glyph,
            name=name,
            pronunciation=pronunciation,
            level=idx // LETTERS_PER_LEVEL + 1,
        )
        db.session.add(letter)
        letters.append(letter)
    db.session.flush()

    all_names = [letter.name for letter in letters]
    all_glyphs = [letter.letter for letter in letters]
    levels = []
    questions = []
    for number, (name, description) in enumerate(LEVELS, start=1):
        introduced = [letter for letter in letters if letter.level == number]
        level = GameLevel(
            level_number=number,
            name=name,
            description=description,
            questions_required=len(introduced),
            letters_introduced=[letter.id for letter in introduced],
            is_unlocked=(number == 1),
        )
        db.session.add(level)
        db.session.flush()
        levels.append(level)
        for letter in introduced:
            questions.append(Question(
                type='visual_identification',
                level_id=level.id,
                letter_id=letter.id,
                correct_answer=letter.name,
                options=build_options(letter.name, all_names, rng),
                difficulty=number,
            ))
            questions.append(Question(
                type='auditory_identification',
                level_id=level.id,
                letter_id=letter.id,
                correct_answer=letter.letter,
                options=build_options(letter.letter, all_glyphs, rng),
                difficulty=number,
            ))
    db.session.add_all(questions)
    db.session.commit()

    counts = {'letters': len(letters), 'levels': len(levels), 'questions': len(questions)}
    current_app.logger.info(f"[seed] {counts}")
    return counts
