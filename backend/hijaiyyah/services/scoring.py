import math

BASE_POINTS = 10
MAX_SPEED_BONUS = 5
SECONDS_PER_BONUS_POINT = 2
WRONG_ANSWER_PENALTY = -2


def score_answer(is_correct: bool, time_taken_seconds: float) -> int:
    """Points earned for a single answer.

    A correct answer earns the base 10 plus a speed bonus that starts at 5
    and drops by one point per full 2 seconds elapsed, never below 0.
    A wrong answer costs a flat 2 points regardless of time.
    """
    if not is_correct:
        return WRONG_ANSWER_PENALTY
    speed_bonus = max(0, MAX_SPEED_BONUS - math.floor(time_taken_seconds / SECONDS_PER_BONUS_POINT))
    return BASE_POINTS + speed_bonus


def stored_time(time_taken_seconds: float) -> int:
    """Answer time as persisted in the log (truncated toward zero)."""
    return int(time_taken_seconds)
