"""
Game Scoring - raw point calculators for each mini-game.

Pure logic: every calculator takes the counts a game reports when it ends
and returns a GameScoreResult. ``points_awarded`` is the raw score that is
later normalized by set size and scaled into XP.

Points never go negative and accuracy stays within 0-100. Counts are
sanitized on the way in: NaN, infinities, junk and negatives count as 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable, Dict

from .points import round_half_up, to_number


@dataclass
class GameScoreResult:
    """Result of scoring one finished game."""
    points_awarded: int
    accuracy: int
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'points_awarded': self.points_awarded,
            'accuracy': self.accuracy,
            'details': dict(self.details),
        }


def _count(value):
    """Non-negative finite count; ints stay ints."""
    number = max(0.0, to_number(value))
    return int(number) if number.is_integer() else number


def _clean_counts(calculator):
    @wraps(calculator)
    def wrapper(*args, **kwargs):
        args = [_count(value) for value in args]
        kwargs = {key: _count(value) for key, value in kwargs.items()}
        return calculator(*args, **kwargs)
    return wrapper


def _accuracy(correct, total) -> int:
    if not total or total <= 0:
        return 0
    return round_half_up(max(0.0, min(100.0, to_number(correct / total * 100))))


def _result(points, accuracy, correct, total, wrong, **extra) -> GameScoreResult:
    points = max(0.0, to_number(points))
    accuracy = max(0, min(100, int(to_number(accuracy))))
    details = {
        'correct_answers': correct,
        'total_questions': total,
        'wrong_attempts': wrong,
    }
    details.update(extra)
    return GameScoreResult(points_awarded=int(points), accuracy=accuracy, details=details)


@_clean_counts
def calculate_basic_score(correct_answers: int, total_questions: int, wrong_attempts: int = 0) -> GameScoreResult:
    """1 point per correct answer."""
    return _result(correct_answers, _accuracy(correct_answers, total_questions),
                   correct_answers, total_questions, wrong_attempts)


@_clean_counts
def calculate_memory_score(correct_pairs: int, total_pairs: int, wrong_attempts: int = 0) -> GameScoreResult:
    """3 points per matched pair."""
    return _result(correct_pairs * 3, _accuracy(correct_pairs, total_pairs),
                   correct_pairs, total_pairs, wrong_attempts)


@_clean_counts
def calculate_story_gap_score(correct_answers: int, total_questions: int, wrong_attempts: int = 0) -> GameScoreResult:
    """+2 per correct gap, -1 per wrong click."""
    return _result(correct_answers * 2 - wrong_attempts, _accuracy(correct_answers, total_questions),
                   correct_answers, total_questions, wrong_attempts)


@_clean_counts
def calculate_translate_score(correct_answers: int, total_questions: int, wrong_attempts: int = 0) -> GameScoreResult:
    """+2 per correct translation, -1 per wrong click."""
    return _result(correct_answers * 2 - wrong_attempts, _accuracy(correct_answers, total_questions),
                   correct_answers, total_questions, wrong_attempts)


@_clean_counts
def calculate_roulette_score(word_count: int, quality: float, wrong_attempts: int = 0) -> GameScoreResult:
    """
    Sentence-writing game scored on grammar quality (0-1).

    Quality 0 (inappropriate) earns nothing, >= 0.8 earns one point per word,
    anything in between earns half the words, at least 1.
    """
    if quality <= 0:
        points, accuracy = 0, 0
    elif quality >= 0.8:
        points, accuracy = word_count, 100
    else:
        points, accuracy = max(1, word_count // 2), 50
    return _result(points, accuracy, word_count, word_count, wrong_attempts, word_count=word_count)


@_clean_counts
def calculate_typing_score(correct_words: int, total_words: int, wrong_attempts: int = 0) -> GameScoreResult:
    """1 point per correct word; accuracy is over attempts, not words."""
    total_attempts = correct_words + wrong_attempts
    return _result(correct_words, _accuracy(correct_words, total_attempts),
                   correct_words, total_words, wrong_attempts, total_attempts=total_attempts)


@_clean_counts
def calculate_multiple_choice_score(correct_answers: int, total_questions: int, wrong_attempts: int = 0) -> GameScoreResult:
    """1 point per correct answer, but only at 50% accuracy or better."""
    accuracy = _accuracy(correct_answers, total_questions)
    points = correct_answers if accuracy >= 50 else 0
    return _result(points, accuracy, correct_answers, total_questions, wrong_attempts)


@_clean_counts
def calculate_quiz_score(quiz_score: int, total_possible: int, wrong_attempts: int = 0) -> GameScoreResult:
    """1 point per 10 quiz points, minimum 5."""
    points = max(5, quiz_score // 10)
    return _result(points, _accuracy(quiz_score, total_possible),
                   quiz_score // 2, total_possible // 2, wrong_attempts)


@_clean_counts
def calculate_spell_casting_score(final_score: int, wrong_attempts: int = 0) -> GameScoreResult:
    """Tiered: 25 up to 100, 50 up to 500, 75 up to 1000, 100 above."""
    if final_score <= 100:
        points = 25
    elif final_score <= 500:
        points = 50
    elif final_score <= 1000:
        points = 75
    else:
        points = 100
    return _result(points, 100, final_score // 10, final_score // 10, wrong_attempts)


@_clean_counts
def calculate_line_matching_score(correct_pairs: int, total_pairs: int, wrong_attempts: int = 0) -> GameScoreResult:
    """2.5 points per pair (rounded), -1 per wrong attempt."""
    points = round_half_up(to_number(correct_pairs * 2.5)) - wrong_attempts
    return _result(points, _accuracy(correct_pairs, correct_pairs + wrong_attempts),
                   correct_pairs, total_pairs, wrong_attempts)


@_clean_counts
def calculate_distorted_tale_score(score_percentage: int, words_used: int, total_words: int) -> GameScoreResult:
    """1 point per 10% of the AI feedback score (min 1), +2 for using every word, capped at 12."""
    points = max(1, int(score_percentage // 10))
    if total_words > 0 and words_used == total_words:
        points += 2
    return _result(min(12, points), int(score_percentage), words_used, total_words, 0,
                   score_percentage=score_percentage, word_count=total_words)


@_clean_counts
def calculate_scramble_score(correct_words: int, total_words: int, wrong_attempts: int = 0) -> GameScoreResult:
    """2 points per unscrambled word."""
    return _result(correct_words * 2, _accuracy(correct_words, total_words),
                   correct_words, total_words, wrong_attempts)


GAME_SCORERS: Dict[str, Callable[..., GameScoreResult]] = {
    'flashcards': calculate_basic_score,
    'flashcards_test': calculate_basic_score,
    'multiple_choice': calculate_multiple_choice_score,
    'memory': calculate_memory_score,
    'word_scramble': calculate_scramble_score,
    'sentence_gap': calculate_story_gap_score,
    'story_gap': calculate_story_gap_score,
    'translate': calculate_translate_score,
    'word_roulette': calculate_roulette_score,
    'typing_challenge': calculate_typing_score,
    'quiz': calculate_quiz_score,
    'spell_casting': calculate_spell_casting_score,
    'line_matching': calculate_line_matching_score,
    'distorted_tale': calculate_distorted_tale_score,
}


def score_game(game_id: str, **counts) -> GameScoreResult:
    """
    Dispatch to the calculator registered for ``game_id``.

    Raises:
        KeyError: no calculator for ``game_id``.
    """
    try:
        scorer = GAME_SCORERS[game_id]
    except KeyError:
        raise KeyError(f"No scoring rule for game '{game_id}'")
    return scorer(**counts)
