"""
Session game catalogue.

Static metadata for the mini-games an instructor can put into a session. Loaded
once at import time and never mutated.
"""
from dataclasses import dataclass, asdict
from typing import Optional, Tuple


@dataclass(frozen=True)
class GameMetadata:
    id: str
    name: str
    description: str
    keywords: Tuple[str, ...]
    recommended_order: int
    icon: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data['keywords'] = list(self.keywords)
        return data


SESSION_GAMES: Tuple[GameMetadata, ...] = (
    GameMetadata(
        id='flashcards',
        name='Flashcards',
        description='Flip cards and practice words',
        keywords=('word recognition', 'pronunciation', 'foundational'),
        recommended_order=1,
        icon='📚',
    ),
    GameMetadata(
        id='multiple_choice',
        name='Multiple Choice',
        description='Choose the correct translation',
        keywords=('recognition', 'validation', 'speed'),
        recommended_order=2,
        icon='✅',
    ),
    GameMetadata(
        id='memory',
        name='Memory',
        description='Match words with translations',
        keywords=('association', 'memory', 'visual learning'),
        recommended_order=3,
        icon='🧠',
    ),
    GameMetadata(
        id='word_scramble',
        name='Word Scramble',
        description='Build words from scrambled letters',
        keywords=('spelling', 'letter order', 'concentration'),
        recommended_order=4,
        icon='🔤',
    ),
    GameMetadata(
        id='sentence_gap',
        name='Sentence Gap',
        description='Fill in the gaps in sentences',
        keywords=('deeper understanding', 'context', 'grammar'),
        recommended_order=5,
        icon='📝',
    ),
    GameMetadata(
        id='translate',
        name='Translate',
        description='Translate words between languages',
        keywords=('translation', 'spelling', 'precision'),
        recommended_order=6,
        icon='🌐',
    ),
    GameMetadata(
        id='flashcards_test',
        name='Flashcards Test',
        description='Pronounce the English word when you see the Swedish side',
        keywords=('pronunciation', 'test'),
        recommended_order=7,
        icon='🎤',
    ),
    GameMetadata(
        id='word_roulette',
        name='Word Roulette',
        description='Write sentences with the words',
        keywords=('creativity', 'sentences', 'application'),
        recommended_order=8,
        icon='🎯',
    ),
)


def get_game_metadata(game_id, catalogue=SESSION_GAMES) -> Optional[GameMetadata]:
    for game in catalogue:
        if game.id == game_id:
            return game
    return None


def games_with_keyword(keyword: str, catalogue=SESSION_GAMES) -> Tuple[GameMetadata, ...]:
    """Games whose keywords contain ``keyword`` (case-insensitive)."""
    needle = (keyword or '').strip().lower()
    if not needle:
        return ()
    return tuple(
        game for game in catalogue
        if any(needle in kw.lower() for kw in game.keywords)
    )
