"""
Wizard rank titles shown next to a learner's level.

Pure lookup over static data; one title unlocks every ten levels.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class TitleStep:
    at: int
    title: str
    image: str
    description: str

    def to_dict(self) -> dict:
        return {'title': self.title, 'image': self.image, 'description': self.description}


NOVICE_TITLE = TitleStep(
    at=1,
    title='Novice Learner',
    image='/assets/wizard/wizard_novice.png',
    description='A young wizard with a small flame, the very beginning of magical learning',
)

TITLE_STEPS: Tuple[TitleStep, ...] = (
    TitleStep(10, 'Spark Initiate', '/assets/wizard/wizard_torch.png',
              'A young wizard holding a glowing torch, taking the first steps in magical learning'),
    TitleStep(20, 'Apprentice of Embers', '/assets/wizard/wizard_orbs.png',
              'A wizard surrounded by glowing orbs, growing magical knowledge'),
    TitleStep(30, 'Rune Adept', '/assets/wizard/wizard_book.png',
              'A wizard reading a glowing book under a magical star'),
    TitleStep(40, 'Arcane Scholar', '/assets/wizard/wizard_pentagram.png',
              'A wizard casting spells with a pentagram, deep in advanced studies'),
    TitleStep(50, 'Spellblade', '/assets/wizard/wizard_sword.png',
              'A wizard wielding a rune-etched sword'),
    TitleStep(60, 'Master of Sigils', '/assets/wizard/wizard_staff.png',
              'A wizard with glowing eyes and a magical staff'),
    TitleStep(70, 'Archmage', '/assets/wizard/wizard_powerful.png',
              'A powerful wizard wrapped in a magical aura'),
    TitleStep(80, 'Void Conjurer', '/assets/wizard/wizard_energy.png',
              'A wizard surrounded by stars and raw magical energy'),
    TitleStep(90, 'Grand Archon', '/assets/wizard/wizard_powerful.png',
              'A wizard with a star-topped staff and supreme authority'),
    TitleStep(100, 'Elder Chronomancer', '/assets/wizard/wizard_time.png',
              'A time-wizard surrounded by clocks and hourglasses'),
)


def title_for_level(level: int) -> TitleStep:
    """
    Highest title unlocked at ``level``.

    Examples:
        >>> title_for_level(9).title
        'Novice Learner'
        >>> title_for_level(25).title
        'Apprentice of Embers'
    """
    unlocked = NOVICE_TITLE
    for step in TITLE_STEPS:
        if level >= step.at:
            unlocked = step
    return unlocked


def next_title(level: int) -> Optional[TitleStep]:
    """Next title the learner is working towards, None once all are unlocked."""
    for step in TITLE_STEPS:
        if level < step.at:
            return step
    return None
