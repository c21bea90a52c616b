from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class XpAwardDTO:
    raw_points: float
    xp: int
    previous_xp: int
    new_xp: int
    previous_level: int
    new_level: int
    leveled_up: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class StreakDTO:
    current_streak: int
    last_play_date: Optional[str]
    transition: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
