"""Challenge models for the arena"""
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ChallengeType(str, Enum):
    """Challenge categories"""
    SPEED_RUN = "Speed Run"
    BUG_HUNT = "Bug Hunt"
    OTHER = "Other"


class Difficulty(str, Enum):
    """Challenge difficulty levels"""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Challenge(BaseModel):
    """Coding challenge definition"""
    id: int
    title: str
    type: ChallengeType = ChallengeType.OTHER
    description: str = ""
    difficulty: Difficulty = Difficulty.MEDIUM
    reward_xp: int = 100
    scheduled_for: Optional[date] = None  # set for daily challenges
    created_at: Optional[datetime] = None
