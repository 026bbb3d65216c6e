"""Progression models for gamification"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, NonNegativeInt, PositiveInt


class UserProgress(BaseModel):
    """XP, level, badges and daily streak of one user account"""
    xp: NonNegativeInt = 0
    level: PositiveInt = 1  # cached projection of xp, see calculate_level_from_xp
    badges: set[str] = Field(default_factory=set)
    streak: NonNegativeInt = 0
    last_active_at: Optional[datetime] = None


class AwardOutcome(BaseModel):
    """Result of a single XP award, returned to the caller (not persisted)"""
    xp: int
    level: int
    level_up: bool = False
    awarded_badge: Optional[str] = None
    granted: bool = True
