"""
XP and Leveling System

Computes XP awards, level recalculation and the one-time badge.

Leveling Curve:
- Flat 1000 XP per level: level = xp // 1000 + 1

The functions here are pure: they take a UserProgress value and return a new
one. Loading and persisting progress is the caller's job (see
skill_garden.services.submission_service).
"""

from typing import Any, Dict, Tuple
import logging
import math

from skill_garden.exceptions import InvalidAmountError
from skill_garden.gamification.achievement_system import check_big_win
from skill_garden.models.progress import AwardOutcome, UserProgress

logger = logging.getLogger(__name__)

XP_PER_LEVEL = 1000


def calculate_level_from_xp(total_xp: int) -> Dict[str, int]:
    """
    Calculate level from total XP

    Returns:
        {
            'current_level': int,
            'xp_in_current_level': int,
            'xp_to_next_level': int,
            'total_xp_for_next_level': int
        }
    """
    total_xp = max(total_xp, 0)
    level = total_xp // XP_PER_LEVEL + 1
    xp_in_current_level = total_xp % XP_PER_LEVEL

    return {
        "current_level": level,
        "xp_in_current_level": xp_in_current_level,
        "xp_to_next_level": XP_PER_LEVEL - xp_in_current_level,
        "total_xp_for_next_level": level * XP_PER_LEVEL,
    }


def normalize_amount(amount: Any) -> int:
    """
    Validate an XP amount and return it as an int

    Raises:
        InvalidAmountError: amount is not a positive, finite, whole number
    """
    # bool is an int subclass
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidAmountError(amount)
    if isinstance(amount, float):
        if not math.isfinite(amount) or not amount.is_integer():
            raise InvalidAmountError(amount)
        amount = int(amount)
    if amount <= 0:
        raise InvalidAmountError(amount)
    return amount


def award_xp(
    progress: UserProgress,
    amount: Any,
    strict: bool = False
) -> Tuple[UserProgress, AwardOutcome]:
    """
    Award XP and check for level up and badge

    Args:
        progress: Current progress value (left untouched)
        amount: XP to add, must be a positive number
        strict: Raise InvalidAmountError instead of returning a no-op outcome

    Returns:
        (new_progress, outcome). When the amount is rejected in non-strict
        mode, new_progress is the same object and outcome.granted is False.
    """
    try:
        amount = normalize_amount(amount)
    except InvalidAmountError:
        if strict:
            raise
        return progress, AwardOutcome(
            xp=progress.xp,
            level=progress.level,
            level_up=False,
            awarded_badge=None,
            granted=False,
        )

    old_level = progress.level
    new_total_xp = progress.xp + amount

    # Level is recomputed, never clamped to the previous value
    new_level = calculate_level_from_xp(new_total_xp)["current_level"]
    level_up = new_level > old_level

    badges = set(progress.badges)
    awarded_badge = check_big_win(badges, amount)
    if awarded_badge:
        badges.add(awarded_badge)

    new_progress = progress.model_copy(
        update={"xp": new_total_xp, "level": new_level, "badges": badges}
    )

    logger.info(f"Awarded {amount} XP. Total: {new_total_xp} XP, Level: {new_level}")
    if level_up:
        logger.info(f"Level up from {old_level} to {new_level}")
    if awarded_badge:
        logger.info(f"Badge awarded: {awarded_badge}")

    return new_progress, AwardOutcome(
        xp=new_total_xp,
        level=new_level,
        level_up=level_up,
        awarded_badge=awarded_badge,
    )
