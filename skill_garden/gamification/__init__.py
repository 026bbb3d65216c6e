"""
Gamification for Skill Garden

- XP and leveling (xp_system)
- Daily streaks (streak_system)
- Badges (achievement_system)
- Submission acceptance (judge)
"""

from skill_garden.gamification.xp_system import award_xp, calculate_level_from_xp
from skill_garden.gamification.streak_system import record_activity, parse_timestamp
from skill_garden.gamification.achievement_system import check_big_win, BIG_WIN_BADGE
from skill_garden.gamification.judge import AcceptanceJudge, KeywordOrCoinFlipJudge

__all__ = [
    "award_xp",
    "calculate_level_from_xp",
    "record_activity",
    "parse_timestamp",
    "check_big_win",
    "BIG_WIN_BADGE",
    "AcceptanceJudge",
    "KeywordOrCoinFlipJudge",
]
