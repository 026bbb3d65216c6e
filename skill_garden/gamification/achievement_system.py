"""
Badge rules

Only one badge exists today: "Big Win", granted the first time a single
award of at least 200 XP lands. It is never granted twice.
"""

from typing import Optional, Set

BIG_WIN_BADGE = "Big Win"
BIG_WIN_THRESHOLD = 200


def check_big_win(badges: Set[str], amount: float) -> Optional[str]:
    """Return the badge to grant for this award, or None"""
    if amount >= BIG_WIN_THRESHOLD and BIG_WIN_BADGE not in badges:
        return BIG_WIN_BADGE
    return None
