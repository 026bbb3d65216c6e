"""
Daily Streak Tracking

A streak counts consecutive calendar days with at least one accepted
challenge submission. Only dates are compared; time of day is ignored.

Transitions per recorded activity:
- last activity was yesterday: streak + 1
- first activity, or a gap of 2+ days, or out-of-order date: reset to 1
- last activity was today: unchanged
"""

from datetime import date, datetime, timedelta
from typing import Any, Optional, Union
import logging

from skill_garden.exceptions import InvalidTimestampError
from skill_garden.models.progress import UserProgress

logger = logging.getLogger(__name__)


def parse_timestamp(value: Union[datetime, str], field: str = "now") -> datetime:
    """
    Coerce a datetime or ISO-8601 string into a datetime

    Raises:
        InvalidTimestampError: value is neither
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            # Python < 3.11 rejects the trailing Z
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise InvalidTimestampError(value, field=field)
    raise InvalidTimestampError(value, field=field)


def _calendar_date(moment: datetime, reference: datetime) -> date:
    # Compare both moments in the same timezone when both are aware
    if moment.tzinfo is not None and reference.tzinfo is not None:
        moment = moment.astimezone(reference.tzinfo)
    return moment.date()


def record_activity(progress: UserProgress, now: Any) -> UserProgress:
    """
    Update streak and last_active_at for an activity happening at `now`

    Args:
        progress: Current progress value (left untouched)
        now: datetime or ISO-8601 string of the activity

    Returns:
        New progress value

    Raises:
        InvalidTimestampError: `now` or the stored last_active_at is unparseable
    """
    now = parse_timestamp(now)
    prior_moment: Optional[datetime] = None
    if progress.last_active_at is not None:
        prior_moment = parse_timestamp(progress.last_active_at, field="last_active_at")

    today = now.date()
    yesterday = today - timedelta(days=1)
    prior_date = _calendar_date(prior_moment, now) if prior_moment else None

    old_streak = progress.streak

    if prior_date == yesterday:
        streak = old_streak + 1
    elif prior_date is None or prior_date != today:
        streak = 1
        if prior_date is not None:
            logger.info(f"Streak broken: was {old_streak}, last activity on {prior_date}")
    else:
        # Same calendar day
        streak = old_streak

    logger.debug(f"Streak updated: {old_streak} -> {streak}")

    return progress.model_copy(update={"streak": streak, "last_active_at": now})
