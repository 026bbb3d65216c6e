"""
SubmissionService - Challenge Submission Business Logic

Judges a submission and, when accepted, applies the XP award and streak
update to the submitter's progress inside one locked transaction.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import psycopg

from skill_garden.db import queries
from skill_garden.exceptions import (
    RecordNotFoundError,
    SkillGardenError,
    wrap_external_exception,
)
from skill_garden.gamification import award_xp, record_activity, parse_timestamp
from skill_garden.gamification.judge import AcceptanceJudge
from skill_garden.observability.metrics import (
    challenge_submissions_total,
    level_ups_total,
    xp_awarded_total,
)

logger = logging.getLogger(__name__)


class SubmissionService:
    """
    Service for challenge submissions.

    Responsibilities:
    - Looking up the challenge
    - Asking the acceptance judge
    - Serialized read-modify-write of the user's progress
    - Recording accepted submissions
    """

    def __init__(self, db_connection, judge: AcceptanceJudge):
        """
        Initialize SubmissionService.

        Args:
            db_connection: Database connection instance
            judge: Decides whether a submission is accepted
        """
        self.db = db_connection
        self.judge = judge
        logger.debug("SubmissionService initialized")

    async def submit_solution(
        self,
        user_id: int,
        challenge_id: int,
        solution: Any,
        now: Optional[Any] = None
    ) -> Dict[str, Any]:
        """
        Process a solution submission.

        Args:
            user_id: Submitting user
            challenge_id: Challenge being attempted
            solution: Submitted text
            now: Activity time (datetime or ISO string), defaults to current UTC time

        Returns:
            Rejected: {'success': False, 'accepted': False, 'message': str}
            Accepted: {
                'success': True,
                'accepted': True,
                'award': {'xp', 'level', 'level_up', 'awarded_badge', 'streak'}
            }

        Raises:
            RecordNotFoundError: challenge or user doesn't exist
            InvalidAmountError: the challenge has a non-positive reward_xp
            InvalidTimestampError: `now` is unparseable
        """
        now = parse_timestamp(now) if now is not None else datetime.now(timezone.utc)

        try:
            challenge = await queries.get_challenge(challenge_id)
        except psycopg.Error as e:
            raise wrap_external_exception(e, operation="submit_solution", user_id=str(user_id))

        if challenge is None:
            raise RecordNotFoundError(
                f"Challenge {challenge_id} not found",
                record_type="Challenge",
                record_id=challenge_id,
                user_id=str(user_id),
            )

        if not self.judge.judge(solution, challenge):
            challenge_submissions_total.labels(result="rejected").inc()
            logger.info(f"User {user_id} submission for challenge {challenge_id} rejected")
            return {"success": False, "accepted": False, "message": "Solution rejected"}

        challenge_submissions_total.labels(result="accepted").inc()

        try:
            async with self.db.transaction() as conn:
                locked = await queries.lock_user_progress(conn, user_id)
                if locked is None:
                    raise RecordNotFoundError(
                        f"User {user_id} not found",
                        record_type="User",
                        record_id=user_id,
                    )
                progress, version = locked

                progress, outcome = award_xp(progress, challenge.reward_xp, strict=True)
                progress = record_activity(progress, now)

                await queries.save_user_progress(conn, user_id, progress, version)
                await queries.add_submission(
                    conn,
                    user_id,
                    challenge.id,
                    accepted=True,
                    xp_awarded=challenge.reward_xp,
                )
        except SkillGardenError:
            raise
        except psycopg.Error as e:
            raise wrap_external_exception(
                e,
                operation="submit_solution",
                user_id=str(user_id),
                context={"challenge_id": challenge_id},
            )

        xp_awarded_total.inc(challenge.reward_xp)
        if outcome.level_up:
            level_ups_total.inc()

        logger.info(
            f"User {user_id} solved challenge {challenge_id}: "
            f"xp={outcome.xp} level={outcome.level} streak={progress.streak}"
        )

        return {
            "success": True,
            "accepted": True,
            "award": {
                "xp": outcome.xp,
                "level": outcome.level,
                "level_up": outcome.level_up,
                "awarded_badge": outcome.awarded_badge,
                "streak": progress.streak,
            },
        }
