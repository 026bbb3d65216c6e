"""
Database queries - re-exported for convenience.

Module organization:
- user.py: User accounts
- gamification.py: Progress locking/saving, submissions, leaderboard
- team.py: Teams and membership
- challenge.py: Challenges and the daily pick
- resource.py: Resource board
"""

from skill_garden.db.queries.user import (
    create_user,
    get_user_by_id,
    get_user_by_email,
    count_users,
)

from skill_garden.db.queries.gamification import (
    get_user_progress,
    lock_user_progress,
    save_user_progress,
    add_submission,
    get_leaderboard,
)

from skill_garden.db.queries.team import (
    create_team,
    list_teams,
    get_team_with_members,
    join_team,
)

from skill_garden.db.queries.challenge import (
    create_challenge,
    list_challenges,
    get_challenge,
    get_scheduled_challenge,
    get_random_challenge,
)

from skill_garden.db.queries.resource import (
    create_resource,
    list_resources,
)

__all__ = [
    "create_user",
    "get_user_by_id",
    "get_user_by_email",
    "count_users",
    "get_user_progress",
    "lock_user_progress",
    "save_user_progress",
    "add_submission",
    "get_leaderboard",
    "create_team",
    "list_teams",
    "get_team_with_members",
    "join_team",
    "create_challenge",
    "list_challenges",
    "get_challenge",
    "get_scheduled_challenge",
    "get_random_challenge",
    "create_resource",
    "list_resources",
]
