"""
Service Layer Package

Business logic between the API routes and the database queries.

- UserService: Registration, login, token authentication, progress summary
- SubmissionService: Judging submissions and applying XP/streak updates
"""

from skill_garden.services.container import ServiceContainer

__all__ = ["ServiceContainer"]
