"""
Service Container - Dependency Injection Container

Holds the infrastructure (database, settings, acceptance judge) and
lazily builds services on first access. One container is created per
API application and stored on app.state.
"""

from dataclasses import dataclass, field
from typing import Optional
import logging

from skill_garden.config import Settings
from skill_garden.gamification.judge import AcceptanceJudge

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """
    Simple dependency injection container for services.

    Services are lazy-loaded on first access via properties.
    """

    # Infrastructure dependencies (injected)
    db: object  # Database instance
    settings: Settings
    judge: AcceptanceJudge

    # Services (lazy-loaded via properties)
    _user_service: Optional[object] = field(default=None, init=False, repr=False)
    _submission_service: Optional[object] = field(default=None, init=False, repr=False)

    @property
    def user_service(self):
        """Get UserService instance (lazy-loaded)"""
        if self._user_service is None:
            from skill_garden.services.user_service import UserService
            self._user_service = UserService(self.db, self.settings)
            logger.debug("UserService instantiated")
        return self._user_service

    @property
    def submission_service(self):
        """Get SubmissionService instance (lazy-loaded)"""
        if self._submission_service is None:
            from skill_garden.services.submission_service import SubmissionService
            self._submission_service = SubmissionService(self.db, self.judge)
            logger.debug("SubmissionService instantiated")
        return self._submission_service
