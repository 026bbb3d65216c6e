"""
Submission acceptance judges

The judge decides whether a challenge submission is accepted. The default
judge is a stand-in for real grading: it accepts submissions mentioning a
keyword, and otherwise flips a coin.
"""

import logging
import random
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class AcceptanceJudge(Protocol):
    """Anything that can accept or reject a submission"""

    def judge(self, submission_text: Any, challenge: Any) -> bool:
        ...


class KeywordOrCoinFlipJudge:
    """
    Accept when the text contains `keyword` (case-insensitive), otherwise
    accept with probability `pass_rate`.
    """

    def __init__(
        self,
        keyword: str = "solve",
        pass_rate: float = 0.5,
        rng: Optional[Callable[[], float]] = None
    ):
        self.keyword = keyword.lower()
        self.pass_rate = pass_rate
        self._rng = rng or random.random

    def judge(self, submission_text: Any, challenge: Any) -> bool:
        if isinstance(submission_text, str) and self.keyword in submission_text.lower():
            logger.debug("Submission accepted by keyword match")
            return True

        accepted = self._rng() < self.pass_rate
        logger.debug(f"Submission {'accepted' if accepted else 'rejected'} by coin flip")
        return accepted


def create_judge(settings) -> KeywordOrCoinFlipJudge:
    """Build the default judge from settings"""
    return KeywordOrCoinFlipJudge(
        keyword=settings.acceptance_keyword,
        pass_rate=settings.acceptance_pass_rate,
    )
