"""Team models"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TeamStatus(str, Enum):
    """Recruiting status of a team"""
    NEED_MEMBERS = "Need Members"
    OPEN = "Open"


def status_for_needs(needs: int) -> TeamStatus:
    return TeamStatus.NEED_MEMBERS if needs > 0 else TeamStatus.OPEN


class TeamMember(BaseModel):
    """Public member summary shown on a team page"""
    id: int
    name: str
    xp: int
    level: int
    skills: list[str] = Field(default_factory=list)


class Team(BaseModel):
    """Team definition"""
    id: int
    name: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    needs: int = 0  # members still wanted
    status: TeamStatus = TeamStatus.NEED_MEMBERS
    members: list[int] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
