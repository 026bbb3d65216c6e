"""Pydantic models for API request/response validation"""
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field
from datetime import datetime

from skill_garden.models.resource import ResourceCategory

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(BaseModel):
    """Request to create an account"""
    name: str = Field(..., min_length=2, description="Display name")
    email: str = Field(..., pattern=EMAIL_PATTERN, description="Login email")
    password: str = Field(..., min_length=6, description="Plain password (min 6 chars)")
    skills: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)


class LoginRequest(BaseModel):
    """Request to log in"""
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Token plus public user payload"""
    success: bool = True
    token: str
    user: Dict[str, Any]


class TeamCreateRequest(BaseModel):
    """Request to create a team"""
    name: str = Field(..., min_length=2)
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    needs: int = Field(default=0, ge=0, description="Members still wanted")


class ResourceCreateRequest(BaseModel):
    """Request to add resource metadata"""
    title: str = Field(..., min_length=2)
    description: str = ""
    category: ResourceCategory
    author: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    link: Optional[str] = None


class SubmissionRequest(BaseModel):
    """Challenge solution submission"""
    solution: Any = Field(..., description="Submitted solution text")


class ProgressResponse(BaseModel):
    """Response with XP, level and streak info"""
    success: bool = True
    xp: int
    level: int
    xp_to_next_level: int
    badges: List[str]
    streak: int
    last_active_at: Optional[str] = None


class LeaderboardEntry(BaseModel):
    id: int
    name: str
    xp: int
    level: int


class LeaderboardResponse(BaseModel):
    success: bool = True
    leaderboard: List[LeaderboardEntry]


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    database: str = Field(..., description="Database connection status")
    timestamp: datetime = Field(..., description="Check timestamp")
