"""User-related Pydantic models"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from skill_garden.models.progress import UserProgress


class User(BaseModel):
    """User account as stored in the users table"""
    id: int
    name: str
    email: str
    password_hash: str
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    progress: UserProgress = Field(default_factory=UserProgress)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict) -> "User":
        """Build from a users row (dict_row)"""
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
            skills=row.get("skills") or [],
            interests=row.get("interests") or [],
            progress=UserProgress(
                xp=row.get("xp", 0),
                level=row.get("level", 1),
                badges=set(row.get("badges") or []),
                streak=row.get("streak", 0),
                last_active_at=row.get("last_active_at"),
            ),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    def to_public_dict(self) -> dict:
        """Safe payload for clients (no password hash)"""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "xp": self.progress.xp,
            "level": self.progress.level,
            "badges": sorted(self.progress.badges),
            "skills": self.skills,
            "interests": self.interests,
            "streak": self.progress.streak,
        }
