"""API routes for Skill Garden"""
import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, status

from skill_garden.api.auth import get_container, get_current_user
from skill_garden.api.middleware import limiter
from skill_garden.api.models import (
    RegisterRequest, LoginRequest, AuthResponse,
    TeamCreateRequest, ResourceCreateRequest, SubmissionRequest,
    ProgressResponse, LeaderboardResponse, HealthCheckResponse,
)
from skill_garden.db import queries
from skill_garden.exceptions import RecordNotFoundError, ValidationError
from skill_garden.models.user import User
from skill_garden.services.container import ServiceContainer

logger = logging.getLogger(__name__)

router = APIRouter()


# ==========================================
# Auth
# ==========================================

@router.post("/api/auth/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
@limiter.limit("20/minute")
async def register(
    request: Request,
    payload: RegisterRequest,
    container: ServiceContainer = Depends(get_container)
):
    """Create an account (Rate limit: 20/minute)"""
    user, token = await container.user_service.register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        skills=payload.skills,
        interests=payload.interests,
    )
    return AuthResponse(token=token, user=user.to_public_dict())


@router.post("/api/auth/login", response_model=AuthResponse)
@limiter.limit("20/minute")
async def login(
    request: Request,
    payload: LoginRequest,
    container: ServiceContainer = Depends(get_container)
):
    """Log in with email and password (Rate limit: 20/minute)"""
    user, token = await container.user_service.login(payload.email, payload.password)
    return AuthResponse(token=token, user=user.to_public_dict())


@router.get("/api/auth/me")
async def me(user: User = Depends(get_current_user)):
    """Public profile of the authenticated user"""
    return {"success": True, "user": user.to_public_dict()}


@router.get("/api/users/me/progress", response_model=ProgressResponse)
async def my_progress(
    user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container)
):
    """XP, level, badges and streak of the authenticated user"""
    summary = await container.user_service.get_progress_summary(user.id)
    return ProgressResponse(**summary)


# ==========================================
# Teams
# ==========================================

@router.post("/api/teams", status_code=status.HTTP_201_CREATED)
async def create_team(
    payload: TeamCreateRequest,
    user: User = Depends(get_current_user)
):
    """Create a team; the creator becomes its first member"""
    team = await queries.create_team(
        creator_id=user.id,
        name=payload.name.strip(),
        description=payload.description.strip(),
        tags=payload.tags,
        needs=payload.needs,
    )
    return {"success": True, "team": team.model_dump(mode="json")}


@router.get("/api/teams")
async def list_teams(team_status: Optional[str] = Query(default=None, alias="status")):
    """List teams, e.g. ?status=Need Members"""
    teams = await queries.list_teams(team_status)
    return {"success": True, "teams": [t.model_dump(mode="json") for t in teams]}


@router.get("/api/teams/{team_id}")
async def get_team(team_id: int):
    """Team details with member summaries"""
    found = await queries.get_team_with_members(team_id)
    if found is None:
        raise RecordNotFoundError(f"Team {team_id} not found", record_type="Team", record_id=team_id)

    team, members = found
    team_data = team.model_dump(mode="json")
    team_data["members"] = [m.model_dump(mode="json") for m in members]
    return {"success": True, "team": team_data}


@router.post("/api/teams/{team_id}/join")
async def join_team(team_id: int, user: User = Depends(get_current_user)):
    """Join a team immediately"""
    team, joined = await queries.join_team(team_id, user.id)
    if team is None:
        raise RecordNotFoundError(f"Team {team_id} not found", record_type="Team", record_id=team_id)
    if not joined:
        raise ValidationError(
            f"User {user.id} already in team {team_id}",
            user_message="Already a member",
            user_id=str(user.id),
        )

    return {"success": True, "message": f"Joined {team.name}", "team": team.model_dump(mode="json")}


# ==========================================
# Challenges
# ==========================================

@router.get("/api/challenges")
async def list_challenges(challenge_type: Optional[str] = Query(default=None, alias="type")):
    """List challenges, e.g. ?type=Speed Run"""
    challenges = await queries.list_challenges(challenge_type)
    return {"success": True, "challenges": [c.model_dump(mode="json") for c in challenges]}


@router.get("/api/challenges/daily")
async def daily_challenge():
    """Challenge scheduled for today, falling back to a random one"""
    today = datetime.now(timezone.utc).date()
    challenge = await queries.get_scheduled_challenge(today)
    if challenge is None:
        challenge = await queries.get_random_challenge()
    if challenge is None:
        raise RecordNotFoundError(
            "No challenges in database",
            record_type="Challenge",
            user_message="No challenges available"
        )

    return {"success": True, "challenge": challenge.model_dump(mode="json")}


@router.post("/api/challenges/{challenge_id}/submit")
@limiter.limit("30/minute")
async def submit_solution(
    request: Request,
    challenge_id: int,
    payload: SubmissionRequest,
    user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container)
):
    """
    Submit a solution (Rate limit: 30/minute)

    A rejected solution is a normal 200 response with accepted=false.
    """
    return await container.submission_service.submit_solution(
        user_id=user.id,
        challenge_id=challenge_id,
        solution=payload.solution,
    )


# ==========================================
# Resources
# ==========================================

@router.post("/api/resources", status_code=status.HTTP_201_CREATED)
async def create_resource(
    payload: ResourceCreateRequest,
    user: User = Depends(get_current_user)
):
    """Add resource metadata"""
    resource = await queries.create_resource(
        title=payload.title.strip(),
        category=payload.category.value,
        description=payload.description,
        author=payload.author,
        tags=payload.tags,
        link=payload.link,
    )
    return {"success": True, "resource": resource.model_dump(mode="json")}


@router.get("/api/resources")
async def list_resources(category: Optional[str] = None):
    """List resources, e.g. ?category=notes"""
    resources = await queries.list_resources(category)
    return {"success": True, "resources": [r.model_dump(mode="json") for r in resources]}


# ==========================================
# Leaderboard
# ==========================================

@router.get("/api/leaderboard/weekly", response_model=LeaderboardResponse)
async def weekly_leaderboard():
    """Top 50 users by total XP"""
    rows = await queries.get_leaderboard(limit=50)
    return LeaderboardResponse(leaderboard=rows)


# ==========================================
# Health
# ==========================================

@router.get("/health", response_model=HealthCheckResponse)
async def health_check(container: ServiceContainer = Depends(get_container)):
    """Service and database status"""
    connected = await container.db.check_connection()
    return HealthCheckResponse(
        status="ok",
        database="connected" if connected else "disconnected",
        timestamp=datetime.now(timezone.utc),
    )
