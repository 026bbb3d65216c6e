"""Unit tests for UserService"""
import psycopg
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

from skill_garden.exceptions import (
    AuthenticationError,
    ConflictError,
    ConnectionError,
    RecordNotFoundError,
)
from skill_garden.models.progress import UserProgress
from skill_garden.services.user_service import UserService
from skill_garden.utils.auth import create_access_token, decode_access_token, verify_password


@pytest.fixture
def user_service(mock_db, test_settings):
    """Create UserService instance with mocks"""
    return UserService(mock_db, test_settings)


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_register_success(mock_queries, user_service, test_user, test_settings):
    mock_queries.create_user = AsyncMock(return_value=test_user)

    user, token = await user_service.register(
        name=" Ava Green ",
        email="Ava@Example.com",
        password="password1",
        skills=["HTML"],
    )

    assert user is test_user
    assert decode_access_token(token, test_settings) == test_user.id
    kwargs = mock_queries.create_user.call_args.kwargs
    assert kwargs["name"] == "Ava Green"
    assert kwargs["email"] == "ava@example.com"
    assert verify_password("password1", kwargs["password_hash"])


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_register_duplicate_email(mock_queries, user_service):
    mock_queries.create_user = AsyncMock(return_value=None)

    with pytest.raises(ConflictError) as exc_info:
        await user_service.register(name="Ava", email="ava@example.com", password="password1")

    assert exc_info.value.user_message == "Email already in use"


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_register_database_down(mock_queries, user_service):
    mock_queries.create_user = AsyncMock(side_effect=psycopg.OperationalError("down"))

    with pytest.raises(ConnectionError):
        await user_service.register(name="Ava", email="ava@example.com", password="password1")


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_login_success(mock_queries, user_service, test_user, test_settings):
    mock_queries.get_user_by_email = AsyncMock(return_value=test_user)

    user, token = await user_service.login("AVA@example.com ", "password1")

    assert user is test_user
    assert decode_access_token(token, test_settings) == test_user.id
    mock_queries.get_user_by_email.assert_called_once_with("ava@example.com")


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_login_wrong_password(mock_queries, user_service, test_user):
    mock_queries.get_user_by_email = AsyncMock(return_value=test_user)

    with pytest.raises(AuthenticationError) as exc_info:
        await user_service.login("ava@example.com", "wrong")

    assert exc_info.value.user_message == "Invalid credentials"


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_login_unknown_email(mock_queries, user_service):
    mock_queries.get_user_by_email = AsyncMock(return_value=None)

    with pytest.raises(AuthenticationError):
        await user_service.login("nobody@example.com", "password1")


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_authenticate_token(mock_queries, user_service, test_user, test_settings):
    mock_queries.get_user_by_id = AsyncMock(return_value=test_user)
    token = create_access_token(test_user.id, test_settings)

    user = await user_service.authenticate_token(token)

    assert user is test_user
    mock_queries.get_user_by_id.assert_called_once_with(test_user.id)


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_authenticate_token_deleted_user(mock_queries, user_service, test_settings):
    mock_queries.get_user_by_id = AsyncMock(return_value=None)
    token = create_access_token(5, test_settings)

    with pytest.raises(AuthenticationError) as exc_info:
        await user_service.authenticate_token(token)

    assert exc_info.value.user_message == "User not found for token"


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_progress_summary_recomputes_level(mock_queries, user_service):
    active = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)
    mock_queries.get_user_progress = AsyncMock(return_value=UserProgress(
        xp=2300, level=1, badges={"Big Win"}, streak=2, last_active_at=active
    ))

    summary = await user_service.get_progress_summary(1)

    assert summary == {
        "xp": 2300,
        "level": 3,
        "xp_to_next_level": 700,
        "badges": ["Big Win"],
        "streak": 2,
        "last_active_at": active.isoformat(),
    }


@pytest.mark.asyncio
@patch('skill_garden.services.user_service.queries')
async def test_progress_summary_unknown_user(mock_queries, user_service):
    mock_queries.get_user_progress = AsyncMock(return_value=None)

    with pytest.raises(RecordNotFoundError):
        await user_service.get_progress_summary(99)
