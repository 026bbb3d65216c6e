"""
Standardized exception hierarchy for Skill Garden
Provides rich context, consistent logging, and user-friendly error messages
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any
from uuid import uuid4
import logging

logger = logging.getLogger(__name__)


class SkillGardenError(Exception):
    """
    Base exception for all Skill Garden errors

    Provides:
    - Automatic timestamping
    - Request ID for tracing
    - User-friendly messages
    - Structured context
    - Automatic logging

    Example:
        raise SkillGardenError(
            message="Failed to save progress",
            user_id="42",
            operation="submit_solution",
            context={"challenge_id": 7}
        )
    """

    status_code: int = 500
    log_level: int = logging.ERROR

    def __init__(
        self,
        message: str,
        user_id: Optional[str] = None,
        request_id: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.user_id = user_id
        self.request_id = request_id or str(uuid4())
        self.operation = operation
        self.context = context or {}
        self.cause = cause
        self.user_message = user_message or "An error occurred. Please try again."
        self.timestamp = datetime.now(timezone.utc)

        self._log_error()

    def _log_error(self) -> None:
        """Log error with full context"""
        log_data = {
            "error_type": self.__class__.__name__,
            "error_message": self.message,  # 'message' is reserved by logging
            "request_id": self.request_id,
            "user_id": self.user_id,
            "operation": self.operation,
            "error_context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

        if self.cause:
            log_data["cause"] = str(self.cause)
            logger.log(
                self.log_level,
                f"{self.__class__.__name__}: {self.message}",
                extra=log_data,
                exc_info=self.cause
            )
        else:
            logger.log(self.log_level, f"{self.__class__.__name__}: {self.message}", extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for API responses"""
        return {
            "success": False,
            "error": self.__class__.__name__,
            "message": self.user_message,
            "request_id": self.request_id,
            "timestamp": self.timestamp.isoformat()
        }


# ==========================================
# Validation Errors (User Input)
# ==========================================

class ValidationError(SkillGardenError):
    """
    Raised when user input fails validation

    Example:
        raise ValidationError(
            message="Needs must be a non-negative integer",
            field="needs",
            value=-1
        )
    """

    status_code = 400
    log_level = logging.WARNING

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        user_message: Optional[str] = None,
        **kwargs
    ):
        self.field = field
        self.value = value
        super().__init__(
            message=message,
            user_message=user_message or (f"Invalid {field}: {message}" if field else message),
            context={"field": field, "value": repr(value)},
            **kwargs
        )


class InvalidAmountError(ValidationError):
    """XP award amount is not a positive number"""

    def __init__(self, amount: Any, **kwargs):
        super().__init__(
            message=f"XP amount must be a positive number, got {amount!r}",
            field="amount",
            value=amount,
            **kwargs
        )


class InvalidTimestampError(ValidationError):
    """Activity timestamp could not be parsed"""

    def __init__(self, value: Any, field: str = "now", **kwargs):
        super().__init__(
            message=f"Unparseable timestamp {value!r}",
            field=field,
            value=value,
            **kwargs
        )


class ConflictError(SkillGardenError):
    """Request conflicts with existing state (e.g. duplicate email)"""

    status_code = 409
    log_level = logging.WARNING

    def __init__(self, message: str, user_message: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            user_message=user_message or message,
            **kwargs
        )


# ==========================================
# Database Errors
# ==========================================

class DatabaseError(SkillGardenError):
    """
    Base class for database-related errors
    """
    pass


class ConnectionError(DatabaseError):
    """Database connection failed"""

    def __init__(self, message: str = "Database connection failed", **kwargs):
        super().__init__(
            message=message,
            user_message="We're having trouble connecting to the database. Please try again in a moment.",
            **kwargs
        )


class QueryError(DatabaseError):
    """Database query execution failed"""

    def __init__(
        self,
        message: str,
        query: Optional[str] = None,
        **kwargs
    ):
        self.query = query
        super().__init__(
            message=message,
            user_message="We encountered an issue saving your data. Please try again.",
            context={"query": query},
            **kwargs
        )


class ConcurrentUpdateError(DatabaseError):
    """A progress row changed between read and write"""

    status_code = 409
    log_level = logging.WARNING

    def __init__(self, user_id: str, expected_version: int, **kwargs):
        self.expected_version = expected_version
        super().__init__(
            message=f"Progress for user {user_id} changed concurrently (expected version {expected_version})",
            user_id=user_id,
            user_message="Your progress was updated by another request. Please try again.",
            context={"expected_version": expected_version},
            **kwargs
        )


class RecordNotFoundError(DatabaseError):
    """Requested database record does not exist"""

    status_code = 404
    log_level = logging.WARNING

    def __init__(
        self,
        message: str,
        record_type: Optional[str] = None,
        record_id: Optional[Any] = None,
        user_message: Optional[str] = None,
        **kwargs
    ):
        self.record_type = record_type
        self.record_id = record_id
        super().__init__(
            message=message,
            user_message=user_message or f"{record_type or 'Record'} not found",
            context={"record_type": record_type, "record_id": record_id},
            **kwargs
        )


# ==========================================
# Authentication & Authorization
# ==========================================

class AuthenticationError(SkillGardenError):
    """Authentication failed"""

    status_code = 401
    log_level = logging.WARNING

    def __init__(
        self,
        message: str = "Authentication failed",
        user_message: Optional[str] = None,
        **kwargs
    ):
        super().__init__(
            message=message,
            user_message=user_message or "Authentication failed. Please check your credentials.",
            **kwargs
        )


class AuthorizationError(SkillGardenError):
    """User lacks permission for requested operation"""

    status_code = 403
    log_level = logging.WARNING

    def __init__(
        self,
        message: str = "Insufficient permissions",
        resource: Optional[str] = None,
        **kwargs
    ):
        self.resource = resource
        super().__init__(
            message=message,
            user_message=f"You don't have permission to access {resource or 'this resource'}.",
            context={"resource": resource},
            **kwargs
        )


# ==========================================
# Configuration Errors
# ==========================================

class ConfigurationError(SkillGardenError):
    """System configuration is invalid or missing"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        self.config_key = config_key
        super().__init__(
            message=message,
            user_message="The system is not properly configured. Please contact support.",
            context={"config_key": config_key},
            **kwargs
        )


# ==========================================
# Helper Functions
# ==========================================

def wrap_external_exception(
    error: Exception,
    operation: str,
    user_id: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> SkillGardenError:
    """
    Wrap external exceptions (psycopg, etc.) into our exception hierarchy

    Args:
        error: Original exception
        operation: What operation was being performed
        user_id: User ID if applicable
        context: Additional context

    Returns:
        Appropriate SkillGardenError subclass

    Example:
        try:
            await cur.execute(query)
        except psycopg.Error as e:
            raise wrap_external_exception(e, operation="save_user_progress", user_id="42")
    """
    import psycopg

    if isinstance(error, SkillGardenError):
        return error

    if isinstance(error, psycopg.OperationalError):
        return ConnectionError(
            message=f"Database connection failed: {str(error)}",
            user_id=user_id,
            operation=operation,
            context=context,
            cause=error
        )
    elif isinstance(error, psycopg.Error):
        return QueryError(
            message=f"Database query failed: {str(error)}",
            user_id=user_id,
            operation=operation,
            cause=error
        )

    return SkillGardenError(
        message=f"{operation} failed: {str(error)}",
        user_id=user_id,
        operation=operation,
        context=context,
        cause=error
    )
