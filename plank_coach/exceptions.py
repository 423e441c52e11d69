"""
Standardized exception hierarchy for plank-coach
Provides rich context, consistent logging, and user-friendly error messages
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any
from uuid import uuid4
import logging

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class PlankCoachError(Exception):
    """
    Base exception for all plank-coach errors

    Provides:
    - Automatic timestamping
    - Request ID for tracing
    - User-friendly messages
    - Structured context
    - Automatic logging

    Example:
        raise PlankCoachError(
            message="Failed to award achievement",
            user_id="user-123",
            operation="insert_earned_achievement",
            context={"achievement_name": "Minute Master"}
        )
    """

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

        # Auto-log on creation
        self._log_error()

    def _log_error(self) -> None:
        """Log error with full context"""
        log_data = {
            "error_type": self.__class__.__name__,
            "error_message": self.message,  # Avoid conflict with logging's 'message' field
            "request_id": self.request_id,
            "user_id": self.user_id,
            "operation": self.operation,
            "error_context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

        if self.cause:
            log_data["cause"] = str(self.cause)
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data, exc_info=self.cause)
        else:
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for API responses"""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "user_message": self.user_message,
            "request_id": self.request_id,
            "timestamp": self.timestamp.isoformat()
        }


# ==========================================
# Database Errors
# ==========================================

class DatabaseError(PlankCoachError):
    """
    Base class for data store errors
    """
    pass


class ConnectionError(DatabaseError):
    """Data store connection failed or timed out"""

    def __init__(self, message: str = "Database connection failed", **kwargs):
        super().__init__(
            message=message,
            user_message="We're having trouble connecting to the database. Please try again in a moment.",
            **kwargs
        )


class QueryError(DatabaseError):
    """Data store query execution failed"""

    def __init__(
        self,
        message: str,
        query: Optional[str] = None,
        **kwargs
    ):
        self.query = query
        super().__init__(
            message=message,
            user_message="We encountered an issue loading your data. Please try again.",
            context={"query": query},
            **kwargs
        )


class DuplicateAwardError(DatabaseError):
    """
    An earned record already exists for this (user, achievement name) pair

    Raised by stores when the uniqueness constraint rejects an insert. The
    engine treats it as "already awarded".
    """

    def __init__(
        self,
        message: str,
        achievement_name: Optional[str] = None,
        **kwargs
    ):
        self.achievement_name = achievement_name
        super().__init__(
            message=message,
            user_message="You already have this achievement.",
            context={"achievement_name": achievement_name},
            **kwargs
        )

    def _log_error(self) -> None:
        # Expected under concurrent triggers; not worth an error line
        logger.info(
            f"Duplicate award ignored: {self.achievement_name} for user {self.user_id}"
        )


# ==========================================
# Achievement Errors
# ==========================================

class CatalogValidationError(PlankCoachError):
    """Achievement catalog failed validation at load time"""

    def __init__(
        self,
        message: str,
        achievement_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        self.achievement_id = achievement_id
        super().__init__(
            message=message,
            user_message="Achievements are temporarily unavailable.",
            context={"achievement_id": achievement_id, **(context or {})},
            **kwargs
        )


class AchievementEngineError(PlankCoachError):
    """The engine could not run an evaluation pass at all"""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            user_message="We couldn't refresh your achievements. They'll catch up after your next workout.",
            **kwargs
        )


# ==========================================
# Configuration Errors
# ==========================================

class ConfigurationError(PlankCoachError):
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
) -> PlankCoachError:
    """
    Wrap psycopg errors into our exception hierarchy

    Args:
        error: Original psycopg exception
        operation: What operation was being performed
        user_id: User ID if applicable
        context: Additional context

    Returns:
        Appropriate PlankCoachError subclass

    Example:
        try:
            await cur.execute(query, params)
        except psycopg.Error as e:
            raise wrap_external_exception(
                e,
                operation="get_sessions",
                user_id="user-123",
            )
    """
    import psycopg

    # Unique violations surface as IntegrityError subclasses with sqlstate 23505
    if getattr(error, "sqlstate", None) == UNIQUE_VIOLATION:
        return DuplicateAwardError(
            message=f"Duplicate record rejected: {str(error)}",
            achievement_name=(context or {}).get("achievement_name"),
            user_id=user_id,
            operation=operation,
            cause=error
        )
    elif isinstance(error, psycopg.OperationalError):
        return ConnectionError(
            message=f"Database connection failed: {str(error)}",
            user_id=user_id,
            operation=operation,
            context=context,
            cause=error
        )
    return QueryError(
        message=f"Database query failed: {str(error)}",
        user_id=user_id,
        operation=operation,
        cause=error
    )
