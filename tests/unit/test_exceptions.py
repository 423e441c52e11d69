"""Unit tests for custom exception hierarchy"""
import logging
import pytest
import psycopg
from datetime import datetime

from plank_coach.exceptions import (
    PlankCoachError,
    DatabaseError,
    ConnectionError,
    QueryError,
    DuplicateAwardError,
    CatalogValidationError,
    AchievementEngineError,
    ConfigurationError,
    wrap_external_exception,
)


class TestPlankCoachError:
    """Test base exception class"""

    def test_basic_exception(self):
        """Test basic exception creation"""
        error = PlankCoachError("Test error")
        assert error.message == "Test error"
        assert error.user_message == "An error occurred. Please try again."
        assert error.request_id is not None
        assert isinstance(error.timestamp, datetime)
        assert error.timestamp.tzinfo is not None

    def test_exception_with_context(self):
        """Test exception with full context"""
        error = PlankCoachError(
            message="Award failed",
            user_id="user-123",
            operation="insert_earned_achievement",
            context={"achievement_name": "Minute Master"},
            user_message="Could not save your achievement"
        )
        assert error.user_id == "user-123"
        assert error.operation == "insert_earned_achievement"
        assert error.context["achievement_name"] == "Minute Master"
        assert error.user_message == "Could not save your achievement"

    def test_to_dict(self):
        """Test exception serialization"""
        error = PlankCoachError(message="Test error", user_id="user-123")
        error_dict = error.to_dict()
        assert error_dict["error"] == "PlankCoachError"
        assert error_dict["message"] == "Test error"
        assert "request_id" in error_dict
        assert "timestamp" in error_dict

    def test_logs_on_creation(self, caplog):
        """Test errors are logged when created"""
        with caplog.at_level(logging.ERROR, logger="plank_coach.exceptions"):
            PlankCoachError("Something broke", operation="test_op")

        assert "PlankCoachError: Something broke" in caplog.text


class TestDatabaseErrors:
    """Test data store errors"""

    def test_connection_error(self):
        """Test connection error defaults"""
        error = ConnectionError()
        assert isinstance(error, DatabaseError)
        assert "connection" in error.message.lower()
        assert "database" in error.user_message.lower()

    def test_query_error(self):
        """Test query error keeps the query"""
        error = QueryError(message="Query failed", query="SELECT 1")
        assert error.query == "SELECT 1"
        assert error.context["query"] == "SELECT 1"

    def test_duplicate_award_logs_at_info(self, caplog):
        """Test duplicates are not logged as errors"""
        with caplog.at_level(logging.INFO, logger="plank_coach.exceptions"):
            error = DuplicateAwardError("dup", achievement_name="Minute Master", user_id="user-123")

        assert error.achievement_name == "Minute Master"
        assert isinstance(error, DatabaseError)
        assert all(r.levelno == logging.INFO for r in caplog.records)


class TestAchievementErrors:
    """Test achievement-specific errors"""

    def test_catalog_validation_error_merges_context(self):
        """Test catalog errors keep the entry id alongside extra context"""
        error = CatalogValidationError("bad entry", achievement_id="x", context={"errors": ["e"]})
        assert error.achievement_id == "x"
        assert error.context == {"achievement_id": "x", "errors": ["e"]}

    def test_engine_error_user_message(self):
        """Test the generic refresh notice"""
        error = AchievementEngineError("store down")
        assert "couldn't refresh your achievements" in error.user_message

    def test_configuration_error(self):
        """Test configuration error keeps the key"""
        error = ConfigurationError("bad", config_key="DATABASE_URL")
        assert error.config_key == "DATABASE_URL"


class TestWrapExternalException:
    """Test mapping driver errors into the hierarchy"""

    def test_unique_violation(self):
        """Test unique violations become duplicates"""
        original = psycopg.errors.UniqueViolation("duplicate key")
        wrapped = wrap_external_exception(
            original,
            operation="insert_earned_achievement",
            user_id="user-123",
            context={"achievement_name": "Minute Master"}
        )
        assert isinstance(wrapped, DuplicateAwardError)
        assert wrapped.achievement_name == "Minute Master"
        assert wrapped.cause is original

    def test_operational_error(self):
        """Test lost connections become ConnectionError"""
        wrapped = wrap_external_exception(psycopg.OperationalError("gone"), operation="count_sessions")
        assert isinstance(wrapped, ConnectionError)
        assert wrapped.operation == "count_sessions"

    def test_other_driver_error(self):
        """Test other driver errors become QueryError"""
        wrapped = wrap_external_exception(psycopg.ProgrammingError("syntax"), operation="get_sessions")
        assert isinstance(wrapped, QueryError)

    def test_pool_timeout(self):
        """Test pool acquisition timeouts count as lost connections"""
        from psycopg_pool import PoolTimeout

        wrapped = wrap_external_exception(PoolTimeout("no connection"), operation="get_sessions")
        assert isinstance(wrapped, ConnectionError)
