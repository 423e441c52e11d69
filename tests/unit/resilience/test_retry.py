"""Unit tests for retry logic"""
import asyncio
import pytest
from unittest.mock import AsyncMock, patch

from plank_coach.exceptions import ConnectionError, DuplicateAwardError, QueryError
from plank_coach.resilience.retry import (
    retry_with_backoff,
    is_retryable_error,
    calculate_backoff,
    MAX_DELAY,
)


def test_is_retryable_error_transient():
    """Test that connection failures and timeouts are retryable"""
    assert is_retryable_error(ConnectionError("reset")) == True
    assert is_retryable_error(asyncio.TimeoutError()) == True
    assert is_retryable_error(TimeoutError()) == True


def test_is_retryable_error_non_retryable():
    """Test that query errors and duplicates are not retried"""
    assert is_retryable_error(QueryError("bad sql")) == False
    assert is_retryable_error(DuplicateAwardError("dup", achievement_name="X")) == False
    assert is_retryable_error(ValueError("Bad value")) == False


def test_calculate_backoff():
    """Test exponential backoff calculation"""
    delay_0 = calculate_backoff(0)
    assert 0.18 <= delay_0 <= 0.22  # 0.2s ± 10% jitter

    delay_1 = calculate_backoff(1)
    assert 0.36 <= delay_1 <= 0.44

    delay_2 = calculate_backoff(2)
    assert 0.72 <= delay_2 <= 0.88


def test_calculate_backoff_max_delay():
    """Test that backoff respects max delay"""
    delay = calculate_backoff(20)
    assert delay <= MAX_DELAY * 1.1


@pytest.mark.asyncio
async def test_retry_with_backoff_success_first_try():
    """Test that function succeeds on first try"""
    func = AsyncMock(return_value="success")

    result = await retry_with_backoff(func, "arg", max_retries=3)

    assert result == "success"
    func.assert_awaited_once_with("arg")


@pytest.mark.asyncio
async def test_retry_with_backoff_success_after_retries():
    """Test that function succeeds after some retries"""
    attempt = 0

    async def flaky_function():
        nonlocal attempt
        attempt += 1
        if attempt < 3:
            raise ConnectionError("Simulated drop")
        return "success"

    with patch('plank_coach.resilience.retry.asyncio.sleep', AsyncMock()) as mock_sleep:
        result = await retry_with_backoff(flaky_function, max_retries=3)

    assert result == "success"
    assert attempt == 3
    assert mock_sleep.await_count == 2


@pytest.mark.asyncio
async def test_retry_with_backoff_exhausted():
    """Test that retries are exhausted for persistent failures"""
    func = AsyncMock(side_effect=ConnectionError("down"))

    with patch('plank_coach.resilience.retry.asyncio.sleep', AsyncMock()):
        with pytest.raises(ConnectionError):
            await retry_with_backoff(func, max_retries=2)

    assert func.await_count == 3


@pytest.mark.asyncio
async def test_retry_with_backoff_non_retryable_raises_immediately():
    """Test that non-retryable errors are not retried"""
    func = AsyncMock(side_effect=QueryError("bad sql"))

    with pytest.raises(QueryError):
        await retry_with_backoff(func, max_retries=3)

    assert func.await_count == 1


@pytest.mark.asyncio
async def test_retry_with_zero_retries():
    """Test max_retries=0 makes a single attempt"""
    func = AsyncMock(side_effect=ConnectionError("down"))

    with pytest.raises(ConnectionError):
        await retry_with_backoff(func, max_retries=0)

    assert func.await_count == 1

