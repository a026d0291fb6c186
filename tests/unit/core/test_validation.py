r"""Unit tests for configuration validation helpers."""

from __future__ import annotations

import pytest

from decnet.core import validate_base_url, validate_retry_params, validate_timeout

######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.1, 1, 30.0])
def test_validate_timeout_valid(timeout: float) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, 0.0, -1.0])
def test_validate_timeout_invalid(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_timeout(timeout)


###########################################
#     Tests for validate_retry_params     #
###########################################


@pytest.mark.parametrize("max_retries", [0, 1, 10])
def test_validate_retry_params_valid(max_retries: int) -> None:
    validate_retry_params(max_retries=max_retries, base_delay=1.0, max_delay=10.0)


def test_validate_retry_params_negative_max_retries() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 0, got -1"):
        validate_retry_params(max_retries=-1, base_delay=1.0, max_delay=10.0)


def test_validate_retry_params_non_positive_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be > 0, got 0"):
        validate_retry_params(max_retries=3, base_delay=0, max_delay=10.0)


def test_validate_retry_params_non_positive_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must be > 0, got -2.0"):
        validate_retry_params(max_retries=3, base_delay=1.0, max_delay=-2.0)


#######################################
#     Tests for validate_base_url     #
#######################################


def test_validate_base_url_valid() -> None:
    validate_base_url("https://api.example.com")


def test_validate_base_url_empty() -> None:
    with pytest.raises(ValueError, match=r"base_url must not be empty"):
        validate_base_url("")
