"""Pytest configuration for smoke tests against a deployed gateway."""

import os

import pytest


def pytest_addoption(parser):
    """Add the gateway URL and an optional real access token."""
    parser.addoption(
        "--api-url",
        action="store",
        default=os.getenv("API_ENDPOINT", "http://localhost:8000"),
        help="Base URL of the deployed gateway (API Gateway stage or local uvicorn)",
    )
    parser.addoption(
        "--access-token",
        action="store",
        default=os.getenv("SMOKE_ACCESS_TOKEN", ""),
        help="Access token issued by the gateway's user pool",
    )


@pytest.fixture
def api_url(request) -> str:
    return request.config.getoption("--api-url").rstrip("/")


@pytest.fixture
def access_token(request) -> str:
    """Real access token, or skip when none was supplied."""
    token = request.config.getoption("--access-token")
    if not token:
        pytest.skip("no access token supplied (--access-token or SMOKE_ACCESS_TOKEN)")
    return token
