"""Pytest configuration and fixtures.

This module sets up test environment variables BEFORE any application
modules are imported, ensuring Settings validation passes in CI.
"""

import json
import os
import time

# Set test environment variables before any imports that might trigger Settings
# This runs at pytest collection time, before test modules are imported
os.environ.setdefault("APP_NAME", "cognito-gateway-test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("CORS_ORIGINS", '["http://localhost:3000"]')
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("COGNITO_USER_POOL_ID", "us-east-1_TestPool")
os.environ.setdefault("COGNITO_CLIENT_ID", "test-client-id")
os.environ.setdefault("COGNITO_REGION", "us-east-1")

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi.testclient import TestClient
from jwt.algorithms import RSAAlgorithm

TEST_ISSUER = "https://cognito-idp.us-east-1.amazonaws.com/us-east-1_TestPool"


@pytest.fixture(scope="session")
def rsa_private_key():
    """RSA key pair standing in for the user pool's signing key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_private_key():
    """A second key pair that the user pool does not publish."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def public_jwk(private_key, kid: str) -> dict:
    """Build the JWKS entry Cognito would publish for a key."""
    jwk = json.loads(RSAAlgorithm.to_jwk(private_key.public_key()))
    jwk.update({"kid": kid, "alg": "RS256", "use": "sig"})
    return jwk


@pytest.fixture
def jwks_document(rsa_private_key, other_private_key):
    """JWKS document with two keys, as Cognito publishes."""
    return {"keys": [public_jwk(rsa_private_key, "k1"), public_jwk(other_private_key, "k2")]}


@pytest.fixture
def make_token(rsa_private_key):
    """Factory for signed tokens; claims default to a valid access token."""

    def _make_token(kid: str = "k1", private_key=None, **claims) -> str:
        now = int(time.time())
        payload = {
            "sub": "user-123",
            "iss": TEST_ISSUER,
            "token_use": "access",
            "scope": "aws.cognito.signin.user.admin",
            "auth_time": now,
            "iat": now,
            "exp": now + 3600,
            "jti": "jti-123",
            "client_id": "test-client-id",
            "username": "testuser",
        }
        payload.update(claims)
        payload = {name: value for name, value in payload.items() if value is not None}
        return jwt.encode(
            payload,
            private_key or rsa_private_key,
            algorithm="RS256",
            headers={"kid": kid} if kid is not None else None,
        )

    return _make_token


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    # Import here to ensure env vars are set first
    from api.main import app

    with TestClient(app) as test_client:
        yield test_client
