"""Unit tests for configuration."""

import os
from unittest.mock import patch

import pytest

from common.config import Settings, get_settings


def test_settings_loads_from_env_vars():
    """Test that settings load correctly from environment variables."""
    env_vars = {
        "APP_NAME": "test-app",
        "DEBUG": "true",
        "ENVIRONMENT": "testing",
        "CORS_ORIGINS": '["http://example.com"]',
        "COGNITO_USER_POOL_ID": "eu-west-1_TestPool",
        "COGNITO_CLIENT_ID": "test-client-id",
        "COGNITO_REGION": "eu-west-1",
        "COGNITO_DELIVERY_MEDIUM": "SMS",
        "JWKS_CACHE_TTL_SECONDS": "3600",
        "JWKS_FETCH_TIMEOUT_SECONDS": "2.5",
    }
    with patch.dict(os.environ, env_vars, clear=True):
        settings = Settings(_env_file=None)
        assert settings.app_name == "test-app"
        assert settings.debug is True
        assert settings.environment == "testing"
        assert settings.cors_origins == ["http://example.com"]
        assert settings.cognito_user_pool_id == "eu-west-1_TestPool"
        assert settings.cognito_client_id == "test-client-id"
        assert settings.cognito_delivery_medium == "SMS"
        assert settings.jwks_cache_ttl_seconds == 3600
        assert settings.jwks_fetch_timeout_seconds == 2.5


def test_settings_has_sensible_defaults():
    """Test that settings work with defaults when env vars are empty."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)
        assert settings.app_name == "Cognito Gateway"
        assert settings.environment == "development"
        assert settings.cognito_delivery_medium == "EMAIL"
        assert settings.jwks_cache_ttl_seconds == 0


def test_issuer_derived_from_region_and_pool():
    """Test the issuer URL Cognito puts in its tokens."""
    env_vars = {"COGNITO_USER_POOL_ID": "us-east-1_ABCD1234", "COGNITO_REGION": "us-east-1"}
    with patch.dict(os.environ, env_vars, clear=True):
        settings = Settings(_env_file=None)
        assert settings.resolved_cognito_issuer == (
            "https://cognito-idp.us-east-1.amazonaws.com/us-east-1_ABCD1234"
        )
        assert settings.jwks_url == (
            "https://cognito-idp.us-east-1.amazonaws.com/"
            "us-east-1_ABCD1234/.well-known/jwks.json"
        )


def test_cognito_region_falls_back_to_aws_region():
    env_vars = {"COGNITO_USER_POOL_ID": "eu-west-1_Pool", "AWS_REGION": "eu-west-1"}
    with patch.dict(os.environ, env_vars, clear=True):
        settings = Settings(_env_file=None)
        assert settings.resolved_cognito_region == "eu-west-1"
        assert settings.resolved_cognito_issuer.startswith("https://cognito-idp.eu-west-1.")


def test_explicit_issuer_wins():
    """Test that COGNITO_ISSUER overrides the derived issuer."""
    env_vars = {
        "COGNITO_ISSUER": "https://issuer.example.com/pool/",
        "COGNITO_USER_POOL_ID": "us-east-1_Pool",
        "COGNITO_REGION": "us-east-1",
    }
    with patch.dict(os.environ, env_vars, clear=True):
        settings = Settings(_env_file=None)
        assert settings.resolved_cognito_issuer == "https://issuer.example.com/pool"
        assert settings.jwks_url == "https://issuer.example.com/pool/.well-known/jwks.json"


def test_missing_issuer_configuration_raises():
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)
        with pytest.raises(ValueError, match="COGNITO_ISSUER"):
            _ = settings.resolved_cognito_issuer


def test_get_settings_returns_cached_instance():
    """Test that get_settings returns cached instance."""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2
