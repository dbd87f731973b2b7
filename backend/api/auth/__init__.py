"""Authentication module for Cognito access token verification."""

from api.auth.keys import KeyCache, KeyFetchError, get_key_cache
from api.auth.models import INTERNAL_CLAIMS, RejectionReason, SigningKey
from api.auth.verifier import (
    TokenRejectedError,
    TokenVerificationError,
    TokenVerifier,
    get_token_verifier,
)

__all__ = [
    "INTERNAL_CLAIMS",
    "KeyCache",
    "KeyFetchError",
    "RejectionReason",
    "SigningKey",
    "TokenRejectedError",
    "TokenVerificationError",
    "TokenVerifier",
    "get_key_cache",
    "get_token_verifier",
]
