"""Value types for token verification."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Claims that describe the token itself rather than the user
INTERNAL_CLAIMS = ("token_use", "scope", "iss", "iat", "jti", "client_id")


class RejectionReason(StrEnum):
    """Why a token was rejected. Only ever logged, never returned to callers."""

    NOT_A_JWT = "not-a-jwt"
    INVALID_ISSUER = "invalid-issuer"
    WRONG_TOKEN_CLASS = "wrong-token-class"
    INVALID_KID = "invalid-kid"
    VERIFICATION_FAILED = "verification-failed"


@dataclass(frozen=True)
class SigningKey:
    """A public key from the user pool's JWKS, ready for signature checks."""

    key_id: str
    key_type: str
    key: Any  # cryptography public key produced by PyJWT


def strip_internal_claims(payload: dict) -> dict:
    """Return a copy of a verified payload without token-internal claims.

    Args:
        payload: Decoded JWT claims from a Cognito access token.

    Returns:
        Claims safe to hand back to the caller.
    """
    return {name: value for name, value in payload.items() if name not in INTERNAL_CLAIMS}
