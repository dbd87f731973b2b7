"""AWS Cognito access token verification."""

import logging
from functools import lru_cache

import jwt

from api.auth.keys import KeyCache, get_key_cache
from api.auth.models import RejectionReason, strip_internal_claims
from common.config import settings

logger = logging.getLogger(__name__)

ACCESS_TOKEN_USE = "access"


class TokenVerificationError(Exception):
    """Base exception for token verification errors."""

    pass


class TokenRejectedError(TokenVerificationError):
    """Token was rejected. The reason is for logs only."""

    def __init__(self, reason: RejectionReason, detail: str = ""):
        super().__init__(f"Token rejected ({reason}){': ' + detail if detail else ''}")
        self.reason = reason
        self.detail = detail


class TokenVerifier:
    """Cognito access token validator.

    Checks run in a fixed order: structure, issuer, token class, key id,
    then signature and expiry. Cheap claim checks reject a token before
    the key cache is ever consulted.
    """

    def __init__(self, issuer: str, key_cache: KeyCache):
        """Initialize the verifier.

        Args:
            issuer: Expected ``iss`` claim, e.g.
                'https://cognito-idp.us-east-1.amazonaws.com/us-east-1_XXXXXXXXX'
            key_cache: Cache resolving key ids to signing keys
        """
        self.issuer = issuer
        self.key_cache = key_cache

    def verify(self, token: str) -> dict:
        """Verify a Cognito access token.

        Args:
            token: JWT access token string

        Returns:
            Verified claims without the token-internal ones

        Raises:
            TokenRejectedError: If any check fails
            KeyFetchError: If the signing keys could not be fetched
        """
        try:
            header = jwt.get_unverified_header(token)
            unverified = jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError as e:
            raise self._reject(RejectionReason.NOT_A_JWT, str(e)) from e

        if unverified.get("iss") != self.issuer:
            raise self._reject(RejectionReason.INVALID_ISSUER, str(unverified.get("iss")))

        if unverified.get("token_use") != ACCESS_TOKEN_USE:
            raise self._reject(RejectionReason.WRONG_TOKEN_CLASS, str(unverified.get("token_use")))

        kid = header.get("kid")
        signing_key = self.key_cache.get_key(kid) if kid else None
        if signing_key is None:
            raise self._reject(RejectionReason.INVALID_KID, str(kid))

        try:
            payload = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256"],
                issuer=self.issuer,
                options={
                    "require": ["exp"],
                    "verify_exp": True,
                    "verify_iss": True,
                    # Cognito access tokens carry client_id instead of aud
                    "verify_aud": False,
                },
            )
        except jwt.PyJWTError as e:
            raise self._reject(RejectionReason.VERIFICATION_FAILED, str(e)) from e

        return strip_internal_claims(payload)

    @staticmethod
    def _reject(reason: RejectionReason, detail: str) -> TokenRejectedError:
        logger.warning("Token rejected", extra={"reason": str(reason), "detail": detail})
        return TokenRejectedError(reason, detail)


@lru_cache
def get_token_verifier() -> TokenVerifier:
    """Get cached token verifier instance.

    Returns:
        TokenVerifier configured from settings
    """
    return TokenVerifier(issuer=settings.resolved_cognito_issuer, key_cache=get_key_cache())
