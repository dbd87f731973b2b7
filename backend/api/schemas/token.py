"""Pydantic schemas for token refresh and validation."""

from pydantic import BaseModel, Field

from api.schemas.user import CognitoRequest


class RefreshTokenParameters(CognitoRequest):
    REFRESH_TOKEN: str = Field(..., min_length=1)


class RefreshTokenRequest(CognitoRequest):
    """Request for new tokens when the access token is about to expire."""

    AuthParameters: RefreshTokenParameters


class ValidateTokenParameters(BaseModel):
    TOKEN: str


class ValidateTokenRequest(BaseModel):
    """Request to validate a Cognito access token."""

    AuthParameters: ValidateTokenParameters


class NotAuthorizedResponse(BaseModel):
    """Uniform response for every rejected token."""

    message: str = "Not authorized"
