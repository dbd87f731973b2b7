"""Pydantic schemas for user pool requests and responses.

Field names mirror the Cognito API so request bodies pass straight through.
Fields not declared here are accepted and forwarded to Cognito unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CognitoRequest(BaseModel):
    """Base for pass-through request bodies."""

    model_config = ConfigDict(extra="allow")

    def to_params(self) -> dict[str, Any]:
        """Dump to Cognito call parameters, extra fields included."""
        return self.model_dump(exclude_none=True)


class UserAttribute(BaseModel):
    """A name-value pair; custom attributes need a 'custom:' prefix."""

    Name: str = Field(..., min_length=1, examples=["email"])
    Value: str | None = Field(default=None, examples=["john@example.com"])


class CreateUserRequest(CognitoRequest):
    """Admin registration of a new user. An email attribute is required by the pool."""

    Username: str = Field(..., min_length=1, examples=["johnDoe"])
    UserAttributes: list[UserAttribute]


class LoginParameters(CognitoRequest):
    USERNAME: str = Field(..., min_length=1)
    PASSWORD: str = Field(..., min_length=1)


class LoginRequest(CognitoRequest):
    AuthParameters: LoginParameters


class ConfirmLoginRequest(CognitoRequest):
    """Answer to the NEW_PASSWORD_REQUIRED challenge returned by login."""

    ChallengeResponses: dict[str, str] = Field(
        ..., examples=[{"USERNAME": "johnDoe", "NEW_PASSWORD": "N3wPassw0rd!"}]
    )
    Session: str = Field(..., min_length=1)


class UsernameRequest(CognitoRequest):
    """Request identifying a single user (reset and forgot password)."""

    Username: str = Field(..., min_length=1)


class UpdateUserRequest(CognitoRequest):
    Username: str = Field(..., min_length=1)
    UserAttributes: list[UserAttribute]


class ConfirmNewPasswordRequest(CognitoRequest):
    Username: str = Field(..., min_length=1)
    ConfirmationCode: str = Field(..., min_length=1)
    Password: str = Field(..., min_length=1)


class SignUpRequest(CognitoRequest):
    Username: str = Field(..., min_length=1)
    Password: str = Field(..., min_length=1)
    UserAttributes: list[UserAttribute] = Field(default_factory=list)


class ConfirmSignUpRequest(CognitoRequest):
    Username: str = Field(..., min_length=1)
    ConfirmationCode: str = Field(..., min_length=1)


class DataResponse(BaseModel):
    """Success envelope wrapping Cognito's result."""

    data: dict[str, Any]


class ErrorMessage(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Error envelope; ``status`` always equals the HTTP status code."""

    status: int
    data: ErrorMessage
