"""API schemas package."""

from api.schemas.token import (
    NotAuthorizedResponse,
    RefreshTokenRequest,
    ValidateTokenRequest,
)
from api.schemas.user import (
    ConfirmLoginRequest,
    ConfirmNewPasswordRequest,
    ConfirmSignUpRequest,
    CreateUserRequest,
    DataResponse,
    ErrorResponse,
    LoginRequest,
    SignUpRequest,
    UpdateUserRequest,
    UsernameRequest,
)

__all__ = [
    "ConfirmLoginRequest",
    "ConfirmNewPasswordRequest",
    "ConfirmSignUpRequest",
    "CreateUserRequest",
    "DataResponse",
    "ErrorResponse",
    "LoginRequest",
    "NotAuthorizedResponse",
    "RefreshTokenRequest",
    "SignUpRequest",
    "UpdateUserRequest",
    "UsernameRequest",
    "ValidateTokenRequest",
]
