"""User router - registration, login and account endpoints.

Every endpoint forwards to one Cognito operation. Failures are raised as
IdentityOperationError and rendered by the handler registered in api.main.
"""

from fastapi import APIRouter, Depends

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
from api.services.identity_service import IdentityService, get_identity_service

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request or business rule violation"},
    429: {"model": ErrorResponse, "description": "Too many attempts"},
    500: {"model": ErrorResponse, "description": "Something went wrong in the server"},
}

router = APIRouter(prefix="/user", tags=["User"], responses=ERROR_RESPONSES)


@router.post("/create", response_model=DataResponse, summary="User registration by an admin")
def create_user(
    request: CreateUserRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    """Create a new user and send a welcome message with a temporary password.

    The user must change the temporary password on first login
    (see ``/user/confirm-login``).
    """
    return DataResponse(data=identity.create_user(request.to_params()))


@router.post("/login", response_model=DataResponse, summary="User login")
def login(
    request: LoginRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    """Log a user in.

    Returns either the tokens or, for admin-created users logging in for
    the first time, a NEW_PASSWORD_REQUIRED challenge and its session.
    """
    return DataResponse(data=identity.login(request.to_params()))


@router.post("/confirm-login", response_model=DataResponse, summary="Complete first login")
def confirm_login(
    request: ConfirmLoginRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    """Answer the new-password challenge and receive tokens."""
    return DataResponse(data=identity.confirm_login(request.to_params()))


@router.get("/logout/{username}", response_model=DataResponse, summary="Global sign out")
def logout(
    username: str,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    """Sign the user out from all devices."""
    return DataResponse(data=identity.logout(username))


@router.post("/reset-password", response_model=DataResponse, summary="Admin password reset")
def reset_password(
    request: UsernameRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    return DataResponse(data=identity.reset_password(request.to_params()))


@router.post("/update", response_model=DataResponse, summary="Update user attributes")
def update_user(
    request: UpdateUserRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    return DataResponse(data=identity.update_user(request.to_params()))


@router.post("/forgot-password", response_model=DataResponse, summary="Start password recovery")
def forgot_password(
    request: UsernameRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    """Send a confirmation code for choosing a new password."""
    return DataResponse(data=identity.forgot_password(request.to_params()))


@router.post(
    "/confirm-new-password", response_model=DataResponse, summary="Finish password recovery"
)
def confirm_new_password(
    request: ConfirmNewPasswordRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    return DataResponse(data=identity.confirm_new_password(request.to_params()))


@router.post("/sign-up", response_model=DataResponse, summary="Self-service registration")
def sign_up(
    request: SignUpRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    return DataResponse(data=identity.sign_up(request.to_params()))


@router.post("/confirm-sign-up", response_model=DataResponse, summary="Confirm registration")
def confirm_sign_up(
    request: ConfirmSignUpRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    return DataResponse(data=identity.confirm_sign_up(request.to_params()))


@router.get("/{username}", response_model=DataResponse, summary="Get user attributes")
def get_user(
    username: str,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    return DataResponse(data=identity.get_user(username))
