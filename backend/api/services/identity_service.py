"""Identity service - thin orchestration over the Cognito user pool API.

Each operation merges fixed pool configuration into the caller's request,
makes exactly one Cognito call and either returns Cognito's result or raises
an IdentityOperationError carrying that operation's classified error.
"""

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from api.errors import BackendError, IdentityOperationError, Operation, get_classifier
from common.config import settings
from common.tracing import add_error_attributes, identity_span

if TYPE_CHECKING:
    from mypy_boto3_cognito_idp import CognitoIdentityProviderClient

logger = logging.getLogger(__name__)

ADMIN_AUTH_FLOW = "ADMIN_NO_SRP_AUTH"
REFRESH_AUTH_FLOW = "REFRESH_TOKEN_AUTH"
NEW_PASSWORD_CHALLENGE = "NEW_PASSWORD_REQUIRED"


@lru_cache
def _get_cognito_client() -> "CognitoIdentityProviderClient":
    """Get cached Cognito Identity Provider client."""
    region = settings.resolved_cognito_region
    if region:
        return boto3.client("cognito-idp", region_name=region)
    return boto3.client("cognito-idp")


class IdentityService:
    """Service for user pool operations backed by AWS Cognito."""

    def __init__(
        self,
        *,
        user_pool_id: str | None = None,
        client_id: str | None = None,
        delivery_medium: str | None = None,
        cognito_client: "CognitoIdentityProviderClient | None" = None,
    ):
        """Initialize the identity service.

        Args:
            user_pool_id: Cognito User Pool ID. Falls back to settings.
            client_id: Cognito App Client ID. Falls back to settings.
            delivery_medium: Medium for admin-created users' welcome message.
            cognito_client: Optional Cognito client (for testing). Uses default if not provided.
        """
        self.user_pool_id = user_pool_id or settings.cognito_user_pool_id
        self.client_id = client_id or settings.cognito_client_id
        self.delivery_medium = delivery_medium or settings.cognito_delivery_medium
        self._cognito = cognito_client or _get_cognito_client()

    def _call(
        self,
        operation: Operation,
        method: Callable[..., dict[str, Any]],
        params: dict[str, Any],
    ) -> dict[str, Any]:
        """Invoke one Cognito API method and classify any failure.

        Args:
            operation: The identity operation being performed.
            method: Bound boto3 client method.
            params: Keyword arguments for the Cognito call.

        Returns:
            Cognito's response without transport metadata.

        Raises:
            IdentityOperationError: If Cognito reported an error or could not be reached.
        """
        with identity_span(operation, username=params.get("Username")) as span:
            try:
                response = method(**params)
            except (ClientError, BotoCoreError) as e:
                backend_error = BackendError.from_botocore_error(e)
                logger.error(
                    "Cognito operation failed",
                    extra={
                        "operation": str(operation),
                        "error_code": backend_error.code,
                        "error": backend_error.message,
                    },
                    exc_info=True,
                )
                classified = get_classifier(operation).classify(backend_error)
                add_error_attributes(span, backend_error.code, classified.http_status)
                raise IdentityOperationError(operation, backend_error, classified) from e

        return {key: value for key, value in response.items() if key != "ResponseMetadata"}

    def create_user(self, request: dict[str, Any]) -> dict[str, Any]:
        """Create a user as an admin; Cognito sends a temporary password."""
        params = {
            **request,
            "UserPoolId": self.user_pool_id,
            "DesiredDeliveryMediums": [self.delivery_medium],
        }
        return self._call(Operation.CREATE_USER, self._cognito.admin_create_user, params)

    def login(self, request: dict[str, Any]) -> dict[str, Any]:
        """Log a user in with username and password.

        Users created by an admin get a NEW_PASSWORD_REQUIRED challenge on
        first login, to be answered with ``confirm_login``. Everyone else
        gets tokens straight away.
        """
        params = {
            **request,
            "AuthFlow": ADMIN_AUTH_FLOW,
            "ClientId": self.client_id,
            "UserPoolId": self.user_pool_id,
        }
        return self._call(Operation.LOGIN, self._cognito.admin_initiate_auth, params)

    def confirm_login(self, request: dict[str, Any]) -> dict[str, Any]:
        """Answer the new-password challenge returned by ``login``."""
        params = {
            **request,
            "ChallengeName": NEW_PASSWORD_CHALLENGE,
            "ClientId": self.client_id,
            "UserPoolId": self.user_pool_id,
        }
        return self._call(
            Operation.CONFIRM_LOGIN, self._cognito.admin_respond_to_auth_challenge, params
        )

    def logout(self, username: str) -> dict[str, Any]:
        """Sign a user out of all devices, invalidating their tokens."""
        params = {"Username": username, "UserPoolId": self.user_pool_id}
        return self._call(Operation.LOGOUT, self._cognito.admin_user_global_sign_out, params)

    def reset_password(self, request: dict[str, Any]) -> dict[str, Any]:
        params = {**request, "UserPoolId": self.user_pool_id}
        return self._call(
            Operation.RESET_PASSWORD, self._cognito.admin_reset_user_password, params
        )

    def update_user(self, request: dict[str, Any]) -> dict[str, Any]:
        """Update user attributes; the email is always marked as verified."""
        attributes = [
            *request.get("UserAttributes", []),
            {"Name": "email_verified", "Value": "true"},
        ]
        params = {**request, "UserAttributes": attributes, "UserPoolId": self.user_pool_id}
        return self._call(
            Operation.UPDATE_USER, self._cognito.admin_update_user_attributes, params
        )

    def forgot_password(self, request: dict[str, Any]) -> dict[str, Any]:
        """Send a password reset confirmation code to the user."""
        params = {**request, "ClientId": self.client_id}
        return self._call(Operation.FORGOT_PASSWORD, self._cognito.forgot_password, params)

    def confirm_new_password(self, request: dict[str, Any]) -> dict[str, Any]:
        """Set a new password using the code sent by ``forgot_password``."""
        params = {**request, "ClientId": self.client_id}
        return self._call(
            Operation.CONFIRM_NEW_PASSWORD, self._cognito.confirm_forgot_password, params
        )

    def sign_up(self, request: dict[str, Any]) -> dict[str, Any]:
        params = {**request, "ClientId": self.client_id}
        return self._call(Operation.SIGN_UP, self._cognito.sign_up, params)

    def confirm_sign_up(self, request: dict[str, Any]) -> dict[str, Any]:
        params = {**request, "ClientId": self.client_id, "ForceAliasCreation": False}
        return self._call(Operation.CONFIRM_SIGN_UP, self._cognito.confirm_sign_up, params)

    def get_user(self, username: str) -> dict[str, Any]:
        params = {"Username": username, "UserPoolId": self.user_pool_id}
        return self._call(Operation.GET_USER, self._cognito.admin_get_user, params)

    def refresh_token(self, request: dict[str, Any]) -> dict[str, Any]:
        """Exchange a refresh token for new access and ID tokens."""
        params = {
            **request,
            "AuthFlow": REFRESH_AUTH_FLOW,
            "ClientId": self.client_id,
            "UserPoolId": self.user_pool_id,
        }
        return self._call(Operation.REFRESH_TOKEN, self._cognito.admin_initiate_auth, params)


_identity_service: IdentityService | None = None


def get_identity_service() -> IdentityService:
    """Get the identity service instance (dependency injection)."""
    global _identity_service
    if _identity_service is None:
        _identity_service = IdentityService()
    return _identity_service
