"""Token router - refresh and validation of Cognito tokens."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.auth.keys import KeyFetchError
from api.auth.verifier import TokenRejectedError, TokenVerifier, get_token_verifier
from api.errors import FALLBACK_RULE, BackendError
from api.schemas.token import NotAuthorizedResponse, RefreshTokenRequest, ValidateTokenRequest
from api.schemas.user import DataResponse, ErrorResponse
from api.services.identity_service import IdentityService, get_identity_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user/token", tags=["Token"])


@router.post(
    "/refresh",
    response_model=DataResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Refresh tokens",
)
def refresh_token(
    request: RefreshTokenRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> DataResponse:
    """Provide a new access token when the current one is about to expire."""
    return DataResponse(data=identity.refresh_token(request.to_params()))


@router.post(
    "/validate",
    responses={
        403: {"model": NotAuthorizedResponse},
        500: {"model": ErrorResponse},
    },
    summary="Validate an access token",
)
def validate_token(
    request: ValidateTokenRequest,
    verifier: TokenVerifier = Depends(get_token_verifier),
):
    """Verify an access token and return its user claims.

    Every rejection gets the same 403 response; the reason is only logged.
    """
    try:
        return verifier.verify(request.AuthParameters.TOKEN)
    except TokenRejectedError:
        return JSONResponse(status_code=403, content=NotAuthorizedResponse().model_dump())
    except KeyFetchError:
        logger.error("Could not load signing keys", exc_info=True)
        classified = FALLBACK_RULE.apply(BackendError(code="KeyFetchError"))
        return JSONResponse(
            status_code=classified.http_status, content=classified.to_response_body()
        )
