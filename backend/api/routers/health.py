"""Liveness and configuration check for the gateway."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from common.config import APP_VERSION, Settings, get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Gateway status and the user pool it fronts."""

    status: str  # "healthy" or "misconfigured"
    version: str
    environment: str
    user_pool_id: str


@router.get("/health", response_model=HealthResponse)
def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Report whether the gateway knows which user pool to talk to.

    Only local configuration is inspected. Neither Cognito nor the JWKS
    endpoint is contacted, so the check stays usable as a Lambda warm-up ping.
    """
    try:
        issuer = settings.resolved_cognito_issuer
    except ValueError:
        issuer = ""
    configured = bool(issuer and settings.cognito_client_id)

    return HealthResponse(
        status="healthy" if configured else "misconfigured",
        version=APP_VERSION,
        environment=settings.environment,
        user_pool_id=settings.cognito_user_pool_id,
    )
