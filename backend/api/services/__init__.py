"""API services package."""

from api.services.identity_service import IdentityService, get_identity_service

__all__ = [
    "IdentityService",
    "get_identity_service",
]
