"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.errors import ClassifiedError, IdentityOperationError
from api.routers import health, tokens, users
from common.config import APP_VERSION, settings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Cognito Gateway API",
    description="HTTP gateway in front of an AWS Cognito user pool",
    version=APP_VERSION,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(IdentityOperationError)
async def identity_operation_error_handler(
    request: Request, exc: IdentityOperationError
) -> JSONResponse:
    """Render a classified Cognito error as ``{status, data: {message}}``."""
    return JSONResponse(
        status_code=exc.classified.http_status,
        content=exc.classified.to_response_body(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed bodies with 400 before they reach Cognito."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    logger.info("Rejected malformed request", extra={"path": request.url.path, "errors": messages})
    classified = ClassifiedError(http_status=400, message="; ".join(messages) or "Invalid request")
    return JSONResponse(status_code=400, content=classified.to_response_body())


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(tokens.router)
app.include_router(users.router)
