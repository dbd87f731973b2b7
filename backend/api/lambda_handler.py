"""AWS Lambda handler for FastAPI using Mangum adapter.

This module provides the entry point for AWS Lambda to invoke the FastAPI application.
Mangum handles the translation between API Gateway events and ASGI.
"""

import logging

from mangum import Mangum

from api.main import app

# The Lambda runtime leaves the root logger at WARNING, which would hide
# the INFO records for JWKS fetches and rejected requests.
logging.getLogger().setLevel(logging.INFO)

# Create the Lambda handler
handler = Mangum(app, lifespan="off")
