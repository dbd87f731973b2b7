"""
AWS X-Ray tracing for identity provider calls.

Simple subsegment wrapper for Cognito API observability.
No-op when running outside Lambda (no active X-Ray segment).
"""

import os
from contextlib import contextmanager
from typing import Any

from aws_xray_sdk.core import patch_all, xray_recorder

# Auto-patch supported libraries (boto3, httpx, etc.)
if os.environ.get("AWS_LAMBDA_FUNCTION_NAME"):
    patch_all()


@contextmanager
def identity_span(operation: str, **attributes: Any):
    """Create an X-Ray subsegment for a Cognito operation.

    Gracefully no-ops when no active segment exists (e.g., in tests or local dev).
    """
    if not os.environ.get("AWS_LAMBDA_FUNCTION_NAME"):
        yield None
        return

    with xray_recorder.in_subsegment(f"identity.{operation}") as subsegment:
        if subsegment is None:
            yield None
        else:
            subsegment.put_annotation("identity_operation", operation)
            for key, value in attributes.items():
                subsegment.put_metadata(key, value)
            yield subsegment


def add_error_attributes(subsegment, error_code: str, http_status: int) -> None:
    """Annotate a subsegment with a classified backend error. No-op if subsegment is None."""
    if subsegment is None:
        return
    subsegment.put_annotation("error_code", error_code)
    subsegment.put_annotation("http_status", http_status)
