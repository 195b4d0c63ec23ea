"""
AWS X-Ray tracing for Twilio API calls.

Simple subsegment wrapper for video provisioning observability.
No-op when running outside Lambda (no active X-Ray segment).
"""

import os
from contextlib import contextmanager
from typing import Any

from aws_xray_sdk.core import patch_all, xray_recorder

# Auto-patch supported libraries (boto3, requests, etc.)
if os.environ.get("AWS_LAMBDA_FUNCTION_NAME"):
    patch_all()


@contextmanager
def video_span(operation: str, **annotations: Any):
    """Create an X-Ray subsegment for a Twilio Video operation.

    Gracefully no-ops when no active segment exists (e.g., in tests or local dev).
    """
    with xray_recorder.in_subsegment(f"video.{operation}") as subsegment:
        if subsegment is None:
            yield None
        else:
            subsegment.put_annotation("video_operation", operation)
            for key, value in annotations.items():
                subsegment.put_annotation(key, value)
            yield subsegment


def add_span_metadata(subsegment, **attributes: Any) -> None:
    """Add result metadata to subsegment. No-op if subsegment is None."""
    if subsegment is None:
        return
    for key, value in attributes.items():
        subsegment.put_metadata(key, value)
