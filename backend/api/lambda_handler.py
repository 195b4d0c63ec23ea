"""AWS Lambda handler for FastAPI using Mangum adapter.

This module provides the entry point for AWS Lambda to invoke the token server.
Mangum handles the translation between API Gateway events and ASGI.
"""

import logging

from mangum import Mangum

from api.dependencies import get_issuer_config
from api.main import app

# Configure root logger so application-level INFO messages reach CloudWatch.
# The Lambda runtime leaves the root level at WARNING by default.
logging.getLogger().setLevel(logging.INFO)

# Build the issuer config during init so a malformed deployment
# (e.g. an unexpected DOMAIN_NAME) fails the cold start.
get_issuer_config()

# Create the Lambda handler
handler = Mangum(app, lifespan="off")
