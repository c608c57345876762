"""Last-resort error reporting for the API views."""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler


logger = logging.getLogger(__name__)


def fallback_exception_handler(exc, context):
    """Let DRF render its own exceptions; log anything else as a generic 500."""
    response = exception_handler(exc, context)
    if response is not None:
        return response
    view = context.get("view")
    logger.error("Unhandled error in %s", view.__class__.__name__ if view else "view", exc_info=exc)
    return Response({"error": "Internal Server Error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
