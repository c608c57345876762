from __future__ import annotations

import logging


logger = logging.getLogger(__name__)


def request_logging_middleware(get_response):
    def middleware(request):
        logger.info("Incoming request: %s %s", request.method, request.get_full_path())
        return get_response(request)

    return middleware
