"""
Request context middleware.

Assigns a correlation ID to every request, binds it (and the user id once
known) into structlog's context variables, echoes it back in the
``X-Request-ID`` response header and flags slow requests.
"""

import time
import logging
from typing import Callable

import structlog
from django.conf import settings
from django.http import HttpRequest, HttpResponse

from ..logging.structured import setup_request_logging, get_client_ip

logger = logging.getLogger('performance')


class RequestContextMiddleware:
    """
    Middleware to attach correlation IDs and time each request.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response
        self.slow_request_threshold = getattr(
            settings, 'MONITORING_SLOW_REQUEST_THRESHOLD_MS', 1000)

    def __call__(self, request: HttpRequest) -> HttpResponse:
        correlation_id = setup_request_logging(request)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=correlation_id,
            request_path=request.path,
            request_method=request.method,
        )

        start_time = time.perf_counter()
        try:
            response = self.get_response(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response_time_ms = (time.perf_counter() - start_time) * 1000
        response['X-Request-ID'] = correlation_id

        if response_time_ms > self.slow_request_threshold:
            user = getattr(request, 'user', None)
            logger.warning(
                f"Slow request: {request.method} {request.path} took {response_time_ms:.2f}ms",
                extra={
                    'correlation_id': correlation_id,
                    'request_path': request.path,
                    'request_method': request.method,
                    'status_code': response.status_code,
                    'duration_ms': round(response_time_ms, 2),
                    'user_id': str(user.id) if user is not None and user.is_authenticated else None,
                    'ip_address': get_client_ip(request),
                },
            )

        if settings.DEBUG:
            response['X-Response-Time'] = f"{response_time_ms:.2f}ms"

        return response
