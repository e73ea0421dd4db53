"""Request logging middleware.

Logs method, path, status code, duration and client address for every
request. Request bodies are never logged since contact messages carry
personal data.
"""

import time
import logging

from fastapi import Request, HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs one line per request."""

    async def dispatch(self, request: Request, call_next):
        """Process the request and log its outcome.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware or endpoint in the chain

        Returns:
            HTTP response
        """
        start_time = time.time()
        client_ip = self._get_client_ip(request)

        try:
            response = await call_next(request)
            process_time = round(time.time() - start_time, 4)
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} "
                f"{process_time}s client={client_ip}"
            )
            return response

        except HTTPException as exc:
            process_time = round(time.time() - start_time, 4)
            logger.error(
                f"{request.method} {request.url.path} {exc.status_code} "
                f"{process_time}s client={client_ip} HTTPException: {exc.detail}"
            )
            raise exc

        except Exception as e:
            process_time = round(time.time() - start_time, 4)
            logger.exception(
                f"{request.method} {request.url.path} 500 "
                f"{process_time}s client={client_ip} Unhandled Exception: {e}"
            )
            # the global exception handler renders the 500 response
            raise

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request.

        Args:
            request: The HTTP request

        Returns:
            Client IP address
        """
        # Check for forwarded headers first (for load balancers/proxies)
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        return request.client.host if request.client else "unknown"
