"""ASGI middleware shared by every route."""

import logging
import time
import uuid

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = b"x-request-id"


class RequestLoggingMiddleware:
    """Log each HTTP request and tag its response with ``X-Request-ID``."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request_id = str(uuid.uuid4())
        scope["request_id"] = request_id
        method = scope.get("method", "")
        path = scope.get("path", "")
        status_holder = {"status": None}

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_holder["status"] = message.get("status", 0)
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, request_id.encode("utf-8")))
                message["headers"] = headers
            await send(message)

        start = time.perf_counter()
        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            logger.exception(
                "Unhandled exception in request",
                extra={"request_id": request_id, "method": method, "path": path},
            )
            raise
        finally:
            duration = time.perf_counter() - start
            logger.info(
                "%s %s completed",
                method,
                path,
                extra={
                    "request_id": request_id,
                    "method": method,
                    "path": path,
                    "status_code": status_holder["status"],
                    "duration_ms": round(duration * 1000, 2),
                },
            )


__all__ = ["RequestLoggingMiddleware"]
