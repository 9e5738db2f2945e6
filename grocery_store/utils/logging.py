# grocery_store/utils/logging.py
import json
import logging
import sys
import time
import traceback
import uuid
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from grocery_store.utils.settings import LOG_JSON, LOG_LEVEL

SERVICE_NAME = "grocery-store"

# pola dokladane przez RequestLoggingMiddleware przez extra=
_EXTRA_FIELDS = ("request_id", "user_id", "method", "path", "status_code", "duration_ms")

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    def __init__(self, service_name: str = SERVICE_NAME):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self.service_name,
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
        }

        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_obj[field] = getattr(record, field)

        if record.exc_info:
            log_obj["exception"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(log_obj, default=str)


def setup_logging(level: str = LOG_LEVEL, json_output: bool = LOG_JSON) -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)

    return logging.getLogger(SERVICE_NAME)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Jedna linia logu na request + X-Request-ID w odpowiedzi."""

    def __init__(self, app: ASGIApp, service_name: str = SERVICE_NAME):
        super().__init__(app)
        self.logger = logging.getLogger(f"{service_name}.requests")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration = (time.perf_counter() - start) * 1000
            self._log(request, 500, duration, request_id, exc_info=sys.exc_info())
            raise

        duration = (time.perf_counter() - start) * 1000
        self._log(request, response.status_code, duration, request_id)

        response.headers["X-Request-ID"] = request_id
        return response

    def _log(self, request: Request, status_code: int, duration: float, request_id: str, exc_info=None):
        extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(duration, 2),
            "user_id": request.query_params.get("userId"),
        }
        message = f"{request.method} {request.url.path} -> {status_code} ({extra['duration_ms']} ms)"

        if status_code >= 500:
            self.logger.error(message, extra=extra, exc_info=exc_info)
        elif status_code >= 400:
            self.logger.warning(message, extra=extra)
        else:
            self.logger.info(message, extra=extra)
