"""Request logging hooks for httpx: log method, path, status_code, duration_ms for every TfL response."""
import logging
import time
import weakref
from collections.abc import Callable

import httpx

logger = logging.getLogger(__name__)


def status_bucket(status_code: int) -> str:
    if 200 <= status_code < 300:
        return "2xx"
    if 400 <= status_code < 500:
        return "4xx"
    if status_code >= 500:
        return "5xx"
    return "other"


def make_event_hooks(log: logging.Logger | None = None) -> dict[str, list[Callable]]:
    """
    Build httpx event_hooks writing one line per response to log (module logger by default).
    Only the path is logged; the query string carries credentials.
    """
    log = log or logger
    started: weakref.WeakKeyDictionary[httpx.Request, float] = weakref.WeakKeyDictionary()

    def mark_start(request: httpx.Request) -> None:
        started[request] = time.perf_counter()

    def log_response(response: httpx.Response) -> None:
        request = response.request
        start = started.pop(request, None)
        duration_ms = (time.perf_counter() - start) * 1000 if start is not None else 0.0
        bucket = status_bucket(response.status_code)
        level = logging.INFO if bucket == "2xx" else logging.WARNING
        log.log(
            level,
            "telemetry tfl_response method=%s path=%s status=%s bucket=%s duration_ms=%.1f",
            request.method,
            request.url.path,
            response.status_code,
            bucket,
            duration_ms,
        )

    return {"request": [mark_start], "response": [log_response]}
