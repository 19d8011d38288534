from __future__ import annotations

import threading
from typing import Any, Callable, TypeVar

import requests
from urllib3.exceptions import ReadTimeoutError

T = TypeVar("T")


class DeadlineExceeded(requests.Timeout):
    """The whole exchange took longer than its deadline."""


def call_with_deadline(fn: Callable[..., T], timeout_s: float, *args: Any) -> T:
    """
    Run ``fn(*args)`` on a daemon thread and wait at most ``timeout_s`` for it.

    The per-phase timeouts of ``requests`` do not cap a slowly trickled body,
    so this bounds connect, headers and body together. On expiry the worker
    is abandoned, not joined; it dies with the process.
    """
    result: dict[str, Any] = {}

    def target() -> None:
        try:
            result["value"] = fn(*args)
        except Exception as exc:
            result["error"] = exc

    t = threading.Thread(target=target, name="check-request", daemon=True)
    t.start()
    t.join(timeout_s)
    if t.is_alive():
        raise DeadlineExceeded(f"no complete response within {timeout_s}s")
    if "error" in result:
        raise result["error"]
    return result["value"]


def is_read_timeout(exc: BaseException) -> bool:
    """
    requests reports a socket read timeout while the body is being consumed as
    ConnectionError(ReadTimeoutError) instead of ReadTimeout.
    """
    seen = 0
    while exc is not None and seen < 8:
        if isinstance(exc, (ReadTimeoutError, requests.Timeout)):
            return True
        if any(isinstance(a, ReadTimeoutError) for a in getattr(exc, "args", ())):
            return True
        exc = exc.__cause__ or exc.__context__
        seen += 1
    return False
