from __future__ import annotations

import logging

import requests

from ops_checks.checks.deadline import call_with_deadline, is_read_timeout
from ops_checks.checks.results import CheckOutcome
from ops_checks.models import PING_TIMEOUT_SECONDS, PingCheckConfig

logger = logging.getLogger(__name__)

UP = "Jenkins Service is up"
NOT_RESPONDING = "Jenkins Service is not responding"
TIMED_OUT = "Jenkins Service Connection timed out"


def _get(url: str, timeout_s: float) -> requests.Response:
    return requests.get(url, timeout=timeout_s)


def run_ping(cfg: PingCheckConfig) -> CheckOutcome:
    url = cfg.ping_url
    timeout_s = PING_TIMEOUT_SECONDS
    logger.debug("GET %s (timeout=%ss)", url, timeout_s)
    try:
        r = call_with_deadline(_get, timeout_s, url, timeout_s)
    except requests.Timeout:
        # ConnectTimeout is also a ConnectionError, so this branch goes first.
        return CheckOutcome.critical(TIMED_OUT)
    except requests.ConnectionError as exc:
        if is_read_timeout(exc):
            return CheckOutcome.critical(TIMED_OUT)
        logger.warning("connection to %s failed: %s", url, exc)
        return CheckOutcome.critical(NOT_RESPONDING)

    if r.status_code == 200 and "pong" in r.text:
        return CheckOutcome.ok(UP)

    logger.warning("unexpected ping response: HTTP %s", r.status_code)
    return CheckOutcome.critical(NOT_RESPONDING)
