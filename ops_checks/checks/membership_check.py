from __future__ import annotations

import logging
from typing import Any

import requests
from requests.auth import HTTPBasicAuth

from ops_checks.checks.deadline import call_with_deadline, is_read_timeout
from ops_checks.checks.results import CheckOutcome
from ops_checks.models import MembershipCheckConfig

logger = logging.getLogger(__name__)


class MembershipError(RuntimeError):
    pass


def parse_headers(headers: list[str]) -> dict[str, str]:
    """
    Turn ``["Name:Value,Other: value", ...]`` into a header dict.

    Every entry is split on commas, then each pair on its first colon only.
    """
    out: dict[str, str] = {}
    for raw in headers:
        for pair in raw.split(","):
            name, sep, value = pair.partition(":")
            if not sep:
                raise ValueError(f"malformed header {pair!r}, expected Name:Value")
            out[name.strip()] = value.strip()
    return out


def build_request_kwargs(cfg: MembershipCheckConfig) -> dict[str, Any]:
    kwargs: dict[str, Any] = {
        "headers": parse_headers(cfg.headers),
        "timeout": (cfg.timeout, cfg.timeout),
    }

    if cfg.has_auth:
        kwargs["auth"] = HTTPBasicAuth(cfg.username or "", cfg.password or "")

    if cfg.use_tls:
        if cfg.cert:
            # Without a separate key file the certificate file is the key source.
            kwargs["cert"] = (cfg.cert, cfg.cert_key or cfg.cert)
        if cfg.insecure:
            kwargs["verify"] = False
        elif cfg.cacert:
            kwargs["verify"] = cfg.cacert

    return kwargs


def check_members(payload: Any) -> CheckOutcome:
    if not isinstance(payload, dict) or "members" not in payload:
        raise MembershipError("could not find key: members")

    nodes = 0
    for member in payload["members"]:
        nodes += 1
        if "isAlive" not in member:
            raise MembershipError("could not find key: isAlive")
        if member["isAlive"] is False or member["isAlive"] is None:
            raise MembershipError(
                f"Member {member.get('internalTcpIp')} with role "
                f"{member.get('state')} is not Alive"
            )

    return CheckOutcome.ok(f"{nodes} nodes alive in the cluster.")


def _acquire(cfg: MembershipCheckConfig) -> CheckOutcome:
    kwargs = build_request_kwargs(cfg)
    url = cfg.request_url
    logger.debug("GET %s (timeout=%ss, tls=%s)", url, cfg.timeout, cfg.use_tls)

    resp = requests.get(url, **kwargs)

    if not 200 <= resp.status_code < 300:
        return CheckOutcome.critical(str(resp.status_code))

    try:
        payload = resp.json()
    except ValueError:
        return CheckOutcome.critical("invalid JSON from request")

    try:
        return check_members(payload)
    except MembershipError as exc:
        return CheckOutcome.critical(str(exc))


def _timed_out(cfg: MembershipCheckConfig) -> CheckOutcome:
    logger.warning("request to %s timed out after %ss", cfg.request_url, cfg.timeout)
    return CheckOutcome.critical("Connection timed out")


def run_membership(cfg: MembershipCheckConfig) -> CheckOutcome:
    try:
        return call_with_deadline(_acquire, cfg.timeout, cfg)
    except requests.Timeout:
        return _timed_out(cfg)
    except Exception as exc:
        if is_read_timeout(exc):
            return _timed_out(cfg)
        # Anything unmapped still has to end up as a single CRITICAL line.
        logger.warning("membership check failed: %s: %s", exc.__class__.__name__, exc)
        return CheckOutcome.critical(f"Connection error: {exc}")
