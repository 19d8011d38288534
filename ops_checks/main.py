from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from pydantic import BaseModel, ValidationError

from ops_checks.checks.membership_check import run_membership
from ops_checks.checks.ping_check import run_ping
from ops_checks.checks.results import CheckOutcome, Status
from ops_checks.config import settings
from ops_checks.models import MembershipCheckConfig, PingCheckConfig
from ops_checks.runner import report, run_check

EVENTSTORE_CHECK_NAME = "CheckEventstore"
JENKINS_CHECK_NAME = "CheckJenkins"


class PluginArgumentParser(argparse.ArgumentParser):
    """Usage errors exit UNKNOWN instead of argparse's default status 2 (CRITICAL)."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(int(Status.UNKNOWN), f"{self.prog}: error: {message}\n")


def _add_verbose(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging on stderr"
    )


def build_eventstore_parser() -> argparse.ArgumentParser:
    parser = PluginArgumentParser(
        prog="check-eventstore",
        description="Check that every member reported by a gossip endpoint is alive.",
    )
    parser.add_argument("-u", "--url", required=True, help="gossip URL")
    parser.add_argument(
        "-H", "--header", action="append", default=[], dest="headers",
        help="comma separated Name:Value headers",
    )
    parser.add_argument("-s", "--ssl", action="store_true", help="force SSL")
    parser.add_argument(
        "-k", "--insecure", action="store_true",
        help="skip server certificate verification",
    )
    parser.add_argument("-U", "--username")
    parser.add_argument("-a", "--password")
    parser.add_argument("-c", "--cert", metavar="FILE", help="client certificate (PEM)")
    parser.add_argument("--cert-key", metavar="FILE", help="client certificate key")
    parser.add_argument("-C", "--cacert", metavar="FILE", help="CA bundle")
    parser.add_argument(
        "-t", "--timeout", metavar="SECS", type=int,
        default=settings.OPS_CHECKS_EVENTSTORE_TIMEOUT,
    )
    _add_verbose(parser)
    return parser


def build_jenkins_parser() -> argparse.ArgumentParser:
    parser = PluginArgumentParser(
        prog="check-jenkins",
        description="Check that the Jenkins Metrics ping URL returns pong with 200 OK.",
    )
    parser.add_argument(
        "-s", "--server", default=settings.JENKINS_SERVER, help="Jenkins Host"
    )
    parser.add_argument("-p", "--port", default=settings.JENKINS_PORT, help="Jenkins Port")
    parser.add_argument(
        "-t", "--token", default=settings.JENKINS_METRICS_TOKEN, help="Metrics token"
    )
    _add_verbose(parser)
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.getLevelName(settings.OPS_CHECKS_LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run(
    check_name: str,
    build_config: Callable[[], BaseModel],
    check: Callable,
) -> int:
    try:
        cfg = build_config()
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        return report(check_name, CheckOutcome.unknown(f"invalid configuration: {errors}"))
    return run_check(check_name, check, cfg)


def eventstore_main(argv: Sequence[str] | None = None) -> int:
    args = build_eventstore_parser().parse_args(argv)
    _configure_logging(args.verbose)

    def build() -> MembershipCheckConfig:
        return MembershipCheckConfig(
            url=args.url,
            headers=args.headers,
            ssl=args.ssl,
            insecure=args.insecure,
            username=args.username,
            password=args.password,
            cert=args.cert,
            cert_key=args.cert_key,
            cacert=args.cacert,
            timeout=args.timeout,
        )

    return _run(EVENTSTORE_CHECK_NAME, build, run_membership)


def jenkins_main(argv: Sequence[str] | None = None) -> int:
    args = build_jenkins_parser().parse_args(argv)
    _configure_logging(args.verbose)

    def build() -> PingCheckConfig:
        return PingCheckConfig(server=args.server, port=args.port, token=args.token)

    return _run(JENKINS_CHECK_NAME, build, run_ping)
