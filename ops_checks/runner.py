from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO, TypeVar

from ops_checks.checks.results import CheckOutcome
from ops_checks.formatting import format_outcome

logger = logging.getLogger(__name__)

C = TypeVar("C")

NO_OUTCOME = "Check did not exit! You should call an exit code method."


def evaluate(check: Callable[[C], Optional[CheckOutcome]], cfg: C) -> CheckOutcome:
    """
    Run ``check`` and always come back with an outcome.

    Exceptions escaping the check become UNKNOWN, never a traceback.
    """
    try:
        outcome = check(cfg)
    except Exception as exc:
        logger.debug("check raised", exc_info=True)
        return CheckOutcome.unknown(f"Check failed to run: {exc}")
    if outcome is None:
        return CheckOutcome.unknown(NO_OUTCOME)
    return outcome


def report(check_name: str, outcome: CheckOutcome, out: TextIO | None = None) -> int:
    print(format_outcome(check_name, outcome), file=out or sys.stdout)
    return outcome.exit_code


def run_check(
    check_name: str,
    check: Callable[[C], Optional[CheckOutcome]],
    cfg: C,
    out: TextIO | None = None,
) -> int:
    return report(check_name, evaluate(check, cfg), out=out)
