from __future__ import annotations

from ops_checks.checks.results import CheckOutcome


def format_outcome(check_name: str, outcome: CheckOutcome) -> str:
    line = f"{check_name} {outcome.status.name}"
    if outcome.message:
        line = f"{line}: {outcome.message}"
    # The agent reads a single line.
    return " ".join(line.splitlines())
