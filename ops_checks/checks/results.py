from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Status(IntEnum):
    """Plugin status levels. The value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class CheckOutcome:
    status: Status
    message: str = ""

    @classmethod
    def ok(cls, message: str) -> CheckOutcome:
        return cls(Status.OK, message)

    @classmethod
    def critical(cls, message: str) -> CheckOutcome:
        return cls(Status.CRITICAL, message)

    @classmethod
    def unknown(cls, message: str) -> CheckOutcome:
        return cls(Status.UNKNOWN, message)

    @property
    def exit_code(self) -> int:
        return int(self.status)
