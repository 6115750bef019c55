from __future__ import annotations

from enum import Enum


class CheckOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def ok(self) -> bool:
        return self is CheckOutcome.SUCCESS

    def __and__(self, other: object) -> CheckOutcome:
        if not isinstance(other, CheckOutcome):
            return NotImplemented
        if self is CheckOutcome.SUCCESS:
            return other
        return CheckOutcome.FAILURE
