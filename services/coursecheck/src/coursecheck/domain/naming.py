from __future__ import annotations

import logging

from coursecheck.domain.diagnostics import Diagnostics
from coursecheck.domain.outcome import CheckOutcome

logger = logging.getLogger(__name__)

LAB_NAMES = (
    "lab01",
    "lab02",
    "lab03",
    "lab04",
    "lab05",
    "lab06",
    "lab07",
    "project",
)


def validate_lab_name(diagnostics: Diagnostics, name: str) -> CheckOutcome:
    if name in LAB_NAMES:
        return CheckOutcome.SUCCESS
    logger.debug("rejected lab name %r", name)
    return diagnostics.add(
        f"`{name}` is not an expected lab name",
        help=f"expected one of: {', '.join(LAB_NAMES)}",
        code="LAB_NAME_INVALID",
    )
