"""Batch gate for patch lists."""

from __future__ import annotations

import logging
from typing import Sequence

from ..exceptions import LengthMismatchError
from .models import Patch

logger = logging.getLogger(__name__)


def validate(patches: Sequence[Patch]) -> None:
    """Check that every replacement keeps its byte count.

    Patches and their replacements are walked in order and the first
    mismatch aborts the whole batch.

    Raises:
        LengthMismatchError: for the first replacement whose before and
            after sequences differ in length
    """
    for patch in patches:
        for replacement in patch.replacements:
            if len(replacement.before) != len(replacement.after):
                raise LengthMismatchError(
                    replacement.addr,
                    patch.title,
                    len(replacement.before),
                    len(replacement.after),
                )
    logger.debug("Validated %d patch(es)", len(patches))
