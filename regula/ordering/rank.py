from __future__ import annotations

import logging
from typing import Any

from regula.errors import RegulaIllegalValue
from regula.types.kind import ABSENT_RANK, Kind
from regula.types.value import Value

logger = logging.getLogger(__name__)


def three_way(a: Any, b: Any) -> int:
    """-1, 0 or 1 for two natively ordered Python objects."""
    return (a > b) - (a < b)


def rank(value: Any) -> int:
    """Position of `value`'s kind in the cross-type order.

    None (a missing value) ranks below everything. Anything that is not a
    tagged Value means the kind set and its callers have drifted apart, which
    is never recoverable.
    """
    if value is None:
        return ABSENT_RANK
    kind = getattr(value, "kind", None) if isinstance(value, Value) else None
    if not isinstance(kind, Kind):
        logger.error("no rank for value of type %s", type(value).__name__)
        raise RegulaIllegalValue(f"Illegal value: {type(value).__name__}")
    return int(kind)
