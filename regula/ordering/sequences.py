from __future__ import annotations

from typing import Sequence

from regula import Comparable
from regula.ordering import dispatch
from regula.ordering.rank import three_way


def compare_sequences(a: Sequence[Comparable], b: Sequence[Comparable]) -> int:
    """Lexicographic comparison; on a common prefix the shorter one is less.

    Shared by Ref, Array, Call, Args, Body and every list-valued field of the
    statement and module nodes.
    """
    for x, y in zip(a, b):
        cmp = dispatch.compare(x, y)
        if cmp != 0:
            return cmp
    return three_way(len(a), len(b))
