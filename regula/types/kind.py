from __future__ import annotations

from enum import IntEnum


class Kind(IntEnum):
    """Tag carried by every value class. The integer is the kind's rank in the
    cross-type order, so the enum doubles as the rank table.
    """

    # Scalars
    NULL = 0
    BOOLEAN = 1
    NUMBER = 2
    STRING = 3
    VAR = 4

    # Composites
    REF = 5
    ARRAY = 6
    OBJECT = 7
    SET = 8
    ARRAY_COMPREHENSION = 9
    OBJECT_COMPREHENSION = 10
    SET_COMPREHENSION = 11
    CALL = 12
    ARGS = 13

    # Statements
    EXPR = 100
    SOME_DECL = 101
    EVERY = 102
    WITH = 110
    HEAD = 120
    BODY = 200

    # Module level
    RULE = 1000
    IMPORT = 1001
    PACKAGE = 1002
    ANNOTATIONS = 1003
    MODULE = 10000


# Rank of a missing value; below every kind
ABSENT_RANK = -1
