# Total ordering and equality over the values and syntax-tree nodes of a
# declarative rule language.
#
# Naming guidance:
# - Value:      a tagged node of the value model (regula.types), scalars through modules.
# - Term:       a wrapper owning exactly one Value.
# - Comparable: anything the comparators accept: a Value, a Term, or None for a
#               missing value. Defined before the submodule imports below because
#               the ordering modules import it from here.

import logging
from typing import Any

Comparable = Any

from regula.errors import (  # noqa: E402
    RegulaError,
    RegulaIllegalNumber,
    RegulaIllegalValue,
    RegulaTypeError,
)
from regula.types import *  # noqa: E402,F401,F403
from regula.ordering import (  # noqa: E402
    compare,
    equal,
    rank,
    ref_compare,
    ref_equal,
    sort_key,
    sorted_terms,
    term_value_compare,
    term_value_equal,
    value_equal,
    var_compare,
)
from regula.config import apply_recursion_limit, configure_logging  # noqa: E402

logging.getLogger(__name__).addHandler(logging.NullHandler())

apply_recursion_limit()
configure_logging()
