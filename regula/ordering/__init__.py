from __future__ import annotations

# dispatch first: the comparator modules import it back for recursion
from .dispatch import (
    compare,
    comparator_for,
    ref_compare,
    sort_key,
    sorted_terms,
    term_value_compare,
    var_compare,
)
from .equality import equal, equal_sequences, ref_equal, term_value_equal, value_equal
from .numbers import compare_numbers, parse_number
from .rank import rank, three_way
from .sequences import compare_sequences
from .containers import compare_objects, compare_sets, sets_equal

__all__ = [
    "compare",
    "comparator_for",
    "var_compare",
    "ref_compare",
    "term_value_compare",
    "sort_key",
    "sorted_terms",
    "equal",
    "value_equal",
    "equal_sequences",
    "ref_equal",
    "term_value_equal",
    "compare_numbers",
    "parse_number",
    "rank",
    "three_way",
    "compare_sequences",
    "compare_objects",
    "compare_sets",
    "sets_equal",
]
