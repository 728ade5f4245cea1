"""
Utility functions.

Functions
---------
equal_to
    Floating point equality to within a number of ULPs
all_equal_to
    Shape-checked array version of equal_to
compare_within_tolerance
    Relative comparison to a number of significant figures
apply_query, apply_inplace
    Elementwise application of record operations over collections
"""

from rt_options.utils.compare import (
    all_equal_to,
    compare_within_tolerance,
    equal_to,
)
from rt_options.utils.elemental import (
    apply_inplace,
    apply_query,
    is_collection,
)

__all__ = [
    "equal_to",
    "all_equal_to",
    "compare_within_tolerance",
    "apply_query",
    "apply_inplace",
    "is_collection",
]
