"""
Elemental Options operations.

Each function accepts either a single Options record or an ordered
collection of records (list, tuple or numpy object array, one per
atmospheric profile) and applies the single-record operation to every
element independently.
"""

import operator
from typing import Optional, TextIO, Union

import numpy as np

from rt_options.options.record import MODULE_VERSION_ID, Options
from rt_options.utils.elemental import (
    apply_inplace,
    apply_query,
    as_object_array,
    is_collection,
)


def associated(options) -> Union[bool, np.ndarray]:
    """Test the allocation status of Options records.

    Returns:
        bool for a single record, boolean array for a collection
    """
    return apply_query(Options.associated, options)


def create(options, n_channels) -> None:
    """Allocate the per-channel arrays of Options records.

    Args:
        options: Record or collection of records
        n_channels: Channel count, either a scalar applied to every
            record or one value per record. Records given a count < 1
            are left unchanged.
    """
    apply_inplace(Options.create, options, n_channels)


def destroy(options) -> None:
    """Release the per-channel arrays of Options records."""
    apply_inplace(Options.destroy, options)


def is_valid(options: Options) -> bool:
    """Check a single Options record. See ``Options.is_valid``."""
    return options.is_valid()


def equal(x, y) -> Union[bool, np.ndarray]:
    """Compare Options records elementwise.

    A single record is compared against every element of a collection.

    Returns:
        bool when both arguments are single records, boolean array otherwise
    """
    return apply_query(operator.eq, x, y)


def inspect(options, stream: Optional[TextIO] = None) -> None:
    """Print the contents of one or more Options records."""
    if is_collection(options):
        for record in as_object_array(options).flat:
            record.inspect(stream)
    else:
        options.inspect(stream)


def define_version() -> str:
    """Return the version identity of the Options definition."""
    return MODULE_VERSION_ID
