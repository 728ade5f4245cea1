"""
Elementwise application of single-record operations.

Options records are passed to the model either one at a time or as an
ordered collection with one record per atmospheric profile. The helpers
here apply a single-record operation independently to every element of
such a collection. Lists, tuples and numpy object arrays are treated as
collections; anything else is a single record.
"""

from typing import Any, Callable

import numpy as np


def is_collection(obj: Any) -> bool:
    """Check whether an argument is a collection of records."""
    return isinstance(obj, (list, tuple, np.ndarray))


def as_object_array(obj: Any) -> np.ndarray:
    """
    Wrap a record or collection of records in a numpy object array.

    Records are stored by reference, so in-place operations on the
    array elements mutate the caller's records.
    """
    if isinstance(obj, np.ndarray) and obj.dtype == object:
        return obj
    if is_collection(obj):
        array = np.empty(len(obj), dtype=object)
        for i, item in enumerate(obj):
            array[i] = item
        return array
    array = np.empty((), dtype=object)
    array[()] = obj
    return array


def apply_query(func: Callable[..., bool], *args: Any):
    """
    Apply a boolean query elementwise.

    Collection arguments must have broadcast-compatible shapes; a single
    record is broadcast against a collection.

    Returns
    -------
    bool or ndarray of bool
        A scalar if no argument is a collection.
    """
    if not any(is_collection(arg) for arg in args):
        return bool(func(*args))
    ufunc = np.frompyfunc(func, len(args), 1)
    result = ufunc(*[as_object_array(arg) for arg in args])
    return np.asarray(result, dtype=bool)


def apply_inplace(func: Callable[..., Any], records: Any, *values: Any) -> None:
    """
    Apply a mutating operation elementwise.

    The first argument is the record or record collection; any further
    arguments (e.g. channel counts) may be scalars or per-element
    sequences broadcast against it.
    """
    if not is_collection(records):
        func(records, *values)
        return
    ufunc = np.frompyfunc(func, 1 + len(values), 1)
    ufunc(as_object_array(records), *[np.asarray(value) for value in values])
