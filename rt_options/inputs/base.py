"""
Capability contract for sub-inputs embedded in an Options record.

The Options validator, comparator and inspector delegate to the embedded
sub-inputs through this protocol only, so a new instrument-specific input
can be added without the Options record knowing its internals.
"""

from typing import Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class SubInput(Protocol):
    """
    Contract for an independently valid, comparable and printable input.

    ARCHITECTURAL CONTRACT:
    1.  ``is_valid`` never raises. Problems are reported through logging
        and summarised in the boolean result.
    2.  ``__eq__`` is symmetric and reflexive, and compares floating point
        members to within a tolerance rather than bitwise.
    3.  ``inspect`` is a pure read and never mutates the instance.
    """

    def is_valid(self) -> bool:
        ...

    def inspect(self, stream: Optional[TextIO] = None) -> None:
        ...

    def __eq__(self, other: object) -> bool:
        ...
