"""
Options record and its elemental operations.

- Options: Optional per-profile inputs for a radiative transfer call
- associated, create, destroy: Allocation lifecycle
- is_valid: Validity checks with logged diagnostics
- equal: Tolerance-based comparison
- inspect, define_version: Display and version identity
"""

from rt_options.options.record import MODULE_VERSION_ID, Options
from rt_options.options.functions import (
    associated,
    create,
    define_version,
    destroy,
    equal,
    inspect,
    is_valid,
)

__all__ = [
    "Options",
    "MODULE_VERSION_ID",
    "associated",
    "create",
    "destroy",
    "is_valid",
    "equal",
    "inspect",
    "define_version",
]
