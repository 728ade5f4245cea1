"""
rt-options: Optional inputs for atmospheric radiative transfer calls.

The Options record lets a caller override default model behaviour for a
single profile (surface emissivity, scattering, RT solver streams,
aircraft flight level, instrument-specific inputs) without changing the
forward, adjoint or K-matrix model signatures.

Modules
-------
options
    The Options record and its elemental lifecycle, validation and
    comparison operations
inputs
    Instrument-specific sub-inputs (SSU, Zeeman)
config
    JSON/YAML options files
utils
    Floating point comparison and elementwise helpers
"""

__version__ = "0.1.0"
__author__ = "rt-options Contributors"

from rt_options.inputs import SSUInput, SubInput, ZeemanInput
from rt_options.options import (
    Options,
    associated,
    create,
    define_version,
    destroy,
    equal,
    inspect,
    is_valid,
)

__all__ = [
    "__version__",
    "Options",
    "SSUInput",
    "ZeemanInput",
    "SubInput",
    "associated",
    "create",
    "destroy",
    "is_valid",
    "equal",
    "inspect",
    "define_version",
]
