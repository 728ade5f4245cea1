"""
Instrument-specific sub-inputs embedded in the Options record.

- SubInput: Capability protocol the Options record delegates through
- SSUInput: Stratospheric Sounding Unit cell pressure / mission time
- ZeemanInput: Earth magnetic field geometry for Zeeman-split channels
"""

from rt_options.inputs.base import SubInput
from rt_options.inputs.ssu import SSUInput
from rt_options.inputs.zeeman import ZeemanInput

__all__ = [
    "SubInput",
    "SSUInput",
    "ZeemanInput",
]
