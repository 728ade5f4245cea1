"""
Zeeman-splitting input.

Oxygen lines in the upper atmosphere split under the Earth's magnetic
field, so channels that peak there (e.g. SSMIS upper-atmosphere channels)
need the local field and its geometry relative to the sensor line of
sight.
"""

import logging
import sys
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, TextIO

from rt_options.core.constants import (
    DEFAULT_FIELD_STRENGTH,
    MAX_DOPPLER_SHIFT,
    MAX_FIELD_STRENGTH,
    MIN_FIELD_STRENGTH,
    ONE,
    ZERO,
)
from rt_options.utils.compare import equal_to

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ZeemanInput:
    """Zeeman-splitting input.

    Attributes:
        field_strength: Earth magnetic field strength [Gauss]
        cos_theta_b: Cosine of the angle between the magnetic field and
            the propagation direction
        cos_phi_b: Cosine of the azimuth angle of the magnetic field
            projection relative to the propagation direction
        doppler_shift: Doppler frequency shift caused by Earth rotation [kHz]
    """
    field_strength: float = DEFAULT_FIELD_STRENGTH
    cos_theta_b: float = ZERO
    cos_phi_b: float = ZERO
    doppler_shift: float = ZERO

    def is_valid(self) -> bool:
        """Range-check the field strength, geometry and Doppler shift.

        Each problem found is logged; all checks are always performed.
        """
        valid = True
        if not MIN_FIELD_STRENGTH <= self.field_strength <= MAX_FIELD_STRENGTH:
            logger.info(
                f"Invalid magnetic field strength: {self.field_strength} "
                f"(valid range {MIN_FIELD_STRENGTH}-{MAX_FIELD_STRENGTH} Gauss)"
            )
            valid = False
        if not -ONE <= self.cos_theta_b <= ONE:
            logger.info(f"Invalid cos(ThetaB): {self.cos_theta_b}")
            valid = False
        if not -ONE <= self.cos_phi_b <= ONE:
            logger.info(f"Invalid cos(PhiB): {self.cos_phi_b}")
            valid = False
        if not abs(self.doppler_shift) <= MAX_DOPPLER_SHIFT:
            logger.info(f"Invalid Doppler shift: {self.doppler_shift} kHz")
            valid = False
        return valid

    def get_value(self) -> Dict[str, float]:
        """Return all Zeeman input values keyed by field name."""
        return {f.name: float(getattr(self, f.name)) for f in fields(self)}

    def set_value(self, **values: float) -> None:
        """Update the supplied Zeeman input values.

        Raises:
            TypeError: If an unknown value name is given
        """
        names = {f.name for f in fields(self)}
        unknown = set(values) - names
        if unknown:
            raise TypeError(f"Unknown Zeeman input value(s): {sorted(unknown)}")
        for name, value in values.items():
            setattr(self, name, float(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZeemanInput):
            return NotImplemented
        return all(
            equal_to(getattr(self, f.name), getattr(other, f.name))
            for f in fields(self)
        )

    def inspect(self, stream: Optional[TextIO] = None) -> None:
        """Print the contents of the Zeeman input."""
        out = stream if stream is not None else sys.stdout
        out.write("  Zeeman_Input OBJECT\n")
        out.write(f"    Field strength (Gauss)   : {self.field_strength:13.6e}\n")
        out.write(f"    cos(ThetaB)              : {self.cos_theta_b:13.6e}\n")
        out.write(f"    cos(PhiB)                : {self.cos_phi_b:13.6e}\n")
        out.write(f"    Doppler shift (kHz)      : {self.doppler_shift:13.6e}\n")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return self.get_value()

    @classmethod
    def from_dict(cls, zeeman_dict: Dict[str, Any]) -> "ZeemanInput":
        """Create a ZeemanInput from a dictionary, defaulting missing keys."""
        return cls(
            field_strength=zeeman_dict.get("field_strength", DEFAULT_FIELD_STRENGTH),
            cos_theta_b=zeeman_dict.get("cos_theta_b", ZERO),
            cos_phi_b=zeeman_dict.get("cos_phi_b", ZERO),
            doppler_shift=zeeman_dict.get("doppler_shift", ZERO),
        )
