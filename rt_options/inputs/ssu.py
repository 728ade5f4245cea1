"""
SSU (Stratospheric Sounding Unit) instrument input.

The SSU measures with a pressure-modulated CO2 cell in front of each of
its three channels. Cell pressure leaked over the mission lifetime, which
shifts the channel weighting functions, so the forward model needs either
the mission time or the actual cell pressures to select the right
transmittance coefficients.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TextIO, Tuple

import numpy as np

from rt_options.core.constants import SSU_MAX_N_CHANNELS, ZERO
from rt_options.utils.compare import all_equal_to, equal_to

logger = logging.getLogger(__name__)


def _default_cell_pressure() -> np.ndarray:
    return np.zeros(SSU_MAX_N_CHANNELS, dtype=np.float64)


@dataclass(eq=False)
class SSUInput:
    """SSU instrument input.

    Attributes:
        time: Mission time as a decimal year (e.g. 1985.5)
        cell_pressure: CO2 cell pressure per channel [hPa]
    """
    time: float = ZERO
    cell_pressure: np.ndarray = field(default_factory=_default_cell_pressure)

    def __post_init__(self):
        cell_pressure = np.array(self.cell_pressure, dtype=np.float64)
        if cell_pressure.shape != (SSU_MAX_N_CHANNELS,):
            raise ValueError(
                f"cell_pressure must have {SSU_MAX_N_CHANNELS} elements, "
                f"got shape {cell_pressure.shape}"
            )
        self.cell_pressure = cell_pressure
        self.time = float(self.time)

    @property
    def n_channels(self) -> int:
        """Number of SSU channels."""
        return SSU_MAX_N_CHANNELS

    def is_valid(self) -> bool:
        """Check mission time and cell pressures are non-negative.

        Each problem found is logged; all checks are always performed.
        """
        valid = True
        if self.time < ZERO:
            logger.info(f"Invalid mission time: {self.time}")
            valid = False
        if np.any(self.cell_pressure < ZERO):
            logger.info(f"Invalid cell pressure: {self.cell_pressure}")
            valid = False
        return valid

    def cell_pressure_is_set(self) -> bool:
        """Whether any cell pressure has been supplied."""
        return bool(np.any(self.cell_pressure > ZERO))

    def get_value(
        self, channel: Optional[int] = None
    ) -> Tuple[float, Optional[float], int]:
        """Get the mission time and, optionally, a channel cell pressure.

        Args:
            channel: 1-based SSU channel number. Out-of-range values
                return ``None`` for the cell pressure.

        Returns:
            Tuple of (time, cell_pressure, n_channels)
        """
        cell_pressure = None
        if channel is not None and self._valid_channel(channel):
            cell_pressure = float(self.cell_pressure[channel - 1])
        return self.time, cell_pressure, self.n_channels

    def set_value(
        self,
        time: Optional[float] = None,
        cell_pressure: Optional[float] = None,
        channel: Optional[int] = None,
    ) -> None:
        """Set the mission time and/or a channel cell pressure.

        A cell pressure is only stored when a valid 1-based channel
        number is also supplied.
        """
        if time is not None:
            self.time = float(time)
        if cell_pressure is not None and channel is not None:
            if self._valid_channel(channel):
                self.cell_pressure[channel - 1] = float(cell_pressure)
            else:
                logger.debug(f"Ignoring cell pressure for invalid SSU channel {channel}")

    @staticmethod
    def _valid_channel(channel: int) -> bool:
        return 1 <= channel <= SSU_MAX_N_CHANNELS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SSUInput):
            return NotImplemented
        return (
            equal_to(self.time, other.time)
            and all_equal_to(self.cell_pressure, other.cell_pressure)
        )

    def inspect(self, stream: Optional[TextIO] = None) -> None:
        """Print the contents of the SSU input."""
        out = stream if stream is not None else sys.stdout
        out.write("  SSU_Input OBJECT\n")
        out.write(f"    Mission time             : {self.time:13.6e}\n")
        out.write("    Channel cell pressure    :")
        for pressure in self.cell_pressure:
            out.write(f" {pressure:13.6e}")
        out.write("\n")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "time": float(self.time),
            "cell_pressure": self.cell_pressure.tolist(),
        }

    @classmethod
    def from_dict(cls, ssu_dict: Dict[str, Any]) -> "SSUInput":
        """Create an SSUInput from a dictionary, defaulting missing keys."""
        return cls(
            time=ssu_dict.get("time", ZERO),
            cell_pressure=ssu_dict.get("cell_pressure", _default_cell_pressure()),
        )
