"""
Options record for radiative transfer model calls.

The Options record carries the optional, per-profile overrides of default
model behaviour: user supplied surface emissivity and direct reflectivity,
scattering and NLTE switches, the aircraft flight level, the RT solver
stream count, and instrument-specific sub-inputs (SSU, Zeeman). One record
is passed per atmospheric profile alongside the mandatory inputs, so the
forward, tangent-linear, adjoint and K-matrix entry points keep a fixed
signature.

Lifecycle
---------
A record starts unallocated. ``create(n_channels)`` binds the two
per-channel arrays to ``n_channels`` zero-filled elements; ``destroy()``
releases them again. Neither raises: an invalid channel count or a failed
allocation leaves the record as it was, and callers check ``associated()``
if they need to know.

Example
-------
>>> opt = Options()
>>> opt.create(5)
>>> opt.use_emissivity = True
>>> opt.emissivity = [0.9, 0.9, 0.95, 0.95, 0.97]
>>> opt.is_valid()
True
"""

import copy
import logging
import operator
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

import numpy as np

from rt_options.core.constants import (
    DEFAULT_AIRCRAFT_PRESSURE,
    MAX_EMISSIVITY,
    MIN_EMISSIVITY,
    MIN_N_CHANNELS,
    ZERO,
)
from rt_options.inputs.base import SubInput
from rt_options.inputs.ssu import SSUInput
from rt_options.inputs.zeeman import ZeemanInput
from rt_options.utils.compare import all_equal_to, equal_to

logger = logging.getLogger(__name__)

# Version identity of the Options definition
MODULE_VERSION_ID = "rt_options.options.record 0.1.0"


@dataclass(eq=False)
class Options:
    """Optional inputs for a single radiative transfer profile.

    Attributes:
        check_input: Check model inputs before use
        use_old_mw_emissivity_model: Use the old microwave sea surface
            emissivity model instead of the current one
        use_antenna_correction: Apply antenna correction to microwave radiances
        apply_nlte_correction: Apply the non-LTE radiance correction
        aircraft_pressure: Aircraft flight level pressure [hPa]. Any value
            <= 0 switches the aircraft option off.
        include_scattering: Include cloud/aerosol scattering
        channel: Index into the per-channel arrays, managed by the caller
        use_emissivity: Use the user supplied ``emissivity``
        use_direct_reflectivity: Use the user supplied ``direct_reflectivity``
        use_n_streams: Use ``n_streams`` instead of the solver default
        n_streams: Number of RT solver streams (up + down)
        scan_input: SSU instrument input
        zeeman_input: Zeeman-splitting input
    """
    check_input: bool = True
    use_old_mw_emissivity_model: bool = False
    use_antenna_correction: bool = False
    apply_nlte_correction: bool = True
    aircraft_pressure: float = DEFAULT_AIRCRAFT_PRESSURE
    include_scattering: bool = True
    channel: int = 0
    use_emissivity: bool = False
    use_direct_reflectivity: bool = False
    use_n_streams: bool = False
    n_streams: int = 0
    scan_input: SubInput = field(default_factory=SSUInput)
    zeeman_input: SubInput = field(default_factory=ZeemanInput)

    # Allocation state and per-channel storage, managed by create/destroy
    _is_allocated: bool = field(default=False, init=False, repr=False)
    _n_channels: int = field(default=0, init=False, repr=False)
    _emissivity: Optional[np.ndarray] = field(default=None, init=False, repr=False)
    _direct_reflectivity: Optional[np.ndarray] = field(
        default=None, init=False, repr=False
    )

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def is_allocated(self) -> bool:
        """Whether the per-channel arrays are currently allocated."""
        return self._is_allocated

    @property
    def n_channels(self) -> int:
        """Length of the per-channel arrays (0 when unallocated)."""
        return self._n_channels

    @property
    def aircraft_mode(self) -> bool:
        """Whether the aircraft option is switched on."""
        return self.aircraft_pressure > ZERO

    # -------------------------------------------------------------------------
    # Per-channel arrays
    # -------------------------------------------------------------------------

    @property
    def emissivity(self) -> Optional[np.ndarray]:
        """User supplied surface emissivity per channel."""
        return self._emissivity

    @emissivity.setter
    def emissivity(self, values: Sequence[float]) -> None:
        self._assign("emissivity", self._emissivity, values)

    @property
    def direct_reflectivity(self) -> Optional[np.ndarray]:
        """User supplied direct reflectivity per channel."""
        return self._direct_reflectivity

    @direct_reflectivity.setter
    def direct_reflectivity(self, values: Sequence[float]) -> None:
        self._assign("direct_reflectivity", self._direct_reflectivity, values)

    def _assign(self, name: str, storage: Optional[np.ndarray], values) -> None:
        """Copy values into record-owned per-channel storage."""
        if not self._is_allocated:
            raise ValueError(
                f"Cannot assign {name}: Options arrays are not allocated. "
                "Call create(n_channels) first."
            )
        values = np.asarray(values, dtype=np.float64)
        if values.ndim == 0:
            storage[:] = values
            return
        if values.shape != storage.shape:
            raise ValueError(
                f"{name} must have {self._n_channels} elements, got shape {values.shape}"
            )
        storage[:] = values

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def associated(self) -> bool:
        """Test the allocation status of the per-channel arrays."""
        return self._is_allocated

    def create(self, n_channels: int) -> None:
        """Allocate zero-filled per-channel arrays.

        If ``n_channels`` is less than one, or the arrays cannot be
        allocated, the record is left unchanged. Use ``associated()`` to
        confirm success.

        Args:
            n_channels: Number of channels for which there is Options data
        """
        n_channels = operator.index(n_channels)
        if n_channels < MIN_N_CHANNELS:
            logger.debug(f"Options not created: n_channels={n_channels} < {MIN_N_CHANNELS}")
            return

        try:
            emissivity = np.zeros(n_channels, dtype=np.float64)
            direct_reflectivity = np.zeros(n_channels, dtype=np.float64)
        except (MemoryError, ValueError) as e:
            logger.warning(f"Options allocation failed for {n_channels} channels: {e}")
            return

        self._emissivity = emissivity
        self._direct_reflectivity = direct_reflectivity
        self._n_channels = n_channels
        self._is_allocated = True

    def destroy(self) -> None:
        """Release the per-channel arrays.

        Scalar switches and sub-inputs are left as they are. Safe to call
        on an unallocated record.
        """
        self._emissivity = None
        self._direct_reflectivity = None
        self._n_channels = 0
        self._is_allocated = False

    def copy(self) -> "Options":
        """Return an independent copy, duplicating arrays and sub-inputs."""
        return copy.deepcopy(self)

    def __copy__(self) -> "Options":
        return self.copy()

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Perform simple validity checks on the Options record.

        Each problem found is logged at INFO level rather than raised, so
        one call reports everything wrong with the record. A record that
        fails should not be used in a model call.

        Returns:
            True if the record can be used, False otherwise
        """
        valid = True

        if self.use_emissivity or self.use_direct_reflectivity:
            if not self.associated():
                logger.info("Options structure not allocated")
                return False
            if self.use_emissivity and not _in_range(self._emissivity):
                logger.info("Invalid emissivity")
                valid = False
            if self.use_direct_reflectivity and not _in_range(self._direct_reflectivity):
                logger.info("Invalid direct reflectivity")
                valid = False

        valid = self.scan_input.is_valid() and valid
        valid = self.zeeman_input.is_valid() and valid
        return valid

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Test two records for operational equivalence.

        ``include_scattering``, ``use_n_streams`` and ``n_streams`` are not
        compared. Floating point members are compared with ``equal_to``.
        Per-channel arrays are only compared when both records are
        allocated.
        """
        if not isinstance(other, Options):
            return NotImplemented

        is_equal = (
            (self.check_input == other.check_input)
            & (self.use_old_mw_emissivity_model == other.use_old_mw_emissivity_model)
            & (self.use_antenna_correction == other.use_antenna_correction)
            & (self.apply_nlte_correction == other.apply_nlte_correction)
            & equal_to(self.aircraft_pressure, other.aircraft_pressure)
        )

        # Emissivity component
        is_equal &= (
            (self._n_channels == other._n_channels)
            & (self.channel == other.channel)
            & (self.use_emissivity == other.use_emissivity)
            & (self.use_direct_reflectivity == other.use_direct_reflectivity)
            & (self.associated() == other.associated())
        )
        if self.associated() and other.associated():
            is_equal &= (
                all_equal_to(self._emissivity, other._emissivity)
                & all_equal_to(self._direct_reflectivity, other._direct_reflectivity)
            )

        is_equal &= bool(self.scan_input == other.scan_input)
        is_equal &= bool(self.zeeman_input == other.zeeman_input)
        return bool(is_equal)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def inspect(self, stream: Optional[TextIO] = None) -> None:
        """Print the contents of the Options record.

        Args:
            stream: Text stream to write to. Defaults to stdout.
        """
        out = stream if stream is not None else sys.stdout
        out.write(" Options OBJECT\n")
        out.write(f"   Check input flag            : {_flag(self.check_input)}\n")
        out.write(f"   Use old MW emissivity flag  : {_flag(self.use_old_mw_emissivity_model)}\n")
        out.write(f"   Use antenna correction flag : {_flag(self.use_antenna_correction)}\n")
        out.write(f"   Apply NLTE correction flag  : {_flag(self.apply_nlte_correction)}\n")
        out.write(f"   Aircraft pressure altitude  : {self.aircraft_pressure:13.6e}\n")
        out.write(f"   Include scattering flag     : {_flag(self.include_scattering)}\n")
        out.write("   Emissivity component\n")
        out.write(f"     n_Channels                   : {self._n_channels}\n")
        out.write(f"     Channel index                : {self.channel}\n")
        out.write(f"     Use emissivity flag          : {_flag(self.use_emissivity)}\n")
        out.write(f"     Use direct reflectivity flag : {_flag(self.use_direct_reflectivity)}\n")
        if self.use_emissivity and self.associated():
            out.write("     Emissivity :\n")
            _write_values(out, self._emissivity)
        if self.use_direct_reflectivity and self.associated():
            out.write("     Direct reflectivity :\n")
            _write_values(out, self._direct_reflectivity)
        self.scan_input.inspect(out)
        self.zeeman_input.inspect(out)
        out.write(f"     Use n_Streams flag          : {_flag(self.use_n_streams)}\n")
        out.write(f"     n_Streams                   : {self.n_streams}\n")


def _in_range(values: np.ndarray) -> bool:
    return bool(np.all((values >= MIN_EMISSIVITY) & (values <= MAX_EMISSIVITY)))


def _flag(value: bool) -> str:
    return "T" if value else "F"


def _write_values(out: TextIO, values: np.ndarray, per_line: int = 5) -> None:
    for start in range(0, len(values), per_line):
        chunk = values[start:start + per_line]
        out.write("".join(f" {v:13.6e}" for v in chunk) + "\n")
