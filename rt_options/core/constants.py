"""
Default values and limits for radiative transfer optional inputs.

All pressures are in hPa unless otherwise noted.
"""

# =============================================================================
# Numeric literals
# =============================================================================

ZERO = 0.0
ONE = 1.0

# =============================================================================
# Options record defaults
# =============================================================================

# Aircraft flight level pressure [hPa]
# Any value <= 0 switches the aircraft option off
DEFAULT_AIRCRAFT_PRESSURE = -ONE

# Smallest channel count for which per-channel arrays are created
MIN_N_CHANNELS = 1

# Physical range for user supplied emissivity/reflectivity
MIN_EMISSIVITY = ZERO
MAX_EMISSIVITY = ONE

# =============================================================================
# Floating point comparison
# =============================================================================

# Number of units in the last place two values may differ by and
# still compare equal
DEFAULT_ULP = 1

# =============================================================================
# SSU (Stratospheric Sounding Unit) instrument input
# =============================================================================

# Number of SSU channels, each with its own CO2 pressure-modulator cell
SSU_MAX_N_CHANNELS = 3

# =============================================================================
# Zeeman-splitting input
# =============================================================================

# Earth magnetic field strength [Gauss]
DEFAULT_FIELD_STRENGTH = 0.3
MIN_FIELD_STRENGTH = 0.15
MAX_FIELD_STRENGTH = 0.70

# Doppler frequency shift due to Earth rotation [kHz]
MAX_DOPPLER_SHIFT = 80.0
