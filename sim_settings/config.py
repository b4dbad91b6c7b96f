"""
Compiled-in defaults for the simulation settings registry.

This module holds every default value the registry starts from before a
settings document is applied. Users can modify these values to change the
behaviour of a run without touching the loader code.

Example data documents are bundled with the package.
Use `sim_settings.data_paths` to access them:

    from sim_settings.data_paths import get_example_document
"""

from __future__ import annotations

from pathlib import Path

# =============================================================================
# Package Data Paths
# =============================================================================

# Package root directory
_PACKAGE_DIR = Path(__file__).resolve().parent

# Bundled example settings documents
EXAMPLES_DIR = _PACKAGE_DIR / "examples"
DOCUMENT_SUFFIXES = (".xml", ".yaml", ".yml")

# Separator appended to directory-like path fields
PATH_SEPARATOR = "/"

# =============================================================================
# Environment Variables
# =============================================================================

# Both take precedence over the deprecated in-document values
CROSS_SECTIONS_ENV = "OPENMC_CROSS_SECTIONS"
MULTIPOLE_LIBRARY_ENV = "OPENMC_MULTIPOLE_LIBRARY"

# Settings document named in messages when the loaded one has no file name
DEFAULT_SETTINGS_DOCUMENT = "settings.xml"

# Replacement location named in deprecation warnings
MATERIALS_DOCUMENT = "materials.xml"

# =============================================================================
# Temperature Treatment
# =============================================================================

# Default temperature (K) for materials without one
DEFAULT_TEMPERATURE_K = 293.6

# Tolerance (K) when matching a requested temperature to library data
DEFAULT_TEMPERATURE_TOLERANCE_K = 10.0

# 0.0 on both ends means "unbounded"
DEFAULT_TEMPERATURE_RANGE = (0.0, 0.0)

# =============================================================================
# Transport Parameters
# =============================================================================

# Energy cutoff per particle kind: neutron, photon, electron, positron
DEFAULT_ENERGY_CUTOFF = (0.0, 1000.0, 0.0, 0.0)

# Russian roulette parameters
DEFAULT_WEIGHT_CUTOFF = 0.25
DEFAULT_WEIGHT_SURVIVE = 1.0

# Resonance scattering energy window
DEFAULT_RES_SCAT_ENERGY_MIN = 0.01
DEFAULT_RES_SCAT_ENERGY_MAX = 1000.0

# =============================================================================
# External Source
# =============================================================================

# Watt fission spectrum used by the synthesized default source
DEFAULT_WATT_A = 0.988
DEFAULT_WATT_B = 2.249e-6

# Position of the default point source
DEFAULT_SOURCE_ORIGIN = (0.0, 0.0, 0.0)

# Relative strength of a source without a "strength" field
DEFAULT_SOURCE_STRENGTH = 1.0

# =============================================================================
# Output
# =============================================================================

# Messages with a level above this are not printed
DEFAULT_VERBOSITY = 7
MIN_VERBOSITY = 1
MAX_VERBOSITY = 10

# Width used when wrapping long messages
MESSAGE_WIDTH = 79
HEADER_WIDTH = 75
