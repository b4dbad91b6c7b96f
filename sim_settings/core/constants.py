"""
Enumerated constants shared by the settings registry.
"""

from enum import Enum, IntEnum

from .errors import ConfigError

# Sentinel for "not specified" integer settings
C_NONE = -1

# Debug flag
DEBUG = False


class RunMode(Enum):
    """Kind of run the engine has been asked to perform."""

    FIXED_SOURCE = "fixed source"
    EIGENVALUE = "eigenvalue"
    PLOTTING = "plot"
    PARTICLE_RESTART = "particle restart"
    VOLUME = "volume"

    @classmethod
    def from_token(cls, token: str) -> "RunMode":
        token = token.strip().lower().replace("-", " ").replace("_", " ")
        for mode in cls:
            if mode.value == token or mode.name.lower().replace("_", " ") == token:
                return mode
        raise ConfigError(f"Unknown run mode: {token}")


class ParticleKind(IntEnum):
    """Particle kinds, also the slot order of ``energy_cutoff``."""

    NEUTRON = 0
    PHOTON = 1
    ELECTRON = 2
    POSITRON = 3


class ElectronTreatment(IntEnum):
    LED = 0  # local energy deposition
    TTB = 1  # thick-target bremsstrahlung


class ResScatMethod(IntEnum):
    RVS = 0
    DBRC = 1
    ARES = 2
