"""
External source definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from .. import config
from .distributions import (
    AngleDistribution,
    EnergyDistribution,
    Isotropic,
    SpatialDistribution,
    SpatialPoint,
    Watt,
    angle_from_node,
    energy_from_node,
    spatial_from_node,
)
from .document import DocumentNode
from .errors import ConfigError


@dataclass
class SourceSite:
    """A single sampled source particle."""

    r: np.ndarray  # position
    u: np.ndarray  # unit direction
    E: float  # energy
    wgt: float = 1.0


@dataclass(frozen=True)
class SourceDistribution:
    """Independent spatial, angular and energy distributions of one source."""

    space: SpatialDistribution
    angle: AngleDistribution
    energy: EnergyDistribution
    strength: float = config.DEFAULT_SOURCE_STRENGTH

    @classmethod
    def from_node(cls, node: DocumentNode) -> "SourceDistribution":
        """Build a source from a ``source`` node.

        Missing ``space`` is a point at the origin, missing ``angle`` is
        isotropic and missing ``energy`` is the default Watt spectrum.

        Raises
        ------
        ConfigError
            If any sub-distribution is malformed.
        """
        strength = config.DEFAULT_SOURCE_STRENGTH
        if node.has("strength"):
            strength = node.value_float("strength")
            if strength < 0.0:
                raise ConfigError(f"Source strength must be non-negative, got {strength}")

        space_node = node.child("space")
        angle_node = node.child("angle")
        energy_node = node.child("energy")
        return cls(
            space=spatial_from_node(space_node) if space_node is not None
            else SpatialPoint(config.DEFAULT_SOURCE_ORIGIN),
            angle=angle_from_node(angle_node) if angle_node is not None else Isotropic(),
            energy=energy_from_node(energy_node) if energy_node is not None
            else Watt(config.DEFAULT_WATT_A, config.DEFAULT_WATT_B),
            strength=strength,
        )

    def sample(self, rng=None) -> SourceSite:
        return SourceSite(
            r=self.space.sample(rng),
            u=self.angle.sample(rng),
            E=float(self.energy.sample(rng)),
        )

    def describe(self) -> str:
        return (f"{self.space.describe()}, {self.angle.describe()}, "
                f"{self.energy.describe()}, strength={self.strength:g}")


def default_source() -> SourceDistribution:
    """Isotropic point source at the origin with a Watt fission spectrum."""
    return SourceDistribution(
        space=SpatialPoint(config.DEFAULT_SOURCE_ORIGIN),
        angle=Isotropic(),
        energy=Watt(config.DEFAULT_WATT_A, config.DEFAULT_WATT_B),
    )


def build_external_sources(root: DocumentNode) -> List[SourceDistribution]:
    """Build the external source list of a settings document.

    One source is built per ``source`` node, in document order. If the
    document has none, a single `default_source` is used instead; the default
    is never mixed with document sources.

    Parameters
    ----------
    root : DocumentNode
        Settings document root.

    Returns
    -------
    list[SourceDistribution]
        Non-empty list of sources.
    """
    sources = [SourceDistribution.from_node(node) for node in root.children("source")]

    if not sources:
        sources.append(default_source())
    return sources
