"""
Spatial, angular and energy distributions for external sources.

Each family is a closed set of frozen dataclasses sharing a ``sample``
method. ``rng`` may be a ``numpy.random.Generator``; when omitted the global
``numpy.random`` state is used.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .document import DocumentNode
from .errors import ConfigError


def _rng(rng):
    return np.random if rng is None else rng


def _as_tuple(values, length: int, what: str) -> Tuple[float, ...]:
    values = tuple(float(v) for v in values)
    if len(values) != length:
        raise ConfigError(f"{what} requires {length} values, got {len(values)}")
    return values


# =============================================================================
# Spatial
# =============================================================================

class SpatialDistribution(ABC):
    @abstractmethod
    def sample(self, rng=None) -> np.ndarray:
        """Return a 3D position."""


@dataclass(frozen=True)
class SpatialPoint(SpatialDistribution):
    """Every particle is born at ``xyz``."""

    xyz: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self):
        object.__setattr__(self, "xyz", _as_tuple(self.xyz, 3, "Point source"))

    def sample(self, rng=None) -> np.ndarray:
        return np.array(self.xyz, dtype=float)

    def describe(self) -> str:
        return "point ({:g}, {:g}, {:g})".format(*self.xyz)


@dataclass(frozen=True)
class SpatialBox(SpatialDistribution):
    """Positions uniform in an axis-aligned box."""

    lower_left: Tuple[float, float, float]
    upper_right: Tuple[float, float, float]

    def __post_init__(self):
        lower = _as_tuple(self.lower_left, 3, "Box lower_left")
        upper = _as_tuple(self.upper_right, 3, "Box upper_right")
        if any(lo > hi for lo, hi in zip(lower, upper)):
            raise ConfigError(f"Box lower_left {lower} is not below upper_right {upper}")
        object.__setattr__(self, "lower_left", lower)
        object.__setattr__(self, "upper_right", upper)

    def sample(self, rng=None) -> np.ndarray:
        lower = np.array(self.lower_left)
        upper = np.array(self.upper_right)
        xi = np.array([_rng(rng).random() for _ in range(3)])
        return lower + xi * (upper - lower)

    def describe(self) -> str:
        return f"box {self.lower_left} - {self.upper_right}"


# =============================================================================
# Angular
# =============================================================================

class AngleDistribution(ABC):
    @abstractmethod
    def sample(self, rng=None) -> np.ndarray:
        """Return a unit direction vector."""


@dataclass(frozen=True)
class Isotropic(AngleDistribution):
    """Directions uniform over the unit sphere."""

    def sample(self, rng=None) -> np.ndarray:
        rng = _rng(rng)
        mu = 2.0 * rng.random() - 1.0
        phi = 2.0 * math.pi * rng.random()
        r_xy = math.sqrt(max(0.0, 1.0 - mu * mu))
        return np.array([r_xy * math.cos(phi), r_xy * math.sin(phi), mu], dtype=float)

    def describe(self) -> str:
        return "isotropic"


@dataclass(frozen=True)
class Monodirectional(AngleDistribution):
    """Every particle travels along ``reference_uvw``."""

    reference_uvw: Tuple[float, float, float]

    def __post_init__(self):
        uvw = np.array(_as_tuple(self.reference_uvw, 3, "Monodirectional reference_uvw"))
        norm = np.linalg.norm(uvw)
        if norm == 0.0:
            raise ConfigError("Monodirectional reference_uvw must be non-zero")
        object.__setattr__(self, "reference_uvw", tuple(float(c) for c in uvw / norm))

    def sample(self, rng=None) -> np.ndarray:
        return np.array(self.reference_uvw, dtype=float)

    def describe(self) -> str:
        return "monodirectional ({:.3g}, {:.3g}, {:.3g})".format(*self.reference_uvw)


# =============================================================================
# Energy
# =============================================================================

class EnergyDistribution(ABC):
    @abstractmethod
    def sample(self, rng=None) -> float:
        """Return a particle energy."""


def _sample_maxwell(theta: float, rng) -> float:
    # 1 - xi keeps the logarithm arguments in (0, 1]
    r1, r2, r3 = 1.0 - rng.random(), 1.0 - rng.random(), rng.random()
    c = math.cos(0.5 * math.pi * r3)
    return -theta * (math.log(r1) + math.log(r2) * c * c)


@dataclass(frozen=True)
class Maxwell(EnergyDistribution):
    """Maxwellian spectrum with nuclear temperature ``theta``."""

    theta: float

    def sample(self, rng=None) -> float:
        return _sample_maxwell(self.theta, _rng(rng))

    def describe(self) -> str:
        return f"maxwell (theta={self.theta:g})"


@dataclass(frozen=True)
class Watt(EnergyDistribution):
    """Watt fission spectrum ``p(E) ~ exp(-E/a) sinh(sqrt(b E))``."""

    a: float
    b: float

    def sample(self, rng=None) -> float:
        rng = _rng(rng)
        w = _sample_maxwell(self.a, rng)
        ab = self.a * self.a * self.b
        return w + 0.25 * ab + (2.0 * rng.random() - 1.0) * math.sqrt(ab * w)

    def describe(self) -> str:
        return f"watt (a={self.a:g}, b={self.b:g})"


@dataclass(frozen=True)
class Uniform(EnergyDistribution):
    a: float
    b: float

    def __post_init__(self):
        if self.a > self.b:
            raise ConfigError(f"Uniform lower bound {self.a} exceeds upper bound {self.b}")

    def sample(self, rng=None) -> float:
        return self.a + _rng(rng).random() * (self.b - self.a)

    def describe(self) -> str:
        return f"uniform [{self.a:g}, {self.b:g}]"


@dataclass(frozen=True)
class Discrete(EnergyDistribution):
    """Discrete energies ``x`` with relative probabilities ``p``."""

    x: Tuple[float, ...]
    p: Tuple[float, ...]

    def __post_init__(self):
        x = tuple(float(v) for v in self.x)
        p = tuple(float(v) for v in self.p)
        if not x or len(x) != len(p):
            raise ConfigError("Discrete distribution needs equal, non-zero numbers of x and p values")
        total = sum(p)
        if total <= 0.0 or any(v < 0.0 for v in p):
            raise ConfigError("Discrete probabilities must be non-negative with a positive sum")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "p", tuple(v / total for v in p))

    def sample(self, rng=None) -> float:
        return self.x[int(_rng(rng).choice(len(self.x), p=self.p))]

    def describe(self) -> str:
        return f"discrete ({len(self.x)} lines)"


@dataclass(frozen=True)
class Tabular(EnergyDistribution):
    """Histogram: ``p[i]`` is the density on ``[x[i], x[i+1])``.

    The last entry of ``p`` is unused.
    """

    x: Tuple[float, ...]
    p: Tuple[float, ...]

    def __post_init__(self):
        x = tuple(float(v) for v in self.x)
        p = tuple(float(v) for v in self.p)
        if len(x) < 2 or len(x) != len(p):
            raise ConfigError("Tabular distribution needs at least two x values and one p per x")
        if any(b <= a for a, b in zip(x, x[1:])):
            raise ConfigError("Tabular x values must be strictly increasing")
        if any(v < 0.0 for v in p) or not any(v > 0.0 for v in p[:-1]):
            raise ConfigError("Tabular p values must be non-negative with at least one positive bin")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "p", p)

    def sample(self, rng=None) -> float:
        rng = _rng(rng)
        x = np.array(self.x)
        widths = np.diff(x) * np.array(self.p[:-1])
        cdf = np.cumsum(widths) / widths.sum()
        i = int(np.searchsorted(cdf, rng.random(), side="right"))
        i = min(i, len(cdf) - 1)
        return float(x[i] + rng.random() * (x[i + 1] - x[i]))

    def describe(self) -> str:
        return f"tabular ({len(self.x)} points)"


# =============================================================================
# Construction from document nodes
# =============================================================================

def _split_pairs(values: list, what: str) -> Tuple[list, list]:
    if len(values) % 2:
        raise ConfigError(f"{what} parameters must be x values followed by the same number of p values")
    n = len(values) // 2
    return values[:n], values[n:]


def spatial_from_node(node: DocumentNode) -> SpatialDistribution:
    kind = node.value("type", strip=True, lower=True) if node.has("type") else "point"
    params = node.array("parameters") if node.has("parameters") else []
    if kind == "point":
        return SpatialPoint(tuple(params) if params else (0.0, 0.0, 0.0))
    if kind == "box":
        if len(params) != 6:
            raise ConfigError(f"Spatial distribution 'box' requires 6 parameters, got {len(params)}")
        return SpatialBox(tuple(params[:3]), tuple(params[3:]))
    raise ConfigError(f"Unknown spatial distribution type: {kind}")


def angle_from_node(node: DocumentNode) -> AngleDistribution:
    kind = node.value("type", strip=True, lower=True) if node.has("type") else "isotropic"
    if kind == "isotropic":
        return Isotropic()
    if kind == "monodirectional":
        if not node.has("reference_uvw"):
            raise ConfigError("Angular distribution 'monodirectional' requires reference_uvw")
        return Monodirectional(tuple(node.array("reference_uvw")))
    raise ConfigError(f"Unknown angular distribution type: {kind}")


def energy_from_node(node: DocumentNode) -> EnergyDistribution:
    if not node.has("type"):
        raise ConfigError("Energy distribution requires a type")
    kind = node.value("type", strip=True, lower=True)
    params = node.array("parameters") if node.has("parameters") else []

    expected: Optional[int] = {"watt": 2, "maxwell": 1, "uniform": 2}.get(kind)
    if expected is not None and len(params) != expected:
        raise ConfigError(
            f"Energy distribution '{kind}' requires {expected} parameters, got {len(params)}"
        )
    if kind == "watt":
        return Watt(*params)
    if kind == "maxwell":
        return Maxwell(*params)
    if kind == "uniform":
        return Uniform(*params)
    if kind == "discrete":
        x, p = _split_pairs(params, "Discrete")
        return Discrete(tuple(x), tuple(p))
    if kind == "tabular":
        x, p = _split_pairs(params, "Tabular")
        return Tabular(tuple(x), tuple(p))
    raise ConfigError(f"Unknown energy distribution type: {kind}")
