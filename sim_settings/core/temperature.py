"""
Temperature treatment settings.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from .. import config
from .document import DocumentNode
from .errors import ConfigError


class TemperatureMethod(Enum):
    """How cross sections are selected for a material temperature."""

    NEAREST = "nearest"
    INTERPOLATION = "interpolation"

    @classmethod
    def from_token(cls, token: str) -> "TemperatureMethod":
        """Map a document token to a method.

        The token must already be stripped and lower-cased; there is no
        fallback for unrecognized tokens.

        Raises
        ------
        ConfigError
            If ``token`` is not ``nearest`` or ``interpolation``.
        """
        for method in cls:
            if method.value == token:
                return method
        raise ConfigError(f"Unknown temperature method: {token}")


@dataclass(frozen=True)
class TemperatureSettings:
    """Temperature fields of the settings registry."""

    default: float = config.DEFAULT_TEMPERATURE_K
    method: TemperatureMethod = TemperatureMethod.NEAREST
    tolerance: float = config.DEFAULT_TEMPERATURE_TOLERANCE_K
    multipole: bool = False
    range: Tuple[float, float] = config.DEFAULT_TEMPERATURE_RANGE


def read_temperature_settings(
    root: DocumentNode,
    current: Optional[TemperatureSettings] = None,
) -> TemperatureSettings:
    """Read the temperature fields of a settings document.

    Every field is optional and independent; absent fields keep the value
    from ``current`` (or the compiled default).

    Parameters
    ----------
    root : DocumentNode
        Settings document root.
    current : TemperatureSettings, optional
        Values to start from.

    Returns
    -------
    TemperatureSettings

    Raises
    ------
    ConfigError
        On an unknown ``temperature_method``, a non-numeric value, or a
        ``temperature_range`` that is not an ordered pair.
    """
    result = current if current is not None else TemperatureSettings()

    if root.has("temperature_default"):
        result = replace(result, default=root.value_float("temperature_default"))

    if root.has("temperature_method"):
        token = root.value("temperature_method", strip=True, lower=True)
        result = replace(result, method=TemperatureMethod.from_token(token))

    # No bound check: a negative tolerance simply never matches
    if root.has("temperature_tolerance"):
        result = replace(result, tolerance=root.value_float("temperature_tolerance"))

    if root.has("temperature_multipole"):
        result = replace(result, multipole=root.value_bool("temperature_multipole"))

    if root.has("temperature_range"):
        values = root.array("temperature_range")
        if len(values) != 2:
            raise ConfigError(
                f"temperature_range must have exactly two values, got {len(values)}"
            )
        low, high = values
        if not (math.isfinite(low) and math.isfinite(high)):
            raise ConfigError(
                f"temperature_range bounds must be finite, got {low} and {high}"
            )
        if low > high:
            raise ConfigError(
                f"temperature_range lower bound {low} exceeds upper bound {high}"
            )
        result = replace(result, range=(low, high))

    return result
