"""
Deprecated settings fields and data-library path precedence.

``cross_sections`` and ``multipole_library`` used to be set in the settings
document. They now belong in the materials document or in an environment
variable; the settings values still work, but only as the lowest-precedence
fallback:

    materials document > environment variable > settings document > default
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from .. import config
from ..data_paths import ensure_trailing_separator
from .constants import RunMode
from .document import DocumentNode
from .output import warning


@dataclass(frozen=True)
class LegacyPaths:
    """Library paths taken from deprecated settings fields ("" when unset)."""

    cross_sections: str = ""
    multipole: str = ""


def _deprecation_message(field: str, env_var: str, document: str) -> str:
    return (
        f"Setting {field} in {document} has been deprecated. The {field} is "
        f"now set in {config.MATERIALS_DOCUMENT} and the {field} input to "
        f"{config.MATERIALS_DOCUMENT} and the {env_var} environment variable "
        f"will take precedence over setting {field} in {document}."
    )


def read_deprecated_paths(
    root: DocumentNode,
    run_mode: RunMode,
    current: Optional[LegacyPaths] = None,
) -> LegacyPaths:
    """Read the deprecated library paths of a settings document.

    A warning is printed for each deprecated field found. The
    ``cross_sections`` value is stored as given; the ``multipole_library``
    value gets a trailing separator. Plotting runs never need nuclear data,
    so ``multipole_library`` is ignored entirely in that mode.

    Parameters
    ----------
    root : DocumentNode
        Settings document root.
    run_mode : RunMode
        Mode of the current run.
    current : LegacyPaths, optional
        Values to start from.

    Returns
    -------
    LegacyPaths
    """
    document = root.name or config.DEFAULT_SETTINGS_DOCUMENT
    cross_sections = current.cross_sections if current else ""
    multipole = current.multipole if current else ""

    if root.has("cross_sections"):
        warning(_deprecation_message("cross_sections", config.CROSS_SECTIONS_ENV, document))
        cross_sections = root.value("cross_sections")

    if run_mode is not RunMode.PLOTTING:
        if root.has("multipole_library"):
            warning(_deprecation_message("multipole_library", config.MULTIPOLE_LIBRARY_ENV, document))
            multipole = root.value("multipole_library")
        if multipole:
            multipole = ensure_trailing_separator(multipole)

    return LegacyPaths(cross_sections=cross_sections, multipole=multipole)


# =============================================================================
# Precedence
# =============================================================================

@dataclass(frozen=True)
class PathCandidate:
    """A candidate value for a library path and where it came from."""

    origin: str
    value: Optional[str]

    @property
    def present(self) -> bool:
        return bool(self.value)


def resolve_first_present(candidates: Iterable[PathCandidate]) -> Optional[PathCandidate]:
    """Return the first candidate with a non-empty value, or None."""
    for candidate in candidates:
        if candidate.present:
            return candidate
    return None


def _candidates(
    field: str,
    env_var: str,
    legacy_value: str,
    settings_document: str,
    materials: Optional[DocumentNode],
    environ: Optional[Mapping[str, str]],
    default: str,
) -> List[PathCandidate]:
    if environ is None:
        environ = os.environ
    materials_value = None
    if materials is not None and materials.has(field):
        materials_value = materials.value(field, strip=True)
    return [
        PathCandidate(config.MATERIALS_DOCUMENT, materials_value),
        PathCandidate(env_var, environ.get(env_var)),
        PathCandidate(settings_document, legacy_value),
        PathCandidate("default", default),
    ]


def cross_sections_candidates(settings, materials=None, environ=None, default=""):
    """Ordered candidates for the cross sections path, highest precedence first."""
    return _candidates("cross_sections", config.CROSS_SECTIONS_ENV,
                       settings.path_cross_sections, settings.settings_document,
                       materials, environ, default)


def multipole_candidates(settings, materials=None, environ=None, default=""):
    """Ordered candidates for the multipole library path, highest precedence first."""
    return _candidates("multipole_library", config.MULTIPOLE_LIBRARY_ENV,
                       settings.path_multipole, settings.settings_document,
                       materials, environ, default)


def resolve_cross_sections_path(
    settings,
    materials: Optional[DocumentNode] = None,
    environ: Optional[Mapping[str, str]] = None,
    default: str = "",
) -> str:
    """Return the effective cross sections path ("" when nothing is set)."""
    found = resolve_first_present(cross_sections_candidates(settings, materials, environ, default))
    return found.value if found else ""


def resolve_multipole_path(
    settings,
    materials: Optional[DocumentNode] = None,
    environ: Optional[Mapping[str, str]] = None,
    default: str = "",
) -> str:
    """Return the effective multipole library directory ("" when nothing is set)."""
    found = resolve_first_present(multipole_candidates(settings, materials, environ, default))
    return ensure_trailing_separator(found.value) if found else ""
