"""
The settings registry.

`Settings` holds every run parameter with its compiled-in default. It has a
two-phase lifecycle:

1. ``Settings()`` creates the registry with default values.
2. ``settings.load(root)`` applies a settings document, at most once.

A load either succeeds completely or leaves the registry untouched. After a
successful load the registry is frozen: any attribute assignment raises
`SettingsFrozenError`, so it can be shared with parallel workers without
locks. `SettingsView` is a read-only handle exposing only the fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .. import config
from ..data_paths import ensure_trailing_separator
from .constants import C_NONE, ElectronTreatment, ParticleKind, ResScatMethod, RunMode
from .deprecation import LegacyPaths, read_deprecated_paths
from .document import DocumentNode, load_document
from .errors import ConfigError, SettingsFrozenError
from .source import SourceDistribution, build_external_sources
from .temperature import TemperatureMethod, TemperatureSettings, read_temperature_settings

# Children of <cutoff> filling the energy_cutoff slots
_ENERGY_CUTOFF_FIELDS = {
    ParticleKind.NEUTRON: "energy_neutron",
    ParticleKind.PHOTON: "energy_photon",
    ParticleKind.ELECTRON: "energy_electron",
    ParticleKind.POSITRON: "energy_positron",
}

# Top-level boolean options read directly into the field of the same name
_BOOLEAN_OPTIONS = (
    "create_fission_neutrons",
    "photon_transport",
    "survival_biasing",
)


@dataclass
class Settings:
    """Run parameters of a simulation."""

    # Boolean flags
    assume_separate: bool = False
    check_overlaps: bool = False
    cmfd_run: bool = False
    confidence_intervals: bool = False
    create_fission_neutrons: bool = True
    entropy_on: bool = False
    legendre_to_tabular: bool = True
    output_summary: bool = True
    output_tallies: bool = True
    particle_restart_run: bool = False
    photon_transport: bool = False
    reduce_tallies: bool = True
    res_scat_on: bool = False
    restart_run: bool = False
    run_CE: bool = True
    source_latest: bool = False
    source_separate: bool = False
    source_write: bool = True
    survival_biasing: bool = False
    temperature_multipole: bool = False
    trigger_on: bool = False
    trigger_predict: bool = False
    ufs_on: bool = False
    urr_ptables_on: bool = True
    write_all_tracks: bool = False
    write_initial_source: bool = False

    # Paths ("" when unset)
    path_input: str = ""
    path_statepoint: str = ""
    path_sourcepoint: str = ""
    path_particle_restart: str = ""
    path_cross_sections: str = ""
    path_multipole: str = ""
    path_output: str = ""
    path_source: str = ""

    # File name of the loaded settings document
    settings_document: str = config.DEFAULT_SETTINGS_DOCUMENT

    # Integer options
    index_entropy_mesh: int = -1
    index_ufs_mesh: int = -1
    electron_treatment: ElectronTreatment = ElectronTreatment.TTB
    legendre_to_tabular_points: int = C_NONE
    res_scat_method: ResScatMethod = ResScatMethod.ARES
    run_mode: RunMode = RunMode.EIGENVALUE
    verbosity: int = config.DEFAULT_VERBOSITY

    # Real options
    energy_cutoff: Tuple[float, float, float, float] = config.DEFAULT_ENERGY_CUTOFF
    res_scat_energy_min: float = config.DEFAULT_RES_SCAT_ENERGY_MIN
    res_scat_energy_max: float = config.DEFAULT_RES_SCAT_ENERGY_MAX
    temperature_method: TemperatureMethod = TemperatureMethod.NEAREST
    temperature_tolerance: float = config.DEFAULT_TEMPERATURE_TOLERANCE_K
    temperature_default: float = config.DEFAULT_TEMPERATURE_K
    temperature_range: Tuple[float, float] = config.DEFAULT_TEMPERATURE_RANGE
    weight_cutoff: float = config.DEFAULT_WEIGHT_CUTOFF
    weight_survive: float = config.DEFAULT_WEIGHT_SURVIVE

    # Sources, non-empty once loaded
    external_sources: Tuple[SourceDistribution, ...] = ()

    _loaded: bool = field(default=False, init=False, repr=False, compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_loaded", False):
            raise SettingsFrozenError(f"Cannot set '{name}': settings are frozen after loading")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise SettingsFrozenError(f"Cannot delete '{name}' from settings")

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self, root: DocumentNode, run_mode: Optional[RunMode] = None) -> "Settings":
        """Apply a settings document and freeze the registry.

        Parameters
        ----------
        root : DocumentNode
            Root of the settings document.
        run_mode : RunMode, optional
            Mode of the run. Defaults to the document's ``run_mode`` field,
            then to the current value.

        Returns
        -------
        Settings
            ``self``, now frozen.

        Raises
        ------
        ConfigError
            If the document is invalid. The registry is left unchanged.
        SettingsFrozenError
            If the registry has already been loaded.
        """
        if self._loaded:
            raise SettingsFrozenError("Settings have already been loaded")

        updates = _read_document(self, root, run_mode)
        for name, value in updates.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "_loaded", True)
        return self

    def view(self) -> "SettingsView":
        return SettingsView(self)


def _read_document(current: Settings, root: DocumentNode,
                   run_mode: Optional[RunMode]) -> Dict[str, Any]:
    """Return the field values a document assigns, without touching ``current``."""
    if run_mode is None:
        if root.has("run_mode"):
            run_mode = RunMode.from_token(root.value("run_mode"))
        else:
            run_mode = current.run_mode
    updates: Dict[str, Any] = {"run_mode": run_mode}
    if root.name:
        updates["settings_document"] = root.name

    # Deprecated library paths
    legacy = read_deprecated_paths(
        root, run_mode, LegacyPaths(current.path_cross_sections, current.path_multipole)
    )
    updates["path_cross_sections"] = legacy.cross_sections
    updates["path_multipole"] = legacy.multipole

    # Output options
    output = root.child("output")
    if output is not None:
        if output.has("path"):
            updates["path_output"] = ensure_trailing_separator(output.value("path", strip=True))
        if output.has("summary"):
            updates["output_summary"] = output.value_bool("summary")
        if output.has("tallies"):
            updates["output_tallies"] = output.value_bool("tallies")

    if root.has("verbosity"):
        verbosity = root.value_int("verbosity")
        if not config.MIN_VERBOSITY <= verbosity <= config.MAX_VERBOSITY:
            raise ConfigError(
                f"verbosity must be between {config.MIN_VERBOSITY} and "
                f"{config.MAX_VERBOSITY}, got {verbosity}"
            )
        updates["verbosity"] = verbosity

    for name in _BOOLEAN_OPTIONS:
        if root.has(name):
            updates[name] = root.value_bool(name)

    # Cutoffs
    cutoff = root.child("cutoff")
    if cutoff is not None:
        energy_cutoff = list(current.energy_cutoff)
        for kind, name in _ENERGY_CUTOFF_FIELDS.items():
            if cutoff.has(name):
                energy_cutoff[kind] = cutoff.value_float(name)
        updates["energy_cutoff"] = tuple(energy_cutoff)
        if cutoff.has("weight"):
            updates["weight_cutoff"] = cutoff.value_float("weight")
        if cutoff.has("weight_avg"):
            updates["weight_survive"] = cutoff.value_float("weight_avg")

    # Temperature treatment
    temperature = read_temperature_settings(root, TemperatureSettings(
        default=current.temperature_default,
        method=current.temperature_method,
        tolerance=current.temperature_tolerance,
        multipole=current.temperature_multipole,
        range=current.temperature_range,
    ))
    updates["temperature_default"] = temperature.default
    updates["temperature_method"] = temperature.method
    updates["temperature_tolerance"] = temperature.tolerance
    updates["temperature_multipole"] = temperature.multipole
    updates["temperature_range"] = temperature.range

    # External sources
    updates["external_sources"] = tuple(build_external_sources(root))
    return updates


class SettingsView:
    """Read-only access to the fields of a `Settings` instance."""

    __slots__ = ("_settings",)

    _FIELDS = frozenset(f.name for f in fields(Settings) if not f.name.startswith("_"))

    def __init__(self, settings: Settings):
        object.__setattr__(self, "_settings", settings)

    def __getattr__(self, name: str) -> Any:
        if name in SettingsView._FIELDS:
            return getattr(self._settings, name)
        raise AttributeError(f"'SettingsView' has no field '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        raise SettingsFrozenError(f"Cannot set '{name}': settings are read-only")

    def __delattr__(self, name: str) -> None:
        raise SettingsFrozenError(f"Cannot delete '{name}': settings are read-only")

    def __reduce__(self):
        # Rebuild through __init__; __setattr__ is closed
        return (SettingsView, (self._settings,))

    def __dir__(self):
        return sorted(SettingsView._FIELDS)

    def __repr__(self) -> str:
        return f"SettingsView({self._settings!r})"

    @property
    def loaded(self) -> bool:
        return self._settings.loaded


def load_settings(
    path: Union[str, Path],
    run_mode: Optional[RunMode] = None,
) -> SettingsView:
    """Load a settings document into a new registry.

    Parameters
    ----------
    path : str or Path
        Settings document (``.xml``, ``.yaml`` or ``.yml``).
    run_mode : RunMode, optional
        Mode of the run.

    Returns
    -------
    SettingsView
        Read-only view of the loaded registry.
    """
    settings = Settings()
    settings.load(load_document(path), run_mode=run_mode)
    return settings.view()
