"""
Simulation Settings Package
===========================

This package provides the settings registry of a Monte Carlo particle
transport engine: a store of validated run parameters populated once from a
settings document (XML or YAML) before any transport work begins.

Modules:
--------
- config: Compiled-in default values
- data_paths: Path normalization and bundled example documents
- constants: Run modes, particle kinds and other enumerations
- errors: Typed errors (ConfigError, SettingsFrozenError)
- document: Navigable settings document nodes
- output: Console messages, headers and the run-parameter summary
- deprecation: Deprecated library paths and their precedence chain
- temperature: Temperature treatment settings
- distributions: Spatial, angular and energy source distributions
- source: External source construction
- settings: The settings registry
- runner: Command-line entry point
"""

from . import config
from .data_paths import ensure_trailing_separator, get_example_document
from .core.constants import RunMode, ParticleKind
from .core.errors import SettingsError, ConfigError, SettingsFrozenError, format_error
from .core.document import DocumentNode, load_document, parse_xml_string, parse_yaml_string
from .core.deprecation import (
    PathCandidate,
    resolve_first_present,
    resolve_cross_sections_path,
    resolve_multipole_path,
)
from .core.temperature import TemperatureMethod, TemperatureSettings
from .core.distributions import (
    SpatialPoint,
    SpatialBox,
    Isotropic,
    Monodirectional,
    Watt,
    Maxwell,
    Uniform,
    Discrete,
    Tabular,
)
from .core.source import SourceDistribution, SourceSite, default_source, build_external_sources
from .core.settings import Settings, SettingsView, load_settings
from .core.output import print_settings_summary

__version__ = "1.0.0"
__all__ = [
    # Config module
    "config",
    # Paths
    "ensure_trailing_separator",
    "get_example_document",
    # Constants
    "RunMode",
    "ParticleKind",
    # Errors
    "SettingsError",
    "ConfigError",
    "SettingsFrozenError",
    "format_error",
    # Documents
    "DocumentNode",
    "load_document",
    "parse_xml_string",
    "parse_yaml_string",
    # Deprecation
    "PathCandidate",
    "resolve_first_present",
    "resolve_cross_sections_path",
    "resolve_multipole_path",
    # Temperature
    "TemperatureMethod",
    "TemperatureSettings",
    # Distributions
    "SpatialPoint",
    "SpatialBox",
    "Isotropic",
    "Monodirectional",
    "Watt",
    "Maxwell",
    "Uniform",
    "Discrete",
    "Tabular",
    # Sources
    "SourceDistribution",
    "SourceSite",
    "default_source",
    "build_external_sources",
    # Settings
    "Settings",
    "SettingsView",
    "load_settings",
    "print_settings_summary",
]
