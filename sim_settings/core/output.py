"""
Console output for the settings loader.

Messages are printed with the ``[info]`` / ``[warning]`` prefixes used
throughout the package; headers and the run-parameter summary are plain
banners.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING, Optional

from .. import config

if TYPE_CHECKING:
    from .settings import Settings


def warning(message: str) -> None:
    """Print a non-fatal warning."""
    print(f"[warning] {message}")


def write_message(message: str, level: Optional[int] = None,
                  verbosity: int = config.DEFAULT_VERBOSITY) -> None:
    """Print an informational message.

    Parameters
    ----------
    message : str
        Text to print. Long messages are wrapped.
    level : int, optional
        Importance of the message; it is printed only when ``level`` is not
        larger than ``verbosity``. Messages without a level are always printed.
    verbosity : int
        Current verbosity setting.
    """
    if level is not None and level > verbosity:
        return
    for line in textwrap.wrap(message, width=config.MESSAGE_WIDTH) or [""]:
        print(f"[info] {line}")


def header(message: str, level: int = 3) -> None:
    """Print a header banner.

    Level 1 is a boxed major header, level 2 a title with an underline and
    level 3 (default) a single-line minor header.
    """
    width = config.HEADER_WIDTH
    title = message.upper()
    n = (width - 12 - len(title)) // 2
    m = n + (len(title) + 1) % 2

    print()
    if level == 1:
        print("=" * width)
        print("=" * n + ">     " + title + "     <" + "=" * m)
        print("=" * width)
    elif level == 2:
        print(title)
        print("-" * width)
    else:
        print("=" * n + ">     " + title + "     <" + "=" * m)
    print()


def print_settings_summary(settings: "Settings") -> None:
    """Print the run parameters held by ``settings``."""
    header("Run Parameters", level=2)
    print(f"Run mode:               {settings.run_mode.value}")
    print(f"Continuous energy:      {settings.run_CE}")
    print(f"Photon transport:       {settings.photon_transport}")
    print(f"Survival biasing:       {settings.survival_biasing}")
    print(f"Temperature method:     {settings.temperature_method.name.lower()}")
    print(f"Temperature default:    {settings.temperature_default:.1f} K")
    print(f"Temperature tolerance:  {settings.temperature_tolerance:.1f} K")
    low, high = settings.temperature_range
    if low == 0.0 and high == 0.0:
        print("Temperature range:      unbounded")
    else:
        print(f"Temperature range:      {low:.1f} - {high:.1f} K")
    print(f"Windowed multipole:     {settings.temperature_multipole}")
    print("Energy cutoff:          " + ", ".join(f"{e:g}" for e in settings.energy_cutoff))
    print(f"Output path:            {settings.path_output or '(working directory)'}")
    if settings.path_cross_sections:
        print(f"Cross sections (legacy): {settings.path_cross_sections}")
    if settings.path_multipole:
        print(f"Multipole (legacy):     {settings.path_multipole}")
    print(f"External sources:       {len(settings.external_sources)}")
    for i, source in enumerate(settings.external_sources, start=1):
        print(f"  [{i}] {source.describe()}")
    print("-" * config.HEADER_WIDTH)
