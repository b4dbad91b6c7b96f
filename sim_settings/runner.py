"""
Settings Loader Runner Module

This module provides the function that loads a settings document before a
run, and the command-line entry point that prints the resulting run
parameters. It can be called from scripts or imported directly.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from .core.constants import RunMode
from .core.deprecation import resolve_cross_sections_path, resolve_multipole_path
from .core.document import load_document
from .core.errors import SettingsError, format_error
from .core.output import header, print_settings_summary, write_message
from .core.settings import Settings, SettingsView


def run_load(
    settings_path: Union[str, Path],
    run_mode: Optional[RunMode] = None,
    materials_path: Optional[Union[str, Path]] = None,
    show_summary: bool = True,
) -> SettingsView:
    """Load the settings of a run.

    This is the main entry point for preparing a run. It handles:
    1. Parsing the settings document
    2. Loading and freezing the settings registry
    3. Resolving the effective data library paths
    4. Printing the run-parameter summary

    Parameters
    ----------
    settings_path : str or Path
        Settings document (``.xml``, ``.yaml`` or ``.yml``).
    run_mode : RunMode, optional
        Mode of the run. If None, the document's ``run_mode`` (or the default).
    materials_path : str or Path, optional
        Materials document, consulted for the library paths. Only read
        when the summary is printed for a run that needs nuclear data.
    show_summary : bool
        Whether to print the summary.

    Returns
    -------
    SettingsView
        Read-only view of the loaded registry.
    """
    settings_path = Path(settings_path)
    settings = Settings()
    settings.load(load_document(settings_path), run_mode=run_mode)
    view = settings.view()
    write_message(f"Loaded settings from {settings_path}", level=5,
                  verbosity=view.verbosity)

    if show_summary:
        print_settings_summary(view)
        if view.run_mode is not RunMode.PLOTTING:
            materials = load_document(materials_path) if materials_path is not None else None
            header("Data Libraries")
            cross_sections = resolve_cross_sections_path(view, materials)
            multipole = resolve_multipole_path(view, materials)
            print(f"Cross sections:         {cross_sections or '(not set)'}")
            print(f"Multipole library:      {multipole or '(not set)'}")

    return view


def main(argv=None) -> int:
    """Command-line entry point."""
    import argparse

    def run_mode_arg(token: str) -> RunMode:
        try:
            return RunMode.from_token(token)
        except SettingsError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    parser = argparse.ArgumentParser(description="Load and display simulation settings")
    parser.add_argument("settings", type=Path,
                        help="Settings document (.xml, .yaml or .yml)")
    parser.add_argument("--mode", type=run_mode_arg, default=None,
                        help="Run mode: eigenvalue, fixed-source, plot, particle-restart, volume")
    parser.add_argument("--materials", type=Path, default=None,
                        help="Materials document used to resolve data library paths")
    parser.add_argument("--quiet", action="store_true",
                        help="Don't print the settings summary")

    args = parser.parse_args(argv)

    try:
        run_load(
            args.settings,
            run_mode=args.mode,
            materials_path=args.materials,
            show_summary=not args.quiet,
        )
    except (SettingsError, FileNotFoundError) as e:
        print(format_error(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
