"""
Path utilities.

This module provides the normalizer used for directory-like settings fields
and functions to access package-bundled example settings documents
regardless of where the package is installed.

Example usage:
    from sim_settings.data_paths import ensure_trailing_separator, get_example_document

    output_dir = ensure_trailing_separator("results")   # "results/"
    settings_xml = get_example_document("settings.xml")
"""

from __future__ import annotations

from pathlib import Path

from .config import DOCUMENT_SUFFIXES, PATH_SEPARATOR


def ensure_trailing_separator(path: str) -> str:
    """Return ``path`` ending with exactly one added separator.

    A path that already ends with the separator is returned unchanged, so
    applying this twice gives the same result as applying it once.

    Parameters
    ----------
    path : str
        Directory-like path.

    Returns
    -------
    str
        ``path`` with a trailing ``/``.

    Example
    -------
    >>> ensure_trailing_separator("data/wmp")
    'data/wmp/'
    >>> ensure_trailing_separator("data/wmp/")
    'data/wmp/'
    """
    if path.endswith(PATH_SEPARATOR):
        return path
    return path + PATH_SEPARATOR


def get_package_dir() -> Path:
    """Get the root directory of the sim_settings package.

    Returns
    -------
    Path
        Path to the sim_settings package directory.
    """
    return Path(__file__).resolve().parent


def get_examples_dir() -> Path:
    """Get the path to the examples directory.

    Returns
    -------
    Path
        Path to sim_settings/examples/
    """
    return get_package_dir() / "examples"


def list_example_documents() -> list[Path]:
    """List all bundled example settings documents.

    Returns
    -------
    list[Path]
        Sorted paths of ``.xml``/``.yaml``/``.yml`` files.
    """
    return sorted(
        p for p in get_examples_dir().iterdir()
        if p.suffix.lower() in DOCUMENT_SUFFIXES
    )


def get_example_document(name: str) -> Path:
    """Get the path to a bundled example settings document.

    Parameters
    ----------
    name : str
        File name, e.g. ``"settings.xml"``.

    Returns
    -------
    Path
        Path to the document.

    Raises
    ------
    FileNotFoundError
        If the document does not exist.
    """
    file_path = get_examples_dir() / name
    if not file_path.exists():
        raise FileNotFoundError(
            f"Example document '{name}' not found at {file_path}. "
            f"Available documents: {[p.name for p in list_example_documents()]}"
        )
    return file_path
