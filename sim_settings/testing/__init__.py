"""
Testing subpackage for the settings registry.

This subpackage provides builders for in-memory settings documents so that
the loader can be exercised without files on disk.

Example usage:
    from sim_settings.testing import make_settings_root, make_source_element

    root = make_settings_root(
        sources=[make_source_element(space=("box", [-1, -1, -1, 1, 1, 1]))],
        temperature_method="interpolation",
    )
"""

from .documents import (
    make_source_element,
    make_settings_xml,
    make_settings_root,
)

__all__ = [
    "make_source_element",
    "make_settings_xml",
    "make_settings_root",
]
