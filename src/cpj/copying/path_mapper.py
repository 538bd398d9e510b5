"""Mirror source file paths under a destination root."""

from __future__ import annotations

import os


def with_trailing_sep(root: str) -> str:
    """Return ``root`` ending in exactly one separator."""
    return root.rstrip(os.sep) + os.sep


def map_destinations(sources: list[str], source_root: str, dest_root: str) -> list[str]:
    """Build the destination list index-aligned with ``sources``.

    Every source path must live under ``source_root``.
    """
    src_prefix = with_trailing_sep(source_root)
    dest_prefix = with_trailing_sep(dest_root)
    return [dest_prefix + path.removeprefix(src_prefix) for path in sources]
