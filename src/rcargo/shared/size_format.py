"""Human-readable rendering of byte counts."""

from __future__ import annotations

from typing import Final

_KIB: Final[int] = 1024
_MIB: Final[int] = _KIB * 1024
_GIB: Final[int] = _MIB * 1024

# Largest unit first.
_UNITS: Final[tuple[tuple[int, str], ...]] = (
    (_GIB, "GiB"),
    (_MIB, "MiB"),
    (_KIB, "KiB"),
)


def format_size(size: int) -> str:
    """Format ``size`` bytes using binary units with two decimals.

    Args:
        size: Number of bytes.

    Returns:
        str: ``"512 B"`` below one KiB, otherwise e.g. ``"1.50 KiB"``.
    """
    for threshold, unit in _UNITS:
        if size >= threshold:
            return f"{size / threshold:.2f} {unit}"
    return f"{size} B"


__all__ = ["format_size"]
