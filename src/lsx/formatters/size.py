"""Human-readable byte sizes."""

from __future__ import annotations

UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


def format_size(size: int) -> str:
    """Format *size* bytes with two decimals in binary (1024-based) units.

    >>> format_size(1536)
    '1.50 KB'
    """
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(UNITS) - 1:
        value /= 1024.0
        unit += 1
    return f"{value:.2f} {UNITS[unit]}"
