# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value formatting utilities

Human-readable renderings of raw values that are not coded enumerations.

Copyright 2025 DNAi inc.
"""

from typing import Optional

BYTE_UNITS = ("KB", "MB", "GB", "TB", "PB")


def format_byte_count(size_bytes: Optional[int]) -> Optional[str]:
    """
    Format a byte count in memory style (1 KB = 1024 bytes).

    Kilobytes are shown as a whole number, larger units with one decimal.
    The exact count follows in parentheses for anything of a kilobyte or
    more; zero is spelled out.

    Args:
        size_bytes: Byte count

    Returns:
        Formatted string (e.g., "358 KB (366,533 bytes)"), or None when
        the count is missing or negative
    """
    if size_bytes is None or isinstance(size_bytes, bool) or size_bytes < 0:
        return None
    if size_bytes == 0:
        return "Zero KB"
    if size_bytes < 1024:
        return f"{size_bytes:,} bytes"

    # Promote after rounding so 1023.99 KB reads as 1 MB
    value = float(size_bytes)
    for unit in BYTE_UNITS:
        value /= 1024.0
        shown = round(value) if unit == "KB" else round(value, 1)
        if shown < 1024 or unit == BYTE_UNITS[-1]:
            break

    if unit == "KB":
        amount = f"{shown}"
    else:
        amount = f"{shown:.1f}".rstrip("0").rstrip(".")
    return f"{amount} {unit} ({size_bytes:,} bytes)"
