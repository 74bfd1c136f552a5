"""
Byte conversion helpers.
"""

import math

BYTES_PER_MB = 1024 * 1024

_SIZES = ['Bytes', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB']


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def bytes_to_mb(bytes_value: float) -> float:
    """
    Convert bytes to megabytes with 2 decimal places.

    Halves round up (1.005 MB -> 1.01), so figures match the
    ``round(bytes / 1048576 * 100) / 100`` convention used by the dashboards.
    """
    return _round_half_up(bytes_value / BYTES_PER_MB * 100) / 100


def format_bytes(bytes_value: float, decimals: int = 2) -> str:
    """
    Convert bytes to a human-readable string.

    Args:
        bytes_value: Number of bytes
        decimals: Number of decimal places (negative values mean 0)

    Returns:
        A string such as '1.23 MB'; trailing zeros are dropped ('1 KB') and
        halves round up (2560 bytes with 0 decimals is '3 KB')

    Raises:
        ValueError: If bytes_value is negative
    """
    if bytes_value < 0:
        raise ValueError(f"bytes_value must be non-negative, got {bytes_value}")
    if bytes_value == 0:
        return '0 Bytes'

    k = 1024
    dm = max(decimals, 0)
    i = min(max(int(math.floor(math.log(bytes_value) / math.log(k))), 0), len(_SIZES) - 1)

    scale = 10 ** dm
    value = _round_half_up(bytes_value / math.pow(k, i) * scale) / scale
    if float(value).is_integer():
        value = int(value)

    return f'{value} {_SIZES[i]}'
