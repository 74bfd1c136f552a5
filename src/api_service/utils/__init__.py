from api_service.utils.numbers import bytes_to_mb, format_bytes
from api_service.utils.timestamps import utc_timestamp

__all__ = [
    "bytes_to_mb",
    "format_bytes",
    "utc_timestamp",
]
