"""
Unit tests for byte conversion and timestamp helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from api_service.utils.numbers import bytes_to_mb, format_bytes
from api_service.utils.timestamps import utc_timestamp


class TestBytesToMb:
    """Test cases for bytes_to_mb."""

    @pytest.mark.parametrize("value, expected", [
        (0, 0.0),
        (1048576, 1.0),
        (1572864, 1.5),
        (52428800, 50.0),
        (1234567, 1.18),
    ])
    def test_conversion(self, value, expected):
        """Test conversion to two decimal places."""
        assert bytes_to_mb(value) == expected

    def test_halves_round_up(self):
        """Test that a value just past x.xx5 MB rounds up."""
        assert bytes_to_mb(1053819) == 1.01


class TestFormatBytes:
    """Test cases for format_bytes."""

    @pytest.mark.parametrize("value, expected", [
        (0, "0 Bytes"),
        (500, "500 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1234, "1.21 KB"),
        (1048576, "1 MB"),
        (1073741824, "1 GB"),
    ])
    def test_format(self, value, expected):
        """Test human-readable sizes with trailing zeros dropped."""
        assert format_bytes(value) == expected

    def test_decimals(self):
        """Test custom precision."""
        assert format_bytes(1234, decimals=3) == "1.205 KB"

    def test_negative_decimals_mean_zero(self):
        """Test that negative precision is treated as zero."""
        assert format_bytes(1234, decimals=-1) == "1 KB"

    @pytest.mark.parametrize("value, decimals, expected", [
        (2560, 0, "3 KB"),
        (1536, 0, "2 KB"),
        (1152, 2, "1.13 KB"),
        (1048576 + 524288, 0, "2 MB"),
    ])
    def test_halves_round_up(self, value, decimals, expected):
        """Test that exact halves round away from zero."""
        assert format_bytes(value, decimals=decimals) == expected

    def test_fractional_bytes(self):
        """Test that values below one byte stay in bytes."""
        assert format_bytes(0.5) == "0.5 Bytes"

    def test_negative_values_are_rejected(self):
        """Test that negative sizes raise a clear error."""
        with pytest.raises(ValueError, match="non-negative"):
            format_bytes(-1)


class TestUtcTimestamp:
    """Test cases for utc_timestamp."""

    def test_format(self):
        """Test millisecond precision and the Z suffix."""
        now = datetime(2024, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)

        assert utc_timestamp(now) == "2024-01-01T12:00:00.123Z"

    def test_converts_to_utc(self):
        """Test that offsets are converted to UTC."""
        now = datetime(2024, 1, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))

        assert utc_timestamp(now) == "2024-01-01T12:00:00.000Z"

    def test_defaults_to_now(self):
        """Test that the current time is used by default."""
        timestamp = utc_timestamp()

        assert timestamp.endswith("Z")
        assert len(timestamp) == len("2024-01-01T12:00:00.000Z")
