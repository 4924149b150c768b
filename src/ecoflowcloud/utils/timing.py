"""Timestamp utilities."""

import time


def get_timestamp_ms() -> int:
    """Get current timestamp in milliseconds (for request signing)."""
    return int(time.time() * 1000)
