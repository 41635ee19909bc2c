"""
Release channel registry.
"""

from typing import Tuple

# Known release tracks, in order of increasing stability
CHANNELS: Tuple[str, ...] = ("dev", "beta", "release", "stable")

# Channel whose builds are also published to the legacy update location
PRERELEASE_CHANNEL = "dev"


def is_valid_channel(channel: str) -> bool:
    """Return True if channel is a known release track."""
    return channel in CHANNELS


def validate_channel(channel: str) -> str:
    """
    Return channel unchanged if it is known.

    Raises:
        ValueError: If channel is not in CHANNELS
    """
    if not is_valid_channel(channel):
        raise ValueError(f"Invalid channel {channel}")
    return channel
