"""Versioned directory URLs."""

from ..core.config import DEFAULT_BASE_URL


def directory_url(version: int, base_url: str = DEFAULT_BASE_URL, extension: str = ".pb") -> str:
    """Build the URL of a directory version, e.g. ``.../directory007.pb``."""
    if version < 0:
        raise ValueError(f"Directory version must be non-negative, got {version}")
    return f"{base_url}{version:03d}{extension}"
