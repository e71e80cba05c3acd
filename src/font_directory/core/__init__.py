"""Core components for the font directory generator."""

from .config import DirectoryConfig, create_session
from .exceptions import (
    ConfigurationError,
    DecodeError,
    DiscoveryError,
    FetchError,
    FontDirectoryError,
    TransformError,
    TransformFailure,
    UnknownFontError,
)
from .models import (
    FamilyRecord,
    FontStyle,
    FontStyles,
    FontVariant,
    OutputTable,
)

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DirectoryConfig",
    "DiscoveryError",
    "FamilyRecord",
    "FetchError",
    "FontDirectoryError",
    "FontStyle",
    "FontStyles",
    "FontVariant",
    "OutputTable",
    "TransformError",
    "TransformFailure",
    "UnknownFontError",
    "create_session",
]
