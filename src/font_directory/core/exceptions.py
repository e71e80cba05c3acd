"""Custom exceptions for the font directory generator."""

from enum import Enum
from typing import Any


class FontDirectoryError(Exception):
    """Base exception for all font directory errors."""

    stage = "pipeline"

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(FontDirectoryError):
    """Exception raised for configuration errors."""

    stage = "config"


class DiscoveryError(FontDirectoryError):
    """Exception raised when the latest directory version cannot be determined."""

    stage = "discover"


class FetchError(FontDirectoryError):
    """Exception raised when the directory payload cannot be retrieved."""

    stage = "fetch"


class DecodeError(FontDirectoryError):
    """Exception raised when the payload does not match the directory schema."""

    stage = "decode"


class TransformFailure(Enum):
    """Reasons a directory record cannot be transformed."""

    MISSING_NAME_OR_FONTS = "missing-name-or-fonts"
    MISSING_WEIGHT = "missing-weight"
    MISSING_HASH = "missing-hash"


class TransformError(FontDirectoryError):
    """Exception raised when a record violates a required-field invariant."""

    stage = "transform"

    def __init__(self, message: str, reason: TransformFailure, details: Any | None = None):
        super().__init__(message, details)
        self.reason = reason


# Specific exception classes for TRY003 compliance
class ProbeFailedError(DiscoveryError):
    """Exception raised when a probe fails for a reason other than 404."""

    def __init__(self, url: str, cause: str):
        super().__init__(f"Failed to get proto directory {url}: {cause}", details={"url": url})


class NoDirectoryVersionError(DiscoveryError):
    """Exception raised when no version at or below the initial one exists."""

    def __init__(self, initial_version: int):
        super().__init__(
            f"No directory version available at or below {initial_version}",
            details={"initial_version": initial_version},
        )


class UnexpectedStatusError(FetchError):
    """Exception raised when the directory download returns a non-200 status."""

    def __init__(self, url: str, status_code: int):
        super().__init__(
            f"Got invalid status code {status_code} for {url}",
            details={"url": url, "status_code": status_code},
        )


class DownloadSizeMismatchError(FetchError):
    """Exception raised when downloaded size differs from Content-Length."""

    def __init__(self, expected: int, received: int):
        super().__init__(
            f"Download size mismatch: expected {expected} bytes, got {received}",
            details={"expected": expected, "received": received},
        )


class MissingNameOrFontsError(TransformError):
    """Exception raised when a family has no name or no fonts."""

    def __init__(self, index: int):
        super().__init__(
            f"Got no name or fonts for family #{index}",
            TransformFailure.MISSING_NAME_OR_FONTS,
            details={"index": index},
        )


class MissingWeightError(TransformError):
    """Exception raised when a font variant has no weight."""

    def __init__(self, family: str, index: int):
        super().__init__(
            f"Didn't get font weight for {family} font #{index}",
            TransformFailure.MISSING_WEIGHT,
            details={"family": family, "index": index},
        )


class MissingHashError(TransformError):
    """Exception raised when a font variant has no file hash."""

    def __init__(self, family: str, index: int):
        super().__init__(
            f"Didn't get font hash for {family} font #{index}",
            TransformFailure.MISSING_HASH,
            details={"family": family, "index": index},
        )


class UnknownFontError(FontDirectoryError):
    """Exception raised when a lookup names a family or weight not in the table."""

    stage = "lookup"

    def __init__(self, family: str, weight: str | None = None):
        target = family if weight is None else f"{family} {weight}"
        super().__init__(f"Unknown font: {target}")


class InvalidDataFileError(FontDirectoryError):
    """Exception raised when a generated data file cannot be read as a font table."""

    stage = "lookup"

    def __init__(self, path: str, error: str):
        super().__init__(f"Invalid font data file {path}: {error}", details={"path": path})


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")
