"""Font Directory Generator
========================

Discovers the latest published Google Fonts directory, decodes it and
generates a compact lookup table from family name to the content hashes of
its normal and italic weights.
"""

__version__ = "1.0.0"
__author__ = "Font Directory Team"

from .core.config import DirectoryConfig
from .core.exceptions import (
    DecodeError,
    DiscoveryError,
    FetchError,
    FontDirectoryError,
    TransformError,
)
from .core.models import FontStyle, FontStyles, OutputTable
from .directory import PipelineResult, run_pipeline, write_output

__all__ = [
    "DecodeError",
    "DirectoryConfig",
    "DiscoveryError",
    "FetchError",
    "FontDirectoryError",
    "FontStyle",
    "FontStyles",
    "OutputTable",
    "PipelineResult",
    "TransformError",
    "run_pipeline",
    "write_output",
]
