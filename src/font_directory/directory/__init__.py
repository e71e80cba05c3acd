"""Directory Pipeline Module
=========================

Discovery, download, decoding and transformation of the remote font
directory into the family lookup table.
"""

from .decoder import decode
from .fetcher import ResourceFetcher
from .hashing import to_hex
from .pipeline import PipelineResult, build_table, run_pipeline
from .prober import ProbeResult, ProbeStatus, VersionProber
from .transformer import transform
from .urls import directory_url
from .writer import write_output

__all__ = [
    "PipelineResult",
    "ProbeResult",
    "ProbeStatus",
    "ResourceFetcher",
    "VersionProber",
    "build_table",
    "decode",
    "directory_url",
    "run_pipeline",
    "to_hex",
    "transform",
    "write_output",
]
