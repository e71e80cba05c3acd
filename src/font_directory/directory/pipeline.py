"""
Directory Pipeline
==================

Composes discovery, download, decoding and transformation into a single run.
The run either produces the complete serialized table or an error tagged
with the stage that failed.
"""

import logging
from dataclasses import dataclass

import requests

from ..core.config import DirectoryConfig, create_session
from ..core.exceptions import FontDirectoryError
from ..core.models import OutputTable
from .decoder import decode
from .fetcher import ResourceFetcher
from .prober import VersionProber
from .transformer import transform

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of a pipeline run; exactly one of ``output`` and ``error`` is set."""

    url: str | None = None
    table: OutputTable | None = None
    output: str | None = None
    error: FontDirectoryError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def stage(self) -> str | None:
        """Name of the failed stage, if any."""
        return self.error.stage if self.error else None


def build_table(config: DirectoryConfig, session: requests.Session) -> tuple[str, OutputTable]:
    """Run discover -> fetch -> decode -> transform, raising on the first failure."""
    logger.info("Getting latest font directory...")
    url = VersionProber(config, session).resolve_latest_url()
    logger.info(f"Success! Using {url}")

    data = ResourceFetcher(config, session).fetch(url)
    families = decode(data)
    logger.info(f"Success! Got {len(families)} font families")

    logger.info("Transforming fonts data")
    table = transform(families)
    logger.info(f"Success! Transformed {len(table)} families, {table.variant_count()} fonts")
    return url, table


def run_pipeline(
    config: DirectoryConfig | None = None, session: requests.Session | None = None
) -> PipelineResult:
    """
    Generate the serialized font table.

    Args:
        config: Directory configuration (defaults to environment settings)
        session: Optional HTTP session; one is created and closed otherwise

    Returns:
        PipelineResult holding either the JSON output or the stage error
    """
    config = config or DirectoryConfig()
    owns_session = session is None
    if owns_session:
        session = create_session(config)

    try:
        url, table = build_table(config, session)
    except FontDirectoryError as e:
        logger.debug(f"Pipeline failed in {e.stage} stage", exc_info=True)
        return PipelineResult(error=e)
    finally:
        if owns_session:
            session.close()

    return PipelineResult(url=url, table=table, output=table.to_json())
