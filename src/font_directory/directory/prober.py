"""
Version Prober
==============

Finds the latest published directory version. Versioned directories are
probed one by one, starting from a known version, until a request returns
404; the version before it is the latest one. Any other failure aborts the
search since probing is only run by developers in trusted environments.
"""

import logging
from dataclasses import dataclass
from enum import Enum

import requests

from ..core.config import DirectoryConfig
from ..core.exceptions import NoDirectoryVersionError, ProbeFailedError
from .urls import directory_url

logger = logging.getLogger(__name__)


class ProbeStatus(Enum):
    """Outcome of a single existence check."""

    EXISTS = "exists"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


@dataclass(frozen=True)
class ProbeResult:
    """Tagged probe outcome; ``cause`` is set only for failures."""

    url: str
    status: ProbeStatus
    status_code: int | None = None
    cause: Exception | str | None = None

    @property
    def exists(self) -> bool:
        return self.status is ProbeStatus.EXISTS


class VersionProber:
    """Sequential search for the latest directory version."""

    def __init__(self, config: DirectoryConfig, session: requests.Session):
        self.config = config
        self.session = session

    def url_for(self, version: int) -> str:
        return directory_url(version, self.config.base_url, self.config.extension)

    def probe(self, url: str) -> ProbeResult:
        """Check whether a directory exists at ``url`` without raising for network errors."""
        try:
            response = self.session.request(
                self.config.probe_method,
                url,
                stream=True,
                allow_redirects=True,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            return ProbeResult(url=url, status=ProbeStatus.FAILURE, cause=e)

        try:
            status_code = response.status_code
        finally:
            response.close()

        if status_code == 200:
            return ProbeResult(url=url, status=ProbeStatus.EXISTS, status_code=status_code)
        if status_code == 404:
            return ProbeResult(url=url, status=ProbeStatus.NOT_FOUND, status_code=status_code)
        return ProbeResult(
            url=url,
            status=ProbeStatus.FAILURE,
            status_code=status_code,
            cause=f"Got invalid status code: {status_code}",
        )

    def resolve_latest_version(self, initial_version: int | None = None) -> int:
        """
        Find the latest existing directory version.

        Args:
            initial_version: First version to probe (defaults to config)

        Returns:
            The last version before the first 404. This is
            ``initial_version - 1`` when the initial version itself is missing.

        Raises:
            ProbeFailedError: If a probe fails for any reason other than 404
            NoDirectoryVersionError: If rolling back leaves no valid version
        """
        if initial_version is None:
            initial_version = self.config.initial_version

        version = initial_version
        while True:
            url = self.url_for(version)
            result = self.probe(url)
            logger.debug(f"Probed {url}: {result.status.value}")

            if result.status is ProbeStatus.EXISTS:
                version += 1
            elif result.status is ProbeStatus.NOT_FOUND:
                version -= 1
                break
            else:
                cause = result.cause if isinstance(result.cause, Exception) else None
                raise ProbeFailedError(url, str(result.cause)) from cause

        if version < 0:
            raise NoDirectoryVersionError(initial_version)

        if self.config.gap_check_versions:
            self._check_for_gaps(version + 1)

        return version

    def resolve_latest_url(self, initial_version: int | None = None) -> str:
        return self.url_for(self.resolve_latest_version(initial_version))

    def _check_for_gaps(self, missing_version: int) -> None:
        """Warn if versions exist past the missing one; the result is left unchanged."""
        first = missing_version + 1
        for version in range(first, first + self.config.gap_check_versions):
            result = self.probe(self.url_for(version))
            if result.exists:
                logger.warning(
                    f"Directory version {missing_version:03d} is missing but "
                    f"{version:03d} exists; using {missing_version - 1:03d}"
                )
                return
            if result.status is ProbeStatus.FAILURE:
                logger.warning(f"Gap check stopped at version {version:03d}: {result.cause}")
                return
