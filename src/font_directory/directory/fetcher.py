"""
Resource Fetcher
================

Downloads a resolved directory file with progress tracking.
"""

import logging
import time

import requests
from tqdm import tqdm

from ..core.config import DirectoryConfig
from ..core.exceptions import DownloadSizeMismatchError, FetchError, UnexpectedStatusError

logger = logging.getLogger(__name__)


class DownloadProgress:
    """Progress tracker for downloads."""

    def __init__(self, total_size: int, description: str = "Downloading", enabled: bool = True):
        self.total_size = total_size
        self.downloaded = 0
        self.start_time = time.time()
        self.pbar = tqdm(
            total=total_size or None,
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            desc=description,
            disable=not enabled,
        )

    def update(self, chunk_size: int):
        """Update progress."""
        self.downloaded += chunk_size
        self.pbar.update(chunk_size)

    def close(self):
        """Close progress bar."""
        self.pbar.close()

    @property
    def elapsed_time(self) -> float:
        """Get elapsed time in seconds."""
        return time.time() - self.start_time


class ResourceFetcher:
    """Retrieves directory payloads; no retries, any failure is fatal."""

    def __init__(self, config: DirectoryConfig, session: requests.Session):
        self.config = config
        self.session = session

    def fetch(self, url: str) -> bytes:
        """
        Download the raw bytes at ``url``.

        Raises:
            UnexpectedStatusError: If the response status is not 200
            DownloadSizeMismatchError: If fewer or more bytes than announced arrive
            FetchError: On any transport failure
        """
        logger.info(f"Downloading {url}")

        try:
            response = self.session.get(url, stream=True, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            raise FetchError(f"Failed to download {url}: {e}", details={"url": url}) from e

        try:
            if response.status_code != 200:
                raise UnexpectedStatusError(url, response.status_code)

            total_size = self._content_length(response)
            # Content-Length counts encoded bytes while iter_content yields decoded ones
            expected_size = 0 if response.headers.get("content-encoding") else total_size
            progress = DownloadProgress(
                total_size, f"Downloading {url.rsplit('/', 1)[-1]}", self.config.show_progress
            )
            chunks = []
            try:
                for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                    if chunk:
                        chunks.append(chunk)
                        progress.update(len(chunk))
            except requests.RequestException as e:
                raise FetchError(f"Download of {url} interrupted: {e}", details={"url": url}) from e
            finally:
                progress.close()
        finally:
            response.close()

        data = b"".join(chunks)
        if expected_size > 0 and len(data) != expected_size:
            raise DownloadSizeMismatchError(expected_size, len(data))

        logger.info(f"Download completed: {len(data)} bytes in {progress.elapsed_time:.2f}s")
        return data

    @staticmethod
    def _content_length(response: requests.Response) -> int:
        """Announced body size, or 0 when missing or unparseable."""
        value = response.headers.get("content-length")
        if not value:
            return 0
        try:
            return max(int(value), 0)
        except ValueError:
            logger.warning(f"Ignoring invalid Content-Length header: {value!r}")
            return 0
