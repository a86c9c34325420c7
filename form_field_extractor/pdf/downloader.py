"""
Downloader - Fetch a remote PDF into a temporary file.
The temp file is removed on every failure path before the error propagates.
"""

import os
import tempfile
import time
from pathlib import Path
from typing import Callable, Optional

import requests

from form_field_extractor.config.settings import Settings
from form_field_extractor.config.browser_profiles import BrowserProfiles
from form_field_extractor.errors import AcquisitionError
from form_field_extractor.utils.logger import logger


class Downloader:
    """Streams a document to local storage with a bounded deadline."""

    def __init__(
        self,
        timeout: Optional[int] = None,
        chunk_size: Optional[int] = None,
        temp_dir: Optional[str] = None,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize downloader.

        Args:
            timeout: Overall download deadline in ms
            chunk_size: Bytes read per chunk
            temp_dir: Directory for temporary files (system default if None)
            session: requests session to reuse (a private one per download if None)
            clock: Monotonic clock used for the deadline
        """
        self.timeout = timeout or Settings.DEFAULT_TIMEOUT
        self.chunk_size = chunk_size or Settings.DOWNLOAD_CHUNK_SIZE
        self.temp_dir = temp_dir
        self.session = session
        self.clock = clock

    def download(self, url: str) -> Path:
        """
        Download a URL into a new temporary file.

        Args:
            url: Remote document URL

        Returns:
            Path of the temporary file; the caller owns and removes it

        Raises:
            AcquisitionError: network error, non-2xx status or deadline exceeded
        """
        logger.step(3, f"Downloading document: {url}")

        tmp = tempfile.NamedTemporaryFile(
            prefix=Settings.TEMP_FILE_PREFIX,
            suffix=Settings.TEMP_FILE_SUFFIX,
            dir=self.temp_dir,
            delete=False,
        )
        path = Path(tmp.name)

        try:
            with tmp:
                size = self._fetch(url, tmp)
        except BaseException:
            self.remove(path)
            raise

        logger.metric("Bytes downloaded", size)
        logger.success(f"Downloaded to {path}")
        return path

    def _fetch(self, url: str, out) -> int:
        """Stream the response body into ``out`` and return its size."""
        timeout_s = self.timeout / 1000
        deadline = self.clock() + timeout_s
        session = self.session or requests.Session()
        size = 0

        try:
            with session.get(
                url,
                headers=BrowserProfiles.get_download_headers(),
                stream=True,
                timeout=timeout_s,
            ) as response:
                if not 200 <= response.status_code < 300:
                    raise AcquisitionError(
                        url, f"bad status: {response.status_code} {response.reason}"
                    )

                for chunk in response.iter_content(chunk_size=self.chunk_size):
                    if self.clock() > deadline:
                        raise AcquisitionError(
                            url, f"download did not finish within {self.timeout}ms"
                        )
                    if chunk:
                        out.write(chunk)
                        size += len(chunk)

        except requests.exceptions.Timeout as e:
            raise AcquisitionError(url, f"download timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise AcquisitionError(url, f"error downloading file: {e}") from e
        except OSError as e:
            raise AcquisitionError(url, f"error saving file: {e}") from e
        finally:
            if self.session is None:
                session.close()

        return size

    @staticmethod
    def remove(path: Path):
        """Remove a temporary file, ignoring one that is already gone."""
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to remove temporary file {path}: {e}")
