# src/inspector/services/page_loader_service.py
import logging
import platform
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import requests

from sitelens_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)


class PageLoadError(Exception):
    """Raised when the HTML of a source cannot be obtained."""


def generate_default_user_agent() -> str:
    """
    Generates a generic Chrome user agent string based on the operating system
    and the version configured under 'loader.chrome_version'.
    """
    os_name = platform.system()
    if os_name == "Windows":
        os_part = "Windows NT 10.0; Win64; x64"
    elif os_name == "Darwin":
        os_part = "Macintosh; Intel Mac OS X 10_15_7"
    elif os_name == "Linux":
        os_part = "X11; Linux x86_64"
    else:
        os_part = "Unknown OS"

    chrome_version = config_manager.get_nested("loader.chrome_version", "120.0.0.0")
    return (
        f"Mozilla/5.0 ({os_part}) AppleWebKit/537.36 (KHTML, like Gecko) "
        f"Chrome/{chrome_version} Safari/537.36"
    )


class PageLoaderService:
    """
    Obtains raw HTML for analysis, either from a local file or over http(s).
    The HTML is returned as-is; parsing is left to the DOMBuilder.
    """

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None):
        self.timeout = timeout if timeout is not None else float(config_manager.get_nested("loader.timeout", 15))
        self.user_agent = user_agent or generate_default_user_agent()
        self._session: Optional[requests.Session] = None

    @staticmethod
    def is_url(source: str) -> bool:
        return urlparse(source).scheme in ("http", "https")

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"User-Agent": self.user_agent})
        return self._session

    def load(self, source: str) -> str:
        """
        Loads HTML from `source`.

        Args:
            source (str): An http(s) URL or a path to a local file.

        Returns:
            str: The raw HTML text.

        Raises:
            PageLoadError: If the file cannot be read or the request fails.
        """
        if self.is_url(source):
            return self.fetch(source)
        scheme = urlparse(source).scheme
        # Single letters are Windows drive prefixes, not schemes.
        if scheme and len(scheme) > 1 and scheme != "file":
            raise PageLoadError(f"Unsupported source scheme '{scheme}': {source}")
        return self.read_file(urlparse(source).path if scheme == "file" else source)

    @staticmethod
    def read_file(path: str) -> str:
        file_path = Path(path).expanduser()
        try:
            html = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise PageLoadError(f"Could not read {file_path}: {e}") from e
        logger.debug("Read %d characters from %s", len(html), file_path)
        return html

    def fetch(self, url: str) -> str:
        try:
            response = self._get_session().get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise PageLoadError(f"HTTP error while fetching {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise PageLoadError(f"Request failed for {url}: {e}") from e

        logger.info("Fetched %s (%d, %d bytes)", url, response.status_code, len(response.content))
        return response.text

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
