"""Documentation reference for a single indicator."""

import subprocess
import sys
from dataclasses import dataclass, field
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import ParseResult, urlparse
from urllib.request import Request, urlopen

from ..errors import DocumentationFetchError
from ..logging.config import get_help_logger
from .catalog import Category, IndicatorInfo

logger = get_help_logger(__name__)


def build_url(base_url: str, path: str) -> str:
    """Documentation URLs are ``<base_url>/<path>/``."""
    return f"{base_url.rstrip('/')}/{path.strip('/')}/"


def browser_command(url: str, platform: Optional[str] = None) -> Optional[list[str]]:
    """
    Command that opens ``url`` in the desktop's default viewer.

    Returns:
        The argv to run, or None when the platform has no known launcher
    """
    platform = platform or sys.platform

    if platform == "darwin":
        return ["open", url]
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        return ["xdg-open", url]
    if platform in ("win32", "cygwin"):
        # The empty argument is the window title expected by ``start``
        return ["cmd", "/c", "start", "", url]
    return None


@dataclass(frozen=True)
class HelpResource:
    """Resolved documentation reference: name, category and URL of one indicator."""
    indicator: str
    name: str
    category: Category
    url: str
    fetch_timeout: float = field(default=10.0, repr=False, compare=False)
    user_agent: str = field(default="tai-app/0.1", repr=False, compare=False)

    @classmethod
    def from_info(cls, info: IndicatorInfo, base_url: str, **kwargs) -> "HelpResource":
        return cls(
            indicator=info.key,
            name=info.name,
            category=info.category,
            url=build_url(base_url, info.path),
            **kwargs
        )

    @property
    def uri(self) -> ParseResult:
        """The documentation URL, parsed."""
        return urlparse(self.url)

    def open(self, platform: Optional[str] = None) -> "HelpResource":
        """
        Open the documentation page in the platform's browser.

        Unsupported platforms and missing launchers are logged as warnings;
        this never raises.

        Returns:
            self, for chaining
        """
        command = browser_command(self.url, platform)

        if command is None:
            logger.warning(
                "Unable to open browser on this platform",
                platform=platform or sys.platform,
                url=self.url
            )
            return self

        try:
            subprocess.run(command, check=False)
        except OSError as e:
            logger.warning(
                "Browser launcher failed",
                command=command[0],
                url=self.url,
                error=str(e)
            )

        return self

    def fetch(self, timeout: Optional[float] = None) -> str:
        """
        Download the documentation page.

        Args:
            timeout: Seconds to wait for the server (defaults to ``fetch_timeout``)

        Returns:
            The page body as text

        Raises:
            DocumentationFetchError: On HTTP errors or network failures
        """
        request = Request(self.url, headers={"User-Agent": self.user_agent}, method="GET")

        try:
            with urlopen(request, timeout=timeout or self.fetch_timeout) as response:
                charset = response.headers.get_content_charset() or "utf-8"
                content = response.read().decode(charset, errors="replace")

        except HTTPError as e:
            logger.warning(
                "Documentation fetch HTTP error",
                url=self.url,
                error_code=e.code,
                error_reason=str(e.reason)
            )
            raise DocumentationFetchError(
                f"HTTP {e.code}: {e.reason}", url=self.url, status_code=e.code
            ) from e

        except (URLError, OSError) as e:
            logger.warning("Documentation fetch network error", url=self.url, error=str(e))
            raise DocumentationFetchError(f"Network error: {e}", url=self.url) from e

        logger.info("Fetched documentation", url=self.url, size=len(content))
        return content

    def to_dict(self) -> dict:
        return {"name": self.name, "category": self.category, "url": self.url}

    def __str__(self) -> str:
        return "\n".join([
            f"Indicator: {self.indicator.upper()} ({self.name})",
            f"Category:  {self.category.label}",
            f"Website:   {self.url}",
        ])

    def __repr__(self) -> str:
        return f"<HelpResource {self.indicator} ({self.category.value}): {self.url}>"
