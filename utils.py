"""
Utility functions for fetching, URL handling, and common operations
"""
import re
import math
import time
import logging
import contextlib
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import requests
from bs4 import UnicodeDammit

logger = logging.getLogger(__name__)
perf_logger = logging.getLogger("performance")

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_WHITESPACE_RE = re.compile(r"\s+")
_DEFAULT_PORTS = {"http": 80, "https": 443}


class FetchError(Exception):
    """Raised when a page cannot be fetched or answers with a non-2xx status"""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


@dataclass(frozen=True)
class FetchedPage:
    url: str
    status_code: int
    html: str
    html_size: int


class PageFetcher:
    """Single-shot GET of a page with a fixed user agent, no retries"""

    def __init__(self, user_agent: str, timeout: int = 15, session: requests.Session = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        })

    def fetch(self, url: str) -> FetchedPage:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout error for {url}")
            raise FetchError(url, "timeout") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error for {url}")
            raise FetchError(url, "connection error") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for {url}: {e}")
            raise FetchError(url, str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"HTTP {response.status_code} for {url}")
            raise FetchError(url, f"HTTP {response.status_code} {response.reason or ''}".strip(),
                             status_code=response.status_code)

        html = decode_body(response)
        logger.debug(f"Successfully fetched {url}")
        return FetchedPage(
            url=url,
            status_code=response.status_code,
            html=html,
            html_size=len(response.content),
        )

    def close(self):
        self.session.close()


def decode_body(response: requests.Response) -> str:
    """
    Decode a response body to text.

    A charset in the Content-Type header is trusted. Without one, requests
    would fall back to ISO-8859-1 for text/html, so the raw bytes are handed
    to UnicodeDammit instead, which reads <meta charset> and sniffs the rest.
    """
    content_type = response.headers.get('Content-Type') or ''
    declared = []
    if 'charset=' in content_type.lower() and response.encoding:
        declared.append(response.encoding)
    dammit = UnicodeDammit(response.content, known_definite_encodings=declared, is_html=True)
    return dammit.unicode_markup or ""


def validate_url(url: str) -> bool:
    """Validate that a URL is absolute http(s) with a host"""
    try:
        result = urlparse(url)
        return result.scheme in ("http", "https") and bool(result.hostname)
    except ValueError:
        return False


def url_origin(url: str) -> str:
    """scheme://host[:port] of a URL, default ports dropped"""
    parsed = urlparse(url)
    host = parsed.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    try:
        port = parsed.port
    except ValueError:
        port = None
    if port is not None and port != _DEFAULT_PORTS.get(parsed.scheme):
        host = f"{host}:{port}"
    return f"{parsed.scheme}://{host}"


def url_hostname(url: str) -> str:
    return urlparse(url).hostname or ""


def has_scheme(value: str) -> bool:
    return bool(_SCHEME_RE.match(value))


def resolve_against_origin(path: str, base_url: str) -> str:
    """
    Join a relative path onto the origin of ``base_url``.

    Paths are always taken relative to the site root: "logo.png" and
    "/logo.png" both land on "<origin>/logo.png". Dot segments are kept
    as-is.
    """
    origin = url_origin(base_url)
    if path.startswith("/"):
        return f"{origin}{path}"
    return f"{origin}/{path}"


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives, like Math.round"""
    return int(math.floor(value + 0.5))


def safe_extract_text(element, default: str = "") -> str:
    """Safely extract text from BeautifulSoup element"""
    if element is None:
        return default
    return element.get_text()


def safe_extract_attribute(element, attribute: str, default: str = "") -> str:
    """Safely extract attribute from BeautifulSoup element"""
    if element is None:
        return default
    value = element.get(attribute)
    if value is None:
        return default
    # multi-valued attributes such as rel/class come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return value


class PerformanceMonitor:
    """Times pipeline stages and logs them to the performance logger"""

    def __init__(self):
        self.metrics = {}

    def start_timer(self, operation: str):
        self.metrics[operation] = {'start': time.perf_counter()}

    def end_timer(self, operation: str) -> float:
        if operation not in self.metrics:
            return 0
        duration = time.perf_counter() - self.metrics[operation]['start']
        self.metrics[operation]['duration'] = duration
        perf_logger.info(f"Operation '{operation}' completed in {duration:.3f} seconds")
        return duration

    @contextlib.contextmanager
    def measure(self, operation: str):
        self.start_timer(operation)
        try:
            yield
        finally:
            self.end_timer(operation)

    def get_metrics(self) -> dict:
        """Get all recorded metrics"""
        return {name: dict(values) for name, values in self.metrics.items()}
