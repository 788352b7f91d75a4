"""HTTP client used to pull pages for extraction."""

import time
from typing import Any, Dict, Optional, Tuple, Union

import httpx
import structlog

from .models import PageResult
from .params import RequestParams

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class WebClient:
    """Thin httpx wrapper with scraping-friendly defaults."""

    def __init__(
        self,
        timeout: float = 10.0,
        read_write_timeout: float = 10.0,
        verify_certificates: bool = False,
        follow_redirects: bool = True,
        user_agent: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize web client.

        Args:
            timeout: Connect/pool timeout (seconds)
            read_write_timeout: Socket read and write timeout (seconds)
            verify_certificates: Validate server TLS certificates
            follow_redirects: Follow 3xx responses
            user_agent: User-Agent header (defaults to a desktop Chrome string)
            headers: Extra default headers
            transport: Custom httpx transport (used by tests)
        """
        self.timeout = timeout
        self.read_write_timeout = read_write_timeout
        self.verify_certificates = verify_certificates
        self.user_agent = user_agent or DEFAULT_USER_AGENT

        default_headers = {
            "User-Agent": self.user_agent,
            "Accept-Encoding": "gzip, deflate",
        }
        default_headers.update(headers or {})

        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout, read=read_write_timeout, write=read_write_timeout),
            verify=verify_certificates,
            follow_redirects=follow_redirects,
            headers=default_headers,
            transport=transport,
        )

        logger.debug(
            "client_initialized",
            timeout=timeout,
            read_write_timeout=read_write_timeout,
            verify_certificates=verify_certificates,
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any], **overrides: Any) -> "WebClient":
        """Build a client from the ``client`` section of the settings file."""
        options = {
            "timeout": config.get("timeout", 10.0),
            "read_write_timeout": config.get("read_write_timeout", 10.0),
            "verify_certificates": config.get("verify_certificates", False),
            "follow_redirects": config.get("follow_redirects", True),
            "user_agent": config.get("user_agent"),
        }
        options.update(overrides)
        return cls(**options)

    def get(self, url: str, params: Optional[RequestParams] = None) -> PageResult:
        """
        Fetch ``url``.

        Args:
            url: Absolute URL
            params: Query parameters appended in insertion order

        Returns:
            PageResult; non-2xx responses have ``success=False``
        """
        return self._request("GET", _with_query(url, params))

    def post(self, url: str, data: Union[RequestParams, str, None] = None) -> PageResult:
        """POST form parameters or a raw urlencoded string."""
        body = data.query if isinstance(data, RequestParams) else (data or "")
        return self._request(
            "POST",
            url,
            content=body.encode("utf-8"),
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    def get_text(self, url: str, params: Optional[RequestParams] = None) -> str:
        """
        Fetch ``url`` and return the decoded body.

        Raises:
            httpx.HTTPStatusError: for non-2xx responses
            httpx.HTTPError: for transport failures
        """
        response, _ = self._send("GET", _with_query(url, params))
        response.raise_for_status()
        return response.text

    def _request(self, method: str, url: str, **kwargs: Any) -> PageResult:
        response, duration_ms = self._send(method, url, **kwargs)
        return PageResult(
            url=str(response.url),
            status_code=response.status_code,
            success=response.is_success,
            text=response.text,
            content_type=response.headers.get("Content-Type"),
            error=None if response.is_success else f"HTTP {response.status_code}",
            duration_ms=duration_ms,
        )

    def _send(self, method: str, url: str, **kwargs: Any) -> Tuple[httpx.Response, int]:
        start_time = time.time()
        logger.debug("request_started", method=method, url=url)

        response = self._client.request(method, url, **kwargs)
        duration_ms = int((time.time() - start_time) * 1000)

        if response.is_success:
            logger.info(
                "request_completed",
                method=method,
                url=url,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
        else:
            logger.warning(
                "request_failed",
                method=method,
                url=url,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
        return response, duration_ms

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "WebClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _with_query(url: str, params: Optional[RequestParams]) -> str:
    """Append ``params`` to ``url``, keeping any query it already has."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{params.query}"
