from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

if TYPE_CHECKING:
    from .config import ClientConfig
    from .envelope import ErrorDetail

DEFAULT_HOST_URL = "https://metadata.mastheadata.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
TOKEN_HEADER = "X-API-TOKEN"


class MastheadClientError(Exception):
    """Base error for client failures."""


class MissingTokenError(ValueError):
    """Raised when no API token is available."""


class MissingBaseUrlError(ValueError):
    """Raised when base URL is empty."""


class MastheadTransportError(MastheadClientError):
    def __init__(self, *, method: str, url: str, cause: BaseException):
        super().__init__(f"{method} {url}: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


class MastheadHTTPError(MastheadClientError):
    def __init__(self, *, status_code: int, method: str, url: str, body: str):
        super().__init__(f"{status_code} {method} {url}: {body}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body


class MastheadParseError(MastheadClientError):
    pass


class MastheadModelValidationError(MastheadParseError):
    pass


class MastheadAPIError(MastheadClientError):
    """Envelope carried an error field, regardless of HTTP status."""

    def __init__(self, detail: ErrorDetail, message: Optional[str] = None):
        text = f"error: {detail}"
        if message and message != detail.message:
            text = f"{text}. {message}"
        super().__init__(text)
        self.detail = detail
        self.message = message


class MastheadValidationError(MastheadClientError, ValueError):
    """Rejected locally before any request was issued."""


class MastheadNotFoundError(MastheadClientError, LookupError):
    pass


class MastheadClient:
    """
    Synchronous HTTP client for the Masthead client API.
    - Injects the X-API-TOKEN header, fixed timeout, no retries
    - Treats only HTTP 200 as success and returns the raw body
    - No envelope knowledge; resources decode and inspect envelopes
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_HOST_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        token = token or ""

        if not base_url:
            raise MissingBaseUrlError("base_url must be provided.")
        if not token:
            raise MissingTokenError("token must be provided.")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("masthead_client.client")
        self._token = token

        self._owns_http = http is None
        self.http = http or httpx.Client(
            base_url=self.base_url,
            timeout=timeout_seconds,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> MastheadClient:
        return cls(
            token=config.token,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            **kwargs,
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> MastheadClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"MastheadClient(base_url={self.base_url!r})"

    def _headers(self, *, has_body: bool) -> Dict[str, str]:
        headers = {TOKEN_HEADER: self._token, "Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        resource: Optional[str] = None,
    ) -> bytes:
        """
        Execute a single request and return the raw response body.
        - Raises MastheadHTTPError on any status other than 200
        - Raises MastheadTransportError on network/TLS/timeout failures
        """
        method = method.upper()
        url = f"{self.base_url}{path}" if path.startswith("/") else path
        start = time.perf_counter()

        try:
            resp = self.http.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(has_body=json is not None),
            )
        except httpx.HTTPError as exc:
            self.log.debug(
                "masthead.request_failed",
                extra={
                    "resource": resource,
                    "method": method,
                    "path": path,
                    "status": "transport_error",
                },
            )
            raise MastheadTransportError(method=method, url=url, cause=exc) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "masthead.request",
            extra={
                "resource": resource,
                "method": method,
                "path": path,
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        if resp.status_code != 200:
            raise MastheadHTTPError(
                status_code=resp.status_code,
                method=method,
                url=str(resp.request.url),
                body=resp.text,
            )

        return resp.content

    def get(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        resource: Optional[str] = None,
    ) -> bytes:
        return self.request("GET", path, params=params, resource=resource)

    def post(self, path: str, *, json: Any, resource: Optional[str] = None) -> bytes:
        return self.request("POST", path, json=json, resource=resource)

    def put(self, path: str, *, json: Any, resource: Optional[str] = None) -> bytes:
        return self.request("PUT", path, json=json, resource=resource)

    def delete(self, path: str, *, resource: Optional[str] = None) -> bytes:
        return self.request("DELETE", path, resource=resource)
