from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, List, Optional, Union

import httpx

log = logging.getLogger("harvest_api.errors")

REDACTED = "REDACTED"
SECRET_PARAMS = ("client_secret",)


class HarvestClientError(Exception):
    """Base error for client failures."""


class HarvestConfigError(HarvestClientError, ValueError):
    """Raised when the client is configured in a way requests cannot be built from."""


class HarvestEncodeOptionsError(HarvestClientError):
    """Raised when list options cannot be turned into a query string."""


class HarvestEncodeBodyError(HarvestClientError):
    """Raised when a request body cannot be encoded as JSON."""


class HarvestBuildRequestError(HarvestClientError):
    """Raised when a request URL cannot be assembled."""


class HarvestParseError(HarvestClientError):
    """Raised when a successful response body does not decode into the expected model."""

    def __init__(self, message: str, *, response: Optional[httpx.Response] = None):
        super().__init__(message)
        self.response = response


class DateParseError(HarvestClientError, ValueError):
    """Raised when a date is not formatted as YYYY-MM-DD."""


class TimeParseError(HarvestClientError, ValueError):
    """Raised when a wall-clock time is not formatted as 15:04 or 3:04pm."""


class HarvestTransportError(HarvestClientError):
    def __init__(self, *, method: str, url: str, cause: BaseException):
        super().__init__(f"{method} {url}: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


@dataclass(frozen=True)
class ErrorDetail:
    """Detail on an individual field error in an API error body."""

    resource: str = ""
    field: str = ""
    code: str = ""
    message: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "ErrorDetail":
        if not isinstance(payload, dict):
            return cls(message=str(payload))
        return cls(
            resource=str(payload.get("resource") or ""),
            field=str(payload.get("field") or ""),
            code=str(payload.get("code") or ""),
            message=str(payload.get("message") or ""),
        )

    def __str__(self) -> str:
        return (
            f"{self.code} error caused by {self.field} field "
            f"on {self.resource} resource"
        )


@dataclass(frozen=True)
class Rate:
    # Requests allowed in the current window.
    limit: int = 0
    # Requests left in the current window.
    remaining: int = 0

    def __str__(self) -> str:
        return f"Rate{{limit:{self.limit}, remaining:{self.remaining}}}"


class HarvestHTTPError(HarvestClientError):
    """An API response outside the 2xx range."""

    def __init__(
        self,
        *,
        response: httpx.Response,
        message: str = "",
        errors: Optional[List[ErrorDetail]] = None,
        block_reason: Optional[str] = None,
        documentation_url: Optional[str] = None,
    ):
        self.response = response
        self.method = response.request.method
        self.url = str(sanitize_url(response.request.url))
        self.status_code = response.status_code
        self.message = message
        self.errors = list(errors or [])
        self.block_reason = block_reason
        self.documentation_url = documentation_url
        super().__init__(self._render())

    def _render(self) -> str:
        details = "[" + " ".join(str(e) for e in self.errors) + "]"
        return (
            f"{self.method} {self.url}: {self.status_code} {self.message} {details}"
        )


class HarvestRateLimitError(HarvestHTTPError):
    """429 with the rate limit exhausted for the current window."""

    def __init__(self, *, response: httpx.Response, message: str = "", rate: Rate):
        self.rate = rate
        super().__init__(response=response, message=message)

    def _render(self) -> str:
        return (
            f"{self.method} {self.url}: {self.status_code} {self.message} rate limit"
        )


class HarvestAbuseRateLimitError(HarvestHTTPError):
    """
    429 Too Many Requests.
    retry_after is set when the server sent a Retry-After header; otherwise
    the caller should back off for an unspecified time.
    """

    def __init__(
        self,
        *,
        response: httpx.Response,
        message: str = "",
        retry_after: Optional[timedelta] = None,
        documentation_url: Optional[str] = None,
    ):
        self.retry_after = retry_after
        super().__init__(
            response=response, message=message, documentation_url=documentation_url
        )

    def _render(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.message}"


def sanitize_url(url: Union[str, httpx.URL]) -> httpx.URL:
    """Redact secret query parameters so the URL can be shown to the user."""
    parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)
    for name in SECRET_PARAMS:
        if parsed.params.get(name):
            parsed = parsed.copy_set_param(name, REDACTED)
    return parsed


def _error_payload(response: httpx.Response) -> Dict[str, Any]:
    if not response.content:
        return {}
    try:
        parsed = response.json()
    except ValueError as exc:
        log.debug(
            "harvest.error_body_unparsed",
            extra={"status": response.status_code, "error": str(exc)},
        )
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _parse_retry_after(value: Optional[str]) -> Optional[timedelta]:
    if value is None:
        return None
    try:
        return timedelta(seconds=int(value.strip()))
    except ValueError:
        return None


def _parse_rate(headers: httpx.Headers) -> Optional[Rate]:
    remaining = headers.get("X-RateLimit-Remaining")
    if remaining is None:
        return None
    try:
        return Rate(
            limit=int(headers.get("X-RateLimit-Limit", "0")),
            remaining=int(remaining),
        )
    except ValueError:
        return None


def check_response(response: httpx.Response) -> Optional[HarvestHTTPError]:
    """
    Classify a response. Returns None for 2xx, otherwise the error to raise.
    The response body must already be read.
    """
    if 200 <= response.status_code <= 299:
        return None

    payload = _error_payload(response)
    message = str(payload.get("message") or payload.get("error_description") or "")

    if response.status_code == 429:
        documentation_url = payload.get("documentation_url")
        retry_after_header = response.headers.get("Retry-After")
        if retry_after_header is None:
            rate = _parse_rate(response.headers)
            if rate is not None and rate.remaining == 0:
                return HarvestRateLimitError(
                    response=response, message=message, rate=rate
                )
        return HarvestAbuseRateLimitError(
            response=response,
            message=message,
            retry_after=_parse_retry_after(retry_after_header),
            documentation_url=documentation_url,
        )

    block = payload.get("block")
    return HarvestHTTPError(
        response=response,
        message=message,
        errors=[ErrorDetail.from_payload(e) for e in payload.get("errors") or []],
        block_reason=block.get("reason") if isinstance(block, dict) else None,
        documentation_url=payload.get("documentation_url"),
    )


__all__ = [
    "HarvestClientError",
    "HarvestConfigError",
    "HarvestEncodeOptionsError",
    "HarvestEncodeBodyError",
    "HarvestBuildRequestError",
    "HarvestParseError",
    "HarvestTransportError",
    "HarvestHTTPError",
    "HarvestRateLimitError",
    "HarvestAbuseRateLimitError",
    "DateParseError",
    "TimeParseError",
    "ErrorDetail",
    "Rate",
    "check_response",
    "sanitize_url",
]
