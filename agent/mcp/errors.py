"""
Error taxonomy and classifier for fal.ai tool calls.

Every failure that can happen while serving a tool call is one of these
exception types. None of them terminate the process: the Dispatcher catches
them and turns them into an error-flagged ToolResponse.

Classification precedence (first match wins):
  1. Timeout              → suggest increasing FAL_TIMEOUT
  2. HTTP 401 / 403       → invalid API key
  3. HTTP 429             → rate limit
  4. HTTP 422             → upstream validation error (surfaces `detail`)
  5. ENOTFOUND/ECONNREFUSED → fal.ai unreachable
  6. anything else        → generic message embedding the raw error text
"""

import socket
from typing import Any, Iterator, Optional


AUTH_STATUS_CODES = (401, 403)
RATE_LIMIT_STATUS_CODE = 429
VALIDATION_STATUS_CODE = 422
NETWORK_ERROR_CODES = ("ENOTFOUND", "ECONNREFUSED")


class FalMediaError(Exception):
    """
    Base class for all recoverable tool-call failures.

    `message` is the user-facing text; `detail` keeps the raw diagnostic.
    """

    def __init__(self, message: str, detail: str = ""):
        self.message = message
        self.detail = detail
        super().__init__(message)


# ──────────────────────────────────────────────────────────────
# VALIDATION
# ──────────────────────────────────────────────────────────────


class ValidationFailure(FalMediaError):
    """Raised by the validator. The upstream call is never attempted."""


class UnknownOperation(ValidationFailure):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingField(ValidationFailure):
    def __init__(self, operation: str, field: str):
        self.operation = operation
        self.field = field
        super().__init__(
            f"Invalid arguments for {operation}: missing required field '{field}'"
        )


class InvalidField(ValidationFailure):
    def __init__(self, operation: str, field: str, reason: str):
        self.operation = operation
        self.field = field
        self.reason = reason
        super().__init__(
            f"Invalid arguments for {operation}: field '{field}' {reason}",
            detail=reason,
        )


# ──────────────────────────────────────────────────────────────
# UPSTREAM
# ──────────────────────────────────────────────────────────────


class UpstreamTimeout(FalMediaError):
    def __init__(self, timeout_s: float):
        self.timeout_s = timeout_s
        super().__init__(
            "fal.ai request timed out. This model may take longer; "
            "try again or increase FAL_TIMEOUT.",
            detail=f"no response after {timeout_s:g}s",
        )


class UpstreamAuthError(FalMediaError):
    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        super().__init__(
            "Invalid fal.ai API key. Please check your FAL_KEY environment variable.",
            detail=detail,
        )


class UpstreamRateLimit(FalMediaError):
    def __init__(self, detail: str = ""):
        self.status_code = RATE_LIMIT_STATUS_CODE
        super().__init__(
            "fal.ai rate limit exceeded. Please wait a moment and try again.",
            detail=detail,
        )


class UpstreamValidationError(FalMediaError):
    def __init__(self, detail: str):
        self.status_code = VALIDATION_STATUS_CODE
        super().__init__(f"fal.ai validation error: {detail}", detail=detail)


class NetworkUnreachable(FalMediaError):
    def __init__(self, code: str, detail: str):
        self.code = code
        super().__init__(f"Failed to connect to fal.ai API: {detail}", detail=detail)


class UpstreamError(FalMediaError):
    """Fallback for upstream failures no other rule matched."""

    def __init__(self, detail: str):
        super().__init__(f"fal.ai API error: {detail}", detail=detail)


# ──────────────────────────────────────────────────────────────
# RESULT HANDLING
# ──────────────────────────────────────────────────────────────


class NoArtifactProduced(FalMediaError):
    """Extraction found no locator. Not a failure for inspection tools."""


class DownloadFailed(FalMediaError):
    def __init__(self, status_text: str, url: str = ""):
        self.status_text = status_text
        self.url = url
        super().__init__(f"Failed to download result: {status_text}", detail=url)


# ──────────────────────────────────────────────────────────────
# CLASSIFIER
# ──────────────────────────────────────────────────────────────


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield exc and everything it was raised from, without cycles."""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _status_code(exc: BaseException) -> Optional[int]:
    """
    HTTP status of an upstream failure, if any.

    fal_client raises FalClientHTTPError (status_code attribute) on recent
    versions and a plain FalClientError chained from httpx.HTTPStatusError on
    older ones, so both shapes are probed along the cause chain.
    """
    for item in _exception_chain(exc):
        for attr in ("status_code", "status"):
            value = getattr(item, attr, None)
            if isinstance(value, int):
                return value
        response = getattr(item, "response", None)
        value = getattr(response, "status_code", None)
        if isinstance(value, int):
            return value
    return None


def _upstream_detail(exc: BaseException) -> str:
    """The `detail` field of an upstream error body, else the error text."""
    for item in _exception_chain(exc):
        response = getattr(item, "response", None)
        if response is None:
            continue
        try:
            body: Any = response.json()
        except Exception:
            continue
        if isinstance(body, dict) and body.get("detail"):
            detail = body["detail"]
            return detail if isinstance(detail, str) else str(detail)
    return str(exc) or type(exc).__name__


def _connection_error_code(exc: BaseException) -> Optional[str]:
    """Map DNS failures and refused connections to their errno names."""
    for item in _exception_chain(exc):
        code = getattr(item, "code", None)
        if code in NETWORK_ERROR_CODES:
            return code
        if isinstance(item, socket.gaierror):
            return "ENOTFOUND"
        if isinstance(item, ConnectionRefusedError):
            return "ECONNREFUSED"
    return None


def classify_exception(exc: BaseException) -> FalMediaError:
    """Map a raised upstream failure onto the error taxonomy."""
    if isinstance(exc, FalMediaError):
        return exc

    status = _status_code(exc)
    if status in AUTH_STATUS_CODES:
        return UpstreamAuthError(status, detail=str(exc))
    if status == RATE_LIMIT_STATUS_CODE:
        return UpstreamRateLimit(detail=str(exc))
    if status == VALIDATION_STATUS_CODE:
        return UpstreamValidationError(_upstream_detail(exc))

    code = _connection_error_code(exc)
    if code is not None:
        return NetworkUnreachable(code, str(exc) or code)

    return UpstreamError(str(exc) or type(exc).__name__)


def classify_error(exc: BaseException) -> str:
    """User-facing message for any failure raised during a tool call."""
    return classify_exception(exc).message
