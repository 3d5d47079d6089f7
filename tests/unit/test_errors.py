"""
tests/unit/test_errors.py

Tests for upstream error classification.

Verifies:
✔ 401 / 403 → invalid API key
✔ 429 → rate limit
✔ 422 → validation error surfacing the upstream `detail`
✔ DNS failure / refused connection → unreachable
✔ Anything else → generic message with the raw text
✔ Status found on the exception, on .response, or along the cause chain
✔ Precedence: status rules win over network codes
✔ Already-classified errors pass through unchanged
"""

import socket

import httpx
import pytest

from agent.mcp.errors import (
    DownloadFailed,
    NetworkUnreachable,
    UpstreamAuthError,
    UpstreamError,
    UpstreamRateLimit,
    UpstreamTimeout,
    UpstreamValidationError,
    classify_error,
    classify_exception,
)


class StatusError(Exception):
    def __init__(self, message, status_code=None, code=None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


def http_status_error(status, body=None):
    request = httpx.Request("POST", "https://queue.fal.run/fal-ai/flux")
    response = httpx.Response(status, json=body if body is not None else {}, request=request)
    return httpx.HTTPStatusError(f"HTTP {status}", request=request, response=response)


# ─────────────────────────────────────────────────────
# Status-code rules
# ─────────────────────────────────────────────────────


class TestStatusRules:
    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_failure(self, status):
        result = classify_exception(StatusError("denied", status_code=status))
        assert isinstance(result, UpstreamAuthError)
        assert result.message == (
            "Invalid fal.ai API key. Please check your FAL_KEY environment variable."
        )

    def test_rate_limit(self):
        result = classify_exception(StatusError("slow down", status_code=429))
        assert isinstance(result, UpstreamRateLimit)
        assert "rate limit" in result.message

    def test_validation_error_uses_body_detail(self):
        exc = http_status_error(422, {"detail": "prompt is too long"})
        result = classify_exception(exc)
        assert isinstance(result, UpstreamValidationError)
        assert result.message == "fal.ai validation error: prompt is too long"

    def test_validation_error_without_body_uses_text(self):
        result = classify_exception(StatusError("bad input", status_code=422))
        assert result.message == "fal.ai validation error: bad input"

    def test_status_on_response_attribute(self):
        assert isinstance(classify_exception(http_status_error(401)), UpstreamAuthError)

    def test_status_found_along_cause_chain(self):
        wrapper = RuntimeError("request failed")
        wrapper.__cause__ = http_status_error(429)
        assert isinstance(classify_exception(wrapper), UpstreamRateLimit)

    def test_status_beats_network_code(self):
        exc = StatusError("both", status_code=401, code="ENOTFOUND")
        assert isinstance(classify_exception(exc), UpstreamAuthError)

    def test_other_status_is_generic(self):
        result = classify_exception(StatusError("server exploded", status_code=500))
        assert isinstance(result, UpstreamError)
        assert result.message == "fal.ai API error: server exploded"


# ─────────────────────────────────────────────────────
# Network rules
# ─────────────────────────────────────────────────────


class TestNetworkRules:
    @pytest.mark.parametrize("code", ["ENOTFOUND", "ECONNREFUSED"])
    def test_code_attribute(self, code):
        result = classify_exception(StatusError("cannot reach host", code=code))
        assert isinstance(result, NetworkUnreachable)
        assert result.message == "Failed to connect to fal.ai API: cannot reach host"

    def test_dns_failure(self):
        exc = httpx.ConnectError("name resolution failed")
        exc.__cause__ = socket.gaierror(-2, "Name or service not known")
        result = classify_exception(exc)
        assert isinstance(result, NetworkUnreachable)
        assert result.code == "ENOTFOUND"

    def test_connection_refused(self):
        exc = httpx.ConnectError("connect failed")
        exc.__context__ = ConnectionRefusedError(111, "Connection refused")
        result = classify_exception(exc)
        assert result.code == "ECONNREFUSED"

    def test_unrelated_code_is_generic(self):
        result = classify_exception(StatusError("reset", code="ECONNRESET"))
        assert isinstance(result, UpstreamError)


class TestPassThrough:
    def test_timeout_unchanged(self):
        timeout = UpstreamTimeout(120.0)
        assert classify_exception(timeout) is timeout
        assert "timed out" in classify_error(timeout)
        assert "FAL_TIMEOUT" in classify_error(timeout)

    def test_download_failure_message(self):
        assert classify_error(DownloadFailed("Not Found")) == "Failed to download result: Not Found"

    def test_empty_message_falls_back_to_type_name(self):
        assert classify_error(RuntimeError()) == "fal.ai API error: RuntimeError"

    def test_cyclic_chain_terminates(self):
        first = RuntimeError("first")
        second = RuntimeError("second")
        first.__cause__ = second
        second.__cause__ = first
        assert classify_error(first) == "fal.ai API error: first"
