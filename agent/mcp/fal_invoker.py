"""
fal.ai Upstream Invoker.

Submits one job per tool call to fal.ai through the official async client
and waits for its result under a deadline.

Timeout policy:
  LatencyClass.SHORT  → FAL_TIMEOUT
  LatencyClass.LONG   → FAL_TIMEOUT × 5   (video, long audio, 3D)

Invariants:
- Exactly one upstream call per invoke(); no retries, no parallel calls
- On deadline the pending call is cancelled and UpstreamTimeout is raised;
  its result can never surface later
- Transport errors propagate unchanged for the error classifier
- API key never logged
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import fal_client

from agent.mcp.errors import UpstreamTimeout
from agent.tools.base import LatencyClass, Operation


logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT_MS = 120_000


@dataclass
class UpstreamResponse:
    """Opaque upstream payload plus the fal request id (logging only)."""

    data: Any
    request_id: Optional[str] = None


class FalInvoker:
    """
    Runs catalogue operations against fal.ai.

    Usage:
        invoker = FalInvoker(api_key=config.api_key, timeout_ms=config.timeout_ms)
        response = await invoker.invoke(operation, {"prompt": "a red fox"})
    """

    LONG_RUNNING_MULTIPLIER: int = 5

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        client: Optional[Any] = None,
    ):
        """
        Args:
            api_key:    fal.ai key (FAL_KEY).
            timeout_ms: Base timeout budget for short operations.
            client:     Optional client exposing async submit(); defaults to
                        fal_client.AsyncClient.
        """
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        self.timeout_ms = timeout_ms
        self._client = client or fal_client.AsyncClient(key=api_key)

    def timeout_for(self, latency: LatencyClass) -> float:
        """Deadline in seconds for an operation's latency class."""
        budget_ms = self.timeout_ms
        if latency is LatencyClass.LONG:
            budget_ms *= self.LONG_RUNNING_MULTIPLIER
        return budget_ms / 1000.0

    async def invoke(self, operation: Operation, arguments: Dict[str, Any]) -> UpstreamResponse:
        """
        Call the operation's upstream model.

        Raises:
            UpstreamTimeout: the deadline passed first.
            Exception:       whatever the fal client raised (HTTP, network).
        """
        timeout_s = self.timeout_for(operation.latency)
        try:
            return await asyncio.wait_for(
                self._call(operation.model_id, arguments),
                timeout=timeout_s,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"{operation.name}: no result from {operation.model_id} within {timeout_s:g}s"
            )
            raise UpstreamTimeout(timeout_s) from None

    async def _call(self, model_id: str, arguments: Dict[str, Any]) -> UpstreamResponse:
        handle = await self._client.submit(model_id, arguments=arguments)
        request_id = getattr(handle, "request_id", None)
        logger.info(f"Submitted fal request {request_id} to {model_id}")

        data = await handle.get()
        logger.debug(f"fal request {request_id} completed")
        return UpstreamResponse(data=data, request_id=request_id)
