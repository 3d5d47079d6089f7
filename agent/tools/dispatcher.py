"""
Dispatcher: one generic pipeline for every catalogue operation.

  RECEIVED → VALIDATING → INVOKING → EXTRACTING → PERSISTING → RESPONDED

Every path ends in RESPONDED with exactly one ToolResponse:
- validation failure     → error, upstream never called
- upstream failure       → classified error message
- nothing extracted      → error with the operation's hint, or the raw
                           payload for inspection tools (segment, depth)
- download failure       → error naming the HTTP status
- success                → message naming the saved path

The dispatcher is the single recovery boundary: it never raises.
"""

import json
import logging
import time
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import httpx

from agent.mcp.errors import (
    DownloadFailed,
    FalMediaError,
    NoArtifactProduced,
    classify_exception,
)
from agent.mcp.fal_invoker import FalInvoker
from agent.storage.persister import ArtifactPersister
from agent.tools.base import LatencyClass, MediaKind, Operation, ToolResponse
from agent.tools.extraction import extract_urls
from agent.tools.validation import ValidatedArgs, validate


logger = logging.getLogger(__name__)


class InvocationState(str, Enum):
    RECEIVED = "received"
    VALIDATING = "validating"
    INVOKING = "invoking"
    EXTRACTING = "extracting"
    PERSISTING = "persisting"
    RESPONDED = "responded"


# Media kinds whose "nothing produced" error also shows the raw payload.
RAW_ON_EMPTY_KINDS = (MediaKind.AUDIO, MediaKind.MODEL_3D)


def format_raw(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _raw_report(heading: str, data: Any) -> str:
    return f"{heading}\n\nRaw result:\n{format_raw(data)}"


def _saved_text(operation: Operation, path: Any, urls: List[str], data: Any) -> str:
    parts = [operation.saved_message.format(path=path)]
    if operation.kind is MediaKind.IMAGE:
        if len(urls) > 1:
            parts.append(f"\nAdditional images: {', '.join(urls[1:])}")
        if isinstance(data, dict) and data.get("seed") is not None:
            parts.append(f"\nSeed: {data['seed']}")
    return "".join(parts)


class Dispatcher:
    """
    Runs tool calls end to end.

    Usage:
        dispatcher = Dispatcher(invoker, persister)
        response = await dispatcher.dispatch("generate_image", {"prompt": "a fox"})
    """

    def __init__(self, invoker: FalInvoker, persister: ArtifactPersister):
        self._invoker = invoker
        self._persister = persister

    async def dispatch(
        self, name: str, arguments: Optional[Mapping[str, Any]]
    ) -> ToolResponse:
        """Execute one tool call. Never raises."""
        start = time.time()
        state = InvocationState.RECEIVED
        logger.info(f"Tool call received: {name}")

        try:
            state = InvocationState.VALIDATING
            validated = validate(name, arguments)

            state = InvocationState.INVOKING
            try:
                upstream = await self._invoker.invoke(
                    validated.operation, validated.upstream_input
                )
            except FalMediaError:
                raise
            except Exception as e:
                raise classify_exception(e) from e

            state = InvocationState.EXTRACTING
            urls = extract_urls(validated.operation.kind, upstream.data)

            state = InvocationState.PERSISTING
            text = await self._respond(validated, urls, upstream.data)
            response = ToolResponse(text=text)

        except FalMediaError as e:
            logger.warning(f"{name} failed while {state.value}: {e.message}")
            response = ToolResponse(text=e.message, is_error=True)

        except Exception as e:
            logger.error(f"{name} failed unexpectedly while {state.value}: {e}", exc_info=True)
            response = ToolResponse(text=f"{name} failed: {e}", is_error=True)

        response.execution_time_ms = int((time.time() - start) * 1000)
        logger.info(
            f"Tool call {name} responded "
            f"({'error' if response.is_error else 'success'}, {response.execution_time_ms}ms)"
        )
        return response

    async def _respond(self, validated: ValidatedArgs, urls: List[str], data: Any) -> str:
        operation = validated.operation

        if operation.inspection:
            report = _raw_report(operation.empty_message, data)
            if not urls or not (validated.save_path or operation.auto_save):
                return report
            path = await self._persist(validated, urls[0])
            saved = operation.saved_message.format(path=path)
            return saved if operation.auto_save else f"{report}\n\n{saved}"

        if not urls:
            message = operation.empty_message
            if operation.kind in RAW_ON_EMPTY_KINDS:
                message = _raw_report(message, data)
            raise NoArtifactProduced(message)

        path = await self._persist(validated, urls[0])
        return _saved_text(operation, path, urls, data)

    async def _persist(self, validated: ValidatedArgs, url: str):
        operation = validated.operation
        try:
            return await self._persister.persist(
                url,
                target_path=validated.save_path,
                prefix=operation.prefix,
                extension=operation.extension_for(validated.args),
            )
        except httpx.HTTPError as e:
            raise DownloadFailed(str(e) or type(e).__name__, url=url) from e

    def describe(self) -> Dict[str, Any]:
        """Non-sensitive runtime info for startup logging."""
        return {
            "short_timeout_s": self._invoker.timeout_for(LatencyClass.SHORT),
            "long_timeout_s": self._invoker.timeout_for(LatencyClass.LONG),
            "output_dir": str(self._persister.output_dir),
        }
