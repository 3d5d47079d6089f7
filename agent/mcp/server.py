"""
MCP server binding.

Maps the protocol surface onto the dispatcher and prompt guides:

  tools/list    → catalogue operations, in catalogue order
  tools/call    → Dispatcher.dispatch() → one TextContent (+ isError)
  prompts/list  → PROMPT_GUIDES
  prompts/get   → build_prompt()

Error responses are produced by raising ToolCallError from the call handler;
the mcp Server turns any handler exception into a result with isError=True
and the exception text as its only content.
"""

import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from agent.prompting import PROMPT_GUIDES, build_prompt
from agent.tools.catalogue import list_operations
from agent.tools.dispatcher import Dispatcher


logger = logging.getLogger(__name__)


SERVER_NAME = "fal-ai-mcp-server"
SERVER_VERSION = "1.0.0"


class ToolCallError(Exception):
    """Carries an error ToolResponse text out of the call handler."""


def list_tools() -> List[types.Tool]:
    return [
        types.Tool(
            name=operation.name,
            description=operation.description,
            inputSchema=operation.input_schema().model_dump(),
        )
        for operation in list_operations()
    ]


def list_prompts() -> List[types.Prompt]:
    return [
        types.Prompt(
            name=guide.name,
            description=guide.description,
            arguments=[
                types.PromptArgument(
                    name="request",
                    description="What the user wants to create",
                    required=False,
                )
            ],
        )
        for guide in PROMPT_GUIDES.values()
    ]


def get_prompt(name: str, arguments: Optional[Dict[str, str]] = None) -> types.GetPromptResult:
    guide = PROMPT_GUIDES.get(name)
    if guide is None:
        raise ValueError(f"Unknown prompt: {name}")

    text = build_prompt(name, (arguments or {}).get("request"))
    return types.GetPromptResult(
        description=guide.description,
        messages=[
            types.PromptMessage(
                role="user",
                content=types.TextContent(type="text", text=text),
            )
        ],
    )


def build_server(dispatcher: Dispatcher) -> Server:
    """Create the MCP server with all handlers registered."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return list_tools()

    # Arguments are checked by the operation models, which produce the
    # error messages hosts see.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        response = await dispatcher.dispatch(name, arguments)
        if response.is_error:
            raise ToolCallError(response.text)
        return [types.TextContent(type="text", text=response.text)]

    @server.list_prompts()
    async def handle_list_prompts() -> List[types.Prompt]:
        return list_prompts()

    @server.get_prompt()
    async def handle_get_prompt(
        name: str, arguments: Optional[Dict[str, str]]
    ) -> types.GetPromptResult:
        return get_prompt(name, arguments)

    return server


async def run_stdio(server: Server) -> None:
    """Serve over stdin/stdout until the host disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"{SERVER_NAME} listening on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
