"""
fal.ai Media Server Entry Point

Serves the generative-media tool catalogue to an MCP host over stdio.

  - Loads configuration (FAL_KEY, FAL_TIMEOUT, FAL_OUTPUT_DIR, FAL_LOG_LEVEL)
  - Wires invoker, persister and dispatcher
  - Runs until the host disconnects or SIGINT/SIGTERM arrives

Exit status: 1 on configuration error, 0 otherwise.

Run: python main.py
"""

import asyncio
import logging
import signal
import sys
from typing import Optional

from agent.mcp.server import SERVER_NAME, SERVER_VERSION, build_server, run_stdio
from agent.tools.catalogue import list_operations
from infra import ConfigError, ServerConfig, bootstrap_server

# Setup logging (stdout carries the protocol, so logs go to stderr)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


async def serve(config: ServerConfig, stop: Optional[asyncio.Event] = None) -> None:
    """
    Run the stdio server until it ends or a shutdown signal arrives.

    Args:
        config: Loaded server configuration.
        stop:   Event that ends the run when set; SIGINT/SIGTERM set it.
    """
    bootstrap = bootstrap_server(config)
    dispatcher = bootstrap.get_dispatcher()
    info = dispatcher.describe()

    logger.info("=" * 60)
    logger.info(f"fal.ai MCP Server v{SERVER_VERSION} starting up...")
    logger.info(f"Tools: {len(list_operations())}")
    logger.info(f"Timeout: {info['short_timeout_s']:g}s (long-running: {info['long_timeout_s']:g}s)")
    logger.info(f"Output dir: {info['output_dir']}")
    logger.info("=" * 60)

    loop = asyncio.get_running_loop()
    stop = stop or asyncio.Event()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop.set)
        except NotImplementedError:
            # Windows event loops; KeyboardInterrupt still ends the run
            pass

    server_task = asyncio.create_task(run_stdio(build_server(dispatcher)))
    stop_task = asyncio.create_task(stop.wait())
    done, _ = await asyncio.wait(
        {server_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
    )

    pending = [task for task in (server_task, stop_task) if task not in done]
    for task in pending:
        task.cancel()
    # Let the stdio transport close before logging shutdown
    await asyncio.gather(*pending, return_exceptions=True)
    if server_task in done:
        # Surface a crash of the server loop itself
        server_task.result()

    logger.info(f"Shutting down {SERVER_NAME}...")


def main() -> int:
    try:
        config = ServerConfig.from_env()
    except ConfigError as e:
        logger.error(f"Failed to start fal.ai MCP Server: {e}")
        return 1

    logging.getLogger().setLevel(config.log_level)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info(f"Shutting down {SERVER_NAME}...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
