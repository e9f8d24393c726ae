"""FlowTrans plugin entry point.

Flow Launcher starts this script once per request with the JSON-RPC request as the only argument
and reads the response from stdout. Logs go to stderr and to flowtrans.log next to this file.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from core.plugin import FlowPlugin
from core.version import VERSION
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

LOG_FILE: Final[Path] = Path(__file__).resolve().parent / "flowtrans.log"

logger: logging.Logger = LoggerUtils.get_logger(__name__)


def parse_request(argv: list[str]) -> dict[str, Any]:
    """Decode the JSON-RPC request from the command line.

    Args:
        argv (list[str]): Command-line arguments, including the script name.

    Returns:
        dict[str, Any]: The decoded request.

    Raises:
        ValueError: If the request is missing or is not a JSON object.
    """
    if len(argv) < 2:
        msg = "No request given"
        raise ValueError(msg)
    try:
        request: Any = json.loads(argv[1])
    except json.JSONDecodeError as err:
        msg = f"Malformed request: {err}"
        raise ValueError(msg) from err
    if not isinstance(request, dict):
        msg = "Request must be a JSON object"
        raise ValueError(msg)  # noqa: TRY004
    return request


async def main(argv: list[str]) -> int:
    """Handle a single request and write the response to stdout.

    Returns:
        int: Process exit code.
    """
    try:
        request: dict[str, Any] = parse_request(argv)
    except ValueError as err:
        logger.error("%s", err)
        return 1

    response: dict[str, Any] | None = await FlowPlugin().handle(request)
    if response is not None:
        print(json.dumps(response))
    return 0


if __name__ == "__main__":
    LoggerUtils(LOG_FILE)
    logger.debug("FlowTrans %s started", VERSION)
    sys.exit(asyncio.run(main(sys.argv)))
