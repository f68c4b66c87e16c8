"""MCP server factory exposing a daemon's message protocol as tools.

Registers 2 tools: ``tiling`` (run messages) and ``tiling_help``
(reference card). Transport is left to FastMCP.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from tiling_ipc.config_router import CONFIG_KEYS
from tiling_ipc.daemon import TilingDaemon
from tiling_ipc.formatter import format_result
from tiling_ipc.grammar import SPACE_GRAMMAR, WINDOW_GRAMMAR


def generate_reference_card() -> str:
    """Reference card covering both flag grammars and every config key."""
    lines: list[str] = [
        WINDOW_GRAMMAR.generate_reference_card(),
        SPACE_GRAMMAR.generate_reference_card(),
        "### Config",
    ]
    for spec in CONFIG_KEYS.values():
        line = f"  config {spec.key} <{spec.kind}>"
        if spec.suffix:
            line += f"  # per space: config <index>_{spec.suffix} <{spec.kind}>"
        lines.append(line)
    lines.append("")
    return "\n".join(lines)


def run_messages(daemon: TilingDaemon, messages: list[str]) -> str:
    """Handle *messages* in order and return one result line per message."""
    results: list[str] = []
    for message in messages:
        result = daemon.handle_message(message)
        results.append(format_result(result.success, result.message, result.kind))
    return "\n".join(results)


def _build_tool_description(reference_card: str) -> str:
    return (
        "Send messages to the tiling daemon. Each message follows: "
        "TYPE [-FLAG ARG ...] or config KEY VALUE\n"
        "Call tiling_help for the full reference card.\n\n" + reference_card
    )


def create_tiling_server(daemon: TilingDaemon, **kwargs) -> FastMCP:
    """Create an MCP server that forwards messages to *daemon*.

    Parameters
    ----------
    daemon : TilingDaemon
        Daemon that handles each message.
    **kwargs
        Additional arguments passed to FastMCP constructor.

    Returns
    -------
    FastMCP
        Configured MCP server ready to run.
    """
    mcp = FastMCP(**kwargs)
    reference_card = generate_reference_card()

    @mcp.tool(name="tiling", description=_build_tool_description(reference_card), structured_output=False)
    def send_messages(messages: list[str]) -> TextContent:
        return TextContent(type="text", text=run_messages(daemon, messages))

    @mcp.tool(name="tiling_help", structured_output=False)
    def get_help() -> str:
        """Returns the tiling reference card with all syntax."""
        return reference_card

    return mcp
