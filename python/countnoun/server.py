"""
countnoun MCP server - FastMCP implementation

Exposes the default Inflector as MCP tools so agents can pluralize and
singularize words, check word forms in bulk, and register extra rules.

CRITICAL: in stdio mode stdout carries JSON-RPC. NEVER use print() here;
log through the "countnoun" logger (file only unless --http).
"""

import argparse
import os
import sys

from fastmcp import FastMCP

from countnoun import get_default_inflector
from countnoun.logging_config import setup_logging
from countnoun.tools import add_rule, check_forms, pluralize_word, singularize_word

logger = setup_logging()

INSTRUCTIONS = """\
English singular/plural inflection.
- pluralize_word: plural of a word, or the form agreeing with a count
- singularize_word: singular of a word
- check_forms: singular/plural forms and form checks for many words
- add_rule: register a new plural, singular, irregular or uncountable rule
Casing of the input word is preserved in every result.
"""

mcp = FastMCP("countnoun", instructions=INSTRUCTIONS)

# output_schema=None returns strings as-is instead of wrapping them in {"result": ...}
mcp.tool(output_schema=None)(pluralize_word)
mcp.tool(output_schema=None)(singularize_word)
mcp.tool(output_schema=None)(check_forms)
mcp.tool(output_schema=None)(add_rule)

__all__ = [
    "mcp",
    "pluralize_word",
    "singularize_word",
    "check_forms",
    "add_rule",
]


def _build_inflector() -> None:
    # Build the default engine (and apply COUNTNOUN_RULES_FILE) before serving,
    # so a broken rules file fails at startup rather than on the first call
    inflector = get_default_inflector()
    logger.info(f"Inflector ready: {inflector!r}")


def main():
    """Run the MCP server over stdio."""
    _build_inflector()
    logger.info("Starting countnoun MCP server (stdio)")

    try:
        mcp.run(show_banner=False)
    except BrokenPipeError:
        # Client went away; exit without a traceback
        sys.stderr.write("Client disconnected. Shutting down.\n")
        sys.exit(0)


def main_http(host: str = None, port: int = None):
    """
    Run the MCP server over HTTP so several clients can share one engine.

    Args:
        host: Bind address (default: COUNTNOUN_HOST or 127.0.0.1)
        port: Port (default: COUNTNOUN_PORT or 8765)
    """
    host = host or os.environ.get("COUNTNOUN_HOST", "127.0.0.1")
    port = port or int(os.environ.get("COUNTNOUN_PORT", "8765"))

    setup_logging(console=True)
    _build_inflector()
    logger.info(f"Starting countnoun MCP server on http://{host}:{port}/mcp")

    try:
        mcp.run(transport="http", host=host, port=port)
    except KeyboardInterrupt:
        logger.info("Shutting down countnoun HTTP server...")


def cli():
    """
    Command line entry point.

    Usage:
        countnoun-mcp                      # stdio
        countnoun-mcp --http --port 9000   # HTTP
    """
    parser = argparse.ArgumentParser(description="countnoun MCP server")
    parser.add_argument("--http", action="store_true", help="Serve over HTTP instead of stdio")
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to in HTTP mode (default: 127.0.0.1, or COUNTNOUN_HOST)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for HTTP mode (default: 8765, or COUNTNOUN_PORT)",
    )
    args = parser.parse_args()

    if args.http:
        main_http(host=args.host, port=args.port)
    else:
        main()


if __name__ == "__main__":
    cli()
