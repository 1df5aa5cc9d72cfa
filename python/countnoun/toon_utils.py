"""
Output formatting for MCP tool results.

Tools build one list of flat records and let this helper decide how to
return it:
- "text": lean one-line-per-record output (default)
- "json": the records as-is
- "toon": TOON-encoded string, falling back to JSON if encoding fails
- "auto": TOON once there are at least ``auto_threshold`` records, else JSON
"""

import logging
from typing import Any, Callable, Optional, Union

logger = logging.getLogger("countnoun.output")

OUTPUT_FORMATS = ("text", "json", "toon", "auto")
DEFAULT_AUTO_THRESHOLD = 20


def create_toonable_result(
    records: list[dict[str, Any]],
    output_format: Optional[str],
    tool_name: str,
    text_formatter: Optional[Callable[[list[dict[str, Any]]], str]] = None,
    auto_threshold: int = DEFAULT_AUTO_THRESHOLD,
) -> Union[str, list[dict[str, Any]]]:
    """
    Return ``records`` as text, TOON, or JSON-ready data.

    Args:
        records: Flat dicts with primitive values (TOON tabular friendly)
        output_format: "text", "json", "toon" or "auto"; None means "text"
        tool_name: Tool name for log messages
        text_formatter: Renders records for text mode; JSON is returned if absent
        auto_threshold: Minimum record count for auto mode to pick TOON
    """
    from toon_format import encode as toon_encode

    output_format = output_format or "text"

    if output_format == "text":
        if text_formatter:
            return text_formatter(records)
        logger.warning(f"{tool_name} has no text formatter, falling back to JSON")
        return records

    if output_format == "toon":
        try:
            return toon_encode({"results": records})
        except Exception as e:
            logger.warning(f"{tool_name} TOON encoding failed, falling back to JSON: {e}")
            return records

    if output_format == "auto":
        if len(records) >= auto_threshold:
            try:
                return toon_encode({"results": records})
            except Exception as e:
                logger.debug(f"{tool_name} TOON encoding failed in auto mode: {e}")
        return records

    return records
