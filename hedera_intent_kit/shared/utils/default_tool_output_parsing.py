"""Parsers turning a serialized ToolResponse back into a dict for agent frameworks."""

import json
from typing import Any, Dict

from hedera_intent_kit.shared.models import INVALID_TRANSACTION_STATUS


def transaction_tool_output_parser(raw_output: str) -> Dict[str, Any]:
    """Parse the JSON output of a transaction tool.

    Output that is not valid JSON is reported as a failed transaction rather
    than raising.
    """
    try:
        parsed = json.loads(raw_output)
    except (TypeError, ValueError) as e:
        return {
            "raw": {"status": INVALID_TRANSACTION_STATUS, "error": str(e)},
            "human_message": raw_output,
        }
    if not isinstance(parsed, dict) or "raw" not in parsed:
        return {"raw": parsed, "human_message": str(parsed)}
    return parsed


def untyped_query_output_parser(raw_output: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(raw_output)
    except (TypeError, ValueError):
        return {"raw": {"error": raw_output}, "human_message": raw_output}
    if isinstance(parsed, dict):
        return {"raw": parsed, "human_message": parsed.get("human_message", "")}
    return {"raw": parsed, "human_message": str(parsed)}
