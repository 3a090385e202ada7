from __future__ import annotations

import logging
import time
from typing import Any

from google.genai import types

from app.services.tooling import ToolSpec

logger = logging.getLogger(__name__)

SEARCH_TOOL_NAME = "search_web"

# Placeholder result; there is no real search backend behind this tool.
SIMULATED_RESULT = (
    "Live search is not connected. No real-time results are available; tell the "
    "user that current information could not be fetched and answer from general "
    "knowledge."
)


def make_web_search_tool(*, delay_seconds: float = 1.0) -> ToolSpec:
    def handler(args: dict[str, Any]) -> dict[str, Any]:
        query = str(args.get("query", "")).strip()
        if not query:
            raise ValueError("query is required")

        logger.info("Simulated web search for %r", query)
        if delay_seconds > 0:
            time.sleep(delay_seconds)

        return {
            "query": query,
            "simulated": True,
            "results": SIMULATED_RESULT,
        }

    parameters = types.Schema(
        type=types.Type.OBJECT,
        required=["query"],
        properties={
            "query": types.Schema(
                type=types.Type.STRING,
                description="Search query for live information (news, scores, trends).",
            ),
        },
    )

    return ToolSpec(
        name=SEARCH_TOOL_NAME,
        description="Search the web for live information such as news, trending topics or live scores.",
        parameters=parameters,
        handler=handler,
    )
