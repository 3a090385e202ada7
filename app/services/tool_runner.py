from __future__ import annotations

import logging
from typing import Any

from app.services.tooling import ToolRegistry

logger = logging.getLogger(__name__)


class ToolRunner:
    """Executes registered tools and wraps the outcome for the model.

    Tool failures are reported back to the model as ``{"ok": False}``
    payloads instead of failing the whole generation.
    """

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def run(self, *, name: str, args: dict[str, Any] | None) -> dict[str, Any]:
        tool = self._registry.get(name)
        if tool is None:
            logger.warning("Model requested unknown tool: %s", name)
            return {
                "ok": False,
                "error": f"Unknown tool: {name}",
            }

        try:
            result = tool.handler(dict(args or {}))
            if not isinstance(result, dict):
                raise TypeError("Tool handler must return dict")
            return {"ok": True, "result": result}
        except Exception as e:
            logger.exception("Tool execution failed: %s", name)
            return {
                "ok": False,
                "error": str(e),
            }
