from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from google.genai import types


ToolHandler = Callable[[dict[str, Any]], dict[str, Any]]


@dataclass(frozen=True)
class ToolSpec:
    """A model-invocable function: its declaration plus a local handler."""

    name: str
    description: str
    handler: ToolHandler
    parameters: types.Schema | None = None

    def declaration(self) -> types.FunctionDeclaration:
        return types.FunctionDeclaration(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
        )


class ToolRegistry:
    def __init__(self, tools: Iterable[ToolSpec] = ()):
        self._tools: dict[str, ToolSpec] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._tools[tool.name] = tool

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolSpec | None:
        return self._tools.get(name)

    def generation_config(self, **kwargs: Any) -> types.GenerateContentConfig:
        """Config that exposes every registered tool with automatic calling off."""
        return types.GenerateContentConfig(
            tools=[
                types.Tool(
                    function_declarations=[t.declaration() for t in self._tools.values()]
                )
            ],
            tool_config=types.ToolConfig(
                function_calling_config=types.FunctionCallingConfig(mode="AUTO")
            ),
            automatic_function_calling=types.AutomaticFunctionCallingConfig(
                disable=True
            ),
            **kwargs,
        )
