"""
tools/base.py - Call contract for pitch class set tools.

A tool declares optional keyword parameters. Calling it binds the arguments
(type check, defaults for anything omitted), runs ``execute`` on the bound
values and answers with a ToolResult. Bad arguments and execution errors
come back as failed results, never as exceptions.

Exports:
    ToolParameter   one declared keyword parameter
    ToolResult      success flag + data, or an error message
    TheoryTool      abstract base: name, parameters, execute
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolParameter:
    """
    A keyword parameter of a tool.

    Attributes:
        name: Keyword name
        type: Accepted Python type; bool never passes for int
        description: What the value means
        default: Bound when the argument is omitted or None
    """

    name: str
    type: type
    description: str
    default: Any = None

    def type_error(self, value: Any) -> str | None:
        """Return a message if ``value`` has the wrong type, None if it fits."""
        if isinstance(value, bool) and self.type is not bool:
            got = "bool"
        elif isinstance(value, self.type):
            return None
        else:
            got = type(value).__name__
        return f"Parameter '{self.name}' must be {self.type.__name__}, got {got}"


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of a tool call.

    Attributes:
        success: Whether the call produced data
        data: Result payload when successful
        error: Message when not successful
        metadata: Extra facts about the call (e.g. the matched input field)
    """

    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def failure(cls, error: str) -> ToolResult:
        return cls(success=False, error=error)


class TheoryTool(ABC):
    """
    Abstract base for deterministic pitch class set tools.

    Subclasses provide ``name``, ``parameters`` and ``execute``. ``execute``
    always receives every declared parameter, already bound.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool identifier (lowercase, underscores)."""

    @property
    @abstractmethod
    def parameters(self) -> tuple[ToolParameter, ...]:
        """Declared keyword parameters, in documentation order."""

    @abstractmethod
    def execute(self, **kwargs: Any) -> ToolResult:
        """Compute the result from bound parameters."""

    def bind(self, **kwargs: Any) -> dict[str, Any]:
        """
        Check arguments against the declared parameters and fill defaults.

        Returns:
            One entry per declared parameter

        Raises:
            TypeError: On an undeclared keyword or a value of the wrong type
        """
        declared = {param.name for param in self.parameters}
        unknown = sorted(set(kwargs) - declared)
        if unknown:
            raise TypeError(f"Unknown parameter(s) for {self.name}: {', '.join(unknown)}")

        bound: dict[str, Any] = {}
        for param in self.parameters:
            value = kwargs.get(param.name)
            if value is None:
                bound[param.name] = param.default
                continue
            error = param.type_error(value)
            if error is not None:
                raise TypeError(error)
            bound[param.name] = value
        return bound

    def __call__(self, **kwargs: Any) -> ToolResult:
        try:
            arguments = self.bind(**kwargs)
        except TypeError as e:
            return ToolResult.failure(str(e))

        try:
            return self.execute(**arguments)
        except Exception as e:
            logger.exception("Tool %s failed", self.name)
            return ToolResult.failure(f"Tool execution failed: {e}")
