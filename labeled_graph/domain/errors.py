"""Typed errors for the labeled graph container.

All errors inherit from LabeledGraphError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LabeledGraphError(Exception):
    """Base error for the labeled graph package.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateVertexError(LabeledGraphError):
    """A vertex with the same identifier is already in the graph.

    Attributes:
        vertex: The identifier that was added twice
    """

    vertex: str = ""


@dataclass
class UnknownVertexError(LabeledGraphError):
    """A vertex identifier is not part of the graph.

    Raised by queries, edge creation, traversal start points and
    shortest-path endpoints.

    Attributes:
        vertex: The first missing identifier
    """

    vertex: str = ""


@dataclass
class ConfigurationError(LabeledGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
