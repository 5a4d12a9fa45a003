"""Base formatter ABC and registry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console

from runcollapse.config import Settings
from runcollapse.models import CollapseReport

_REGISTRY: dict[str, type[BaseFormatter]] = {}


class BaseFormatter(ABC):
    """Abstract base for all output formatters."""

    name: str = "base"
    description: str = ""

    @abstractmethod
    def render(self, report: CollapseReport, console: Console, settings: Settings) -> None:
        """Print the report to ``console``."""
        ...


def register_formatter(cls: type[BaseFormatter]) -> type[BaseFormatter]:
    """Class decorator to register a formatter."""
    _REGISTRY[cls.name] = cls
    return cls


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate a registered formatter by name."""
    if name not in _REGISTRY:
        raise KeyError(f"Unknown formatter: {name!r}. Available: {list(_REGISTRY)}")
    return _REGISTRY[name]()


def list_formatters() -> dict[str, type[BaseFormatter]]:
    """Return all registered formatters."""
    return dict(_REGISTRY)
