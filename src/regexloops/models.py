"""Defines the data models used during a RegexLoops run."""

from dataclasses import dataclass, field

from regexloops.config import RunnerConfig
from regexloops.types import BaseDemo


@dataclass
class DemoResult:
    """The printed lines produced by one demonstration."""

    demo: BaseDemo
    lines: list[str] = field(default_factory=list)


@dataclass
class ExecutionContext:
    """A data class to hold the context for a single run."""

    config: RunnerConfig
    selected: list[BaseDemo] = field(default_factory=list)
    results: list[DemoResult] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        """Total number of lines written so far."""
        return sum(len(result.lines) for result in self.results)
