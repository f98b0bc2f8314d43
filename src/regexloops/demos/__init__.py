"""
Demonstration runners.

Each demonstration kind has a runner implementing the `DemoRunner`
interface. The workflow looks the runner up by the demonstration's kind.
"""

from regexloops.types import BaseDemo, DemoKind

from .base import DemoRunner
from .loop_runners import AccumulateRunner, CountRunner, SequenceRunner
from .pattern_runner import PatternRunner

# Central mapping from demonstration kind to runner class.
DEMO_RUNNERS: dict[DemoKind, type[DemoRunner]] = {
    DemoKind.PATTERN: PatternRunner,
    DemoKind.COUNT: CountRunner,
    DemoKind.SEQUENCE: SequenceRunner,
    DemoKind.ACCUMULATE: AccumulateRunner,
}


def get_runner(demo: BaseDemo) -> DemoRunner:
    """
    Instantiate the runner for a demonstration.

    Raises:
        ValueError: If no runner is registered for the demonstration's kind.

    """
    kind = getattr(demo, "kind", None)
    try:
        runner_class = DEMO_RUNNERS[DemoKind(kind)]
    except (KeyError, ValueError) as e:
        msg = f"No runner is registered for demonstration kind '{kind}'."
        raise ValueError(msg) from e
    return runner_class()


__all__ = [
    "DEMO_RUNNERS",
    "AccumulateRunner",
    "CountRunner",
    "DemoRunner",
    "PatternRunner",
    "SequenceRunner",
    "get_runner",
]
