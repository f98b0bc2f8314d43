"""Manages the overall RegexLoops run."""

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from .config import RunnerConfig
from .demos import get_runner
from .models import DemoResult, ExecutionContext
from .rendering import render_value
from .reporters import SummaryReporter

logger = logging.getLogger(__name__)


def run_demonstrations(
    config: RunnerConfig,
    names: Sequence[str] | None = None,
    stream: TextIO | None = None,
) -> ExecutionContext:
    """
    Evaluate demonstrations one after another and write their results.

    Each demonstration is evaluated by the runner registered for its kind.
    Every value it yields is rendered and written to `stream` as one line
    before the next demonstration starts.

    Args:
        config: The demonstration list.
        names: If given, only run these demonstrations (in declared order).
        stream: Where to write result lines. Defaults to standard output.

    Returns:
        The execution context with the lines written per demonstration.

    Raises:
        ValueError: If `names` refers to an unknown demonstration.

    """
    out = stream if stream is not None else sys.stdout
    context = ExecutionContext(config=config, selected=config.select(names))
    logger.info("Running %d demonstration(s).", len(context.selected))

    for demo in context.selected:
        runner = get_runner(demo)
        logger.debug("Executing runner %s for '%s'.", runner.__class__.__name__, demo.name)
        result = DemoResult(demo=demo)
        for value in runner.evaluate(demo):
            line = render_value(value)
            out.write(line + "\n")
            result.lines.append(line)
        context.results.append(result)

    out.flush()
    SummaryReporter().generate(context)
    return context
