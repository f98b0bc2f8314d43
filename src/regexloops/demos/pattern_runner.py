"""Runner for regular-expression demonstrations."""

import logging

from regexloops.patterns import evaluate_pattern
from regexloops.types import PatternDemo

from .base import DemoRunner

__all__ = ["PatternRunner"]

logger = logging.getLogger(__name__)


class PatternRunner(DemoRunner[PatternDemo]):
    """Test the demonstration's pattern against its text and yield the boolean result."""

    def evaluate(self, demo: PatternDemo) -> list[object]:
        """Return a single value: whether the pattern matched."""
        outcome = evaluate_pattern(demo.text, demo.pattern, demo.pattern_flags)
        logger.debug(
            "Demo '%s': pattern /%s/%s %s '%s'.",
            demo.name,
            demo.pattern,
            demo.flags,
            "matched" if outcome.matched else "did not match",
            demo.text,
        )
        return [outcome.matched]
