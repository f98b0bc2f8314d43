"""A reporter for generating concise run summaries."""

import logging
from collections import Counter

from regexloops.models import ExecutionContext

logger = logging.getLogger(__name__)


class SummaryReporter:
    """Generates a concise summary of a run and logs it."""

    def generate(self, context: ExecutionContext) -> None:
        """Log a summary of the run."""
        logger.info("--- Run Summary ---")
        logger.info("Demonstrations run: %d", len(context.results))

        kinds = Counter(getattr(result.demo, "kind", "unknown") for result in context.results)
        for kind, count in sorted(kinds.items()):
            logger.info("  - %s: %d", kind, count)

        skipped = [demo.name for demo in context.config.demonstrations if demo not in context.selected]
        if skipped:
            logger.info("Not run: %s", ", ".join(skipped))

        logger.info("Lines written: %d", context.line_count)
        logger.info("-------------------")
