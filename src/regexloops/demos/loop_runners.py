"""Runners for the `for`-loop demonstrations."""

import logging

from regexloops.types import AccumulateDemo, CountDemo, SequenceDemo

from .base import DemoRunner

__all__ = ["AccumulateRunner", "CountRunner", "SequenceRunner"]

logger = logging.getLogger(__name__)


class CountRunner(DemoRunner[CountDemo]):
    """Walk an inclusive index range, yielding each index."""

    def evaluate(self, demo: CountDemo) -> list[object]:
        """Return every index from `start` through `stop`."""
        values: list[object] = []
        for i in demo.indices():
            values.append(i)
        logger.debug("Demo '%s': counted %d indices.", demo.name, len(values))
        return values


class SequenceRunner(DemoRunner[SequenceDemo]):
    """Index into a fixed sequence, yielding each element in order."""

    def evaluate(self, demo: SequenceDemo) -> list[object]:
        """Return the element at every index of the sequence."""
        values: list[object] = []
        for i in range(len(demo.items)):
            logger.debug("Demo '%s': items[%d] = %r", demo.name, i, demo.items[i])
            values.append(demo.items[i])
        return values


class AccumulateRunner(DemoRunner[AccumulateDemo]):
    """Append each index of a range to an array, yielding a snapshot of the array per iteration."""

    def evaluate(self, demo: AccumulateDemo) -> list[object]:
        """Return one snapshot of the growing array per index."""
        array: list[int] = []
        snapshots: list[object] = []
        for i in demo.indices():
            array.append(i)
            # Snapshot, later appends must not show up in earlier lines.
            snapshots.append(list(array))
        return snapshots
