"""Base demonstration runner abstract class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from regexloops.types import BaseDemo

__all__ = ["DemoRunner"]

DemoT = TypeVar("DemoT", bound=BaseDemo)


class DemoRunner(ABC, Generic[DemoT]):
    """Abstract base class for the runner of one demonstration kind."""

    @abstractmethod
    def evaluate(self, demo: DemoT) -> list[object]:
        """
        Evaluate a demonstration.

        Args:
            demo: The demonstration to evaluate.

        Returns:
            The values to print, one per output line, in order.

        """
        raise NotImplementedError
