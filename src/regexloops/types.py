"""Defines the demonstration models shared across RegexLoops."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from regexloops.patterns import PatternFlags, compile_pattern


class DemoKind(str, Enum):
    """Enumeration of the supported demonstration kinds."""

    PATTERN = "pattern"
    COUNT = "count"
    SEQUENCE = "sequence"
    ACCUMULATE = "accumulate"


class BaseDemo(BaseModel):
    """Fields common to every demonstration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    enabled: bool = True


class PatternDemo(BaseDemo):
    """Test a regular expression against a string and print whether it matched."""

    kind: Literal["pattern"] = "pattern"
    text: str
    pattern: str
    flags: str = ""

    @field_validator("flags")
    @classmethod
    def validate_flags(cls, value: str) -> str:
        PatternFlags.parse(value)
        return value

    @model_validator(mode="after")
    def validate_pattern(self) -> "PatternDemo":
        compile_pattern(self.pattern, self.pattern_flags)
        return self

    @property
    def pattern_flags(self) -> PatternFlags:
        """The parsed flag set of this demonstration."""
        return PatternFlags.parse(self.flags)


class RangeDemo(BaseDemo):
    """An inclusive integer range walked with an index counter."""

    start: int = 0
    stop: int
    step: int = 1

    @field_validator("step")
    @classmethod
    def validate_step(cls, value: int) -> int:
        if value == 0:
            msg = "The 'step' of a loop must not be zero."
            raise ValueError(msg)
        return value

    def indices(self) -> range:
        """Return the indices from `start` through `stop`, inclusive."""
        end = self.stop + 1 if self.step > 0 else self.stop - 1
        return range(self.start, end, self.step)


class CountDemo(RangeDemo):
    """Print every index of an inclusive range."""

    kind: Literal["count"] = "count"


class AccumulateDemo(RangeDemo):
    """Append every index of an inclusive range to an array, printing the array each time."""

    kind: Literal["accumulate"] = "accumulate"


class SequenceDemo(BaseDemo):
    """Print every element of a fixed sequence by index."""

    kind: Literal["sequence"] = "sequence"
    items: tuple[bool | int | str, ...]


Demonstration = Annotated[
    PatternDemo | CountDemo | SequenceDemo | AccumulateDemo,
    Field(discriminator="kind"),
]
