"""
Pattern compilation and matching for the regular-expression demonstrations.

Patterns are written in the JavaScript notation used by the tutorial: a
pattern source plus a string of flag letters such as ``"ig"``. This module
translates the flag letters into `regex` library flags and evaluates a
pattern against a test string.

Character classes follow the JavaScript dialect, so ``\\w`` and ``\\d`` only
match ASCII characters and ``[a-z]`` with ``i`` only folds ASCII letters.
Without ``m``, ``$`` matches only at the end of the text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

import regex

logger = logging.getLogger(__name__)

_PATTERN_LOG_MAX_LENGTH: Final[int] = 50

# The 'g' flag changes how many matches are collected, not how the pattern compiles.
FLAG_LETTERS: Final[dict[str, int]] = {
    "i": regex.IGNORECASE,
    "g": 0,
    "m": regex.MULTILINE,
    "s": regex.DOTALL,
}


@dataclass(frozen=True)
class PatternFlags:
    """The set of flags attached to a pattern."""

    ignore_case: bool = False
    find_all: bool = False
    multiline: bool = False
    dot_all: bool = False

    @classmethod
    def parse(cls, flags: str) -> PatternFlags:
        """
        Build a flag set from a string of JavaScript flag letters.

        Args:
            flags: Flag letters, e.g. ``"ig"``. The empty string means no flags.

        Raises:
            ValueError: If a letter is unknown or repeated.

        """
        seen: set[str] = set()
        for letter in flags:
            if letter not in FLAG_LETTERS:
                msg = f"Unknown pattern flag '{letter}' in '{flags}'. Supported flags: {', '.join(FLAG_LETTERS)}."
                raise ValueError(msg)
            if letter in seen:
                msg = f"Pattern flag '{letter}' is repeated in '{flags}'."
                raise ValueError(msg)
            seen.add(letter)
        return cls(
            ignore_case="i" in seen,
            find_all="g" in seen,
            multiline="m" in seen,
            dot_all="s" in seen,
        )

    def to_regex_flags(self) -> int:
        """Return the `regex` library flag value for this flag set."""
        value = regex.ASCII
        if self.ignore_case:
            value |= regex.IGNORECASE
        if self.multiline:
            value |= regex.MULTILINE
        if self.dot_all:
            value |= regex.DOTALL
        return value


@dataclass(frozen=True)
class MatchOutcome:
    """
    The result of testing a pattern against a string.

    Attributes:
        matched: Whether the pattern matched anywhere in the string.
        matches: The matched substrings. With the global flag these are all
            non-overlapping matches, otherwise at most the first one.

    """

    matched: bool
    matches: tuple[str, ...] = ()


def _anchor_end_of_text(pattern: str) -> str:
    """Rewrite every unescaped `$` outside a character class to `\\Z`."""
    parts: list[str] = []
    in_class = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            parts.append(pattern[i : i + 2])
            i += 2
            continue
        if char == "[" and not in_class:
            in_class = True
        elif char == "]" and in_class:
            in_class = False
        elif char == "$" and not in_class:
            char = r"\Z"
        parts.append(char)
        i += 1
    return "".join(parts)


def compile_pattern(pattern: str, flags: PatternFlags) -> regex.Pattern:
    """
    Compile a pattern with the given flags.

    Without the multiline flag, `$` only matches at the very end of the text,
    never before a final newline.

    Raises:
        ValueError: If the pattern is not a valid regular expression.

    """
    source = pattern if flags.multiline else _anchor_end_of_text(pattern)
    try:
        return regex.compile(source, flags.to_regex_flags())
    except regex.error as e:
        msg = f"Invalid pattern '{pattern[:_PATTERN_LOG_MAX_LENGTH]}': {e}"
        raise ValueError(msg) from e


def evaluate_pattern(text: str, pattern: str, flags: PatternFlags) -> MatchOutcome:
    """
    Test whether `pattern` matches anywhere within `text`.

    A fresh pattern object is compiled on every call, so no match position is
    carried over between evaluations even when the global flag is set.

    Args:
        text: The test string.
        pattern: The regular-expression source.
        flags: The flags to compile the pattern with.

    Returns:
        A MatchOutcome describing the match.

    """
    compiled = compile_pattern(pattern, flags)
    if flags.find_all:
        found = tuple(m.group() for m in compiled.finditer(text))
    else:
        first = compiled.search(text)
        found = (first.group(),) if first is not None else ()

    logger.debug(
        "Pattern '%s' against '%s': %d match(es) %s",
        pattern[:_PATTERN_LOG_MAX_LENGTH],
        text,
        len(found),
        list(found),
    )
    return MatchOutcome(matched=bool(found), matches=found)
