"""Renders evaluation values as single output lines."""

from collections.abc import Sequence


def render_value(value: object) -> str:
    """
    Return the one-line text of a single evaluation value.

    Booleans print as ``true``/``false``, numbers in decimal and strings
    verbatim. Sequences always print on one line as ``[ a, b ]``, even where
    a JavaScript console would break a long array over several lines.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return _render_array(value)
    return str(value)


def _render_array(values: Sequence[object]) -> str:
    if not values:
        return "[]"
    # Strings are quoted inside an array so that element boundaries stay visible.
    parts = [f"'{v}'" if isinstance(v, str) else render_value(v) for v in values]
    return f"[ {', '.join(parts)} ]"
