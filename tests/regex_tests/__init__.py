"""
Regex engine semantics relied on by the RegexLoops demonstrations.

These tests pin down how the `regex` library behaves for the constructs
used by the built-in patterns: unanchored search over every start offset,
bounded repetition with backtracking, alternation under anchors, and
ASCII-only character classes with case folding.
"""
