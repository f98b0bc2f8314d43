"""Contains the built-in demonstration list as a YAML document."""

# Strings must be single-quoted so that backslashes in patterns are kept literally.
DEFAULT_CONFIG_YAML = """\
# RegexLoops demonstrations.
#
# Each demonstration is evaluated in order and prints one line per result.
# Kinds:
#   pattern    - test 'pattern' (with JavaScript 'flags': i, g, m, s) against 'text'
#   count      - print every index from 'start' through 'stop'
#   sequence   - print every element of 'items' by index
#   accumulate - append every index to an array and print the array each time

demonstrations:
  # Find a literal string.
  - name: 'find-string'
    kind: 'pattern'
    text: 'Hello, Universe!'
    pattern: 'Hello, dfjasdf'

  # Five word characters followed by a digit.
  - name: 'password-check'
    kind: 'pattern'
    text: 'abcdef1#'
    pattern: '(\\w{5})(\\d)'

  # A letter, then two or more digits, or letters followed by optional digits.
  - name: 'username-global'
    kind: 'pattern'
    text: 'MaryJones34'
    pattern: '^[a-z]([0-9][0-9]+|[a-z]+\\d*)$'
    flags: 'ig'

  - name: 'username'
    kind: 'pattern'
    text: 'JackOfAllTrades'
    pattern: '^[a-z]([0-9][0-9]+|[a-z]+\\d*)$'
    flags: 'i'

  - name: 'count'
    kind: 'count'
    start: 0
    stop: 6

  - name: 'languages'
    kind: 'sequence'
    items: ['JavaScript', 'Python', 'GoLang']

  - name: 'accumulate'
    kind: 'accumulate'
    start: 0
    stop: 6
    enabled: false
"""
