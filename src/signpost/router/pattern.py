import re
from collections import namedtuple
from enum import IntEnum


class InvalidPatternException(ValueError):
    pass


class SegmentType(IntEnum):
    EXACT = 0
    PLACEHOLDER = 1
    CONSTRAINED = 2


Segment = namedtuple('Segment', 'type,data,regex')
Segment.__doc__ = """One path segment of a compiled pattern.

``data`` is the literal text for EXACT segments and the captured name for
PLACEHOLDER and CONSTRAINED ones. ``regex`` is the sub-expression used to
match the segment, with literal text already escaped.
"""

WILDCARD = '*'
DEFAULT_REGEX = '[^/]+'

_named_part = re.compile(r'(?P<regex>.+?)?:(?P<name>\w+)')


def check_pattern(pattern):
    if not isinstance(pattern, str):
        raise TypeError(
            'Pattern must be a string, got {}'.format(type(pattern).__name__))
    if not pattern:
        raise InvalidPatternException('Pattern is empty')
    if pattern[0] != '/':
        raise InvalidPatternException(
            'Pattern "{}" must start with a /'.format(pattern))


def parse_part(part):
    match = _named_part.fullmatch(part)
    if not match:
        return Segment(SegmentType.EXACT, part, re.escape(part))

    name, regex = match.group('name'), match.group('regex')
    if not regex:
        return Segment(SegmentType.PLACEHOLDER, name, DEFAULT_REGEX)

    # <\d+>:id is the same as \d+:id
    if len(regex) > 2 and regex[0] == '<' and regex[-1] == '>':
        regex = regex[1:-1]

    try:
        re.compile('(?:{})'.format(regex))
    except re.error as e:
        raise InvalidPatternException(
            'Invalid expression "{}" for "{}": {}'.format(regex, name, e)) \
            from None

    return Segment(SegmentType.CONSTRAINED, name, regex)


def parse(pattern):
    """Split a pattern into segments and a trailing wildcard flag.

    >>> parse('/users/:id/*')[1]
    True
    """
    check_pattern(pattern)

    parts = pattern.strip('/').split('/')
    wildcard = parts[-1] == WILDCARD
    if wildcard:
        parts.pop()

    seen = set()
    segments = []
    for part in parts:
        segment = parse_part(part)
        if segment.type != SegmentType.EXACT:
            if segment.data in seen:
                raise InvalidPatternException(
                    'Duplicate name "{}" in pattern "{}"'
                    .format(segment.data, pattern))
            seen.add(segment.data)
        segments.append(segment)

    return segments, wildcard


def names(segments):
    return [s.data for s in segments if s.type != SegmentType.EXACT]
