import re

from .pattern import InvalidPatternException, SegmentType


def compile_expression(expression, flags):
    try:
        return re.compile(expression, flags)
    except re.error as e:
        raise InvalidPatternException(
            'Invalid expression "{}": {}'.format(expression, e)) from None


class Matcher:
    """Compiled matching expression for one parsed pattern.

    Every named segment gets its own group so captures can be read back by
    name, and a wildcard pattern gets a trailing group holding whatever
    follows the fixed segments. One trailing slash is tolerated.
    """

    def __init__(self, segments, wildcard, *, case_sensitive=True):
        self.segments = segments
        self.wildcard = wildcard
        self.case_sensitive = case_sensitive
        self.flags = 0 if case_sensitive else re.IGNORECASE

        self._groups = {}
        self._constraints = {}
        parts = []
        for idx, segment in enumerate(segments):
            if segment.type == SegmentType.EXACT:
                parts.append(segment.regex)
                continue

            group = '_s{}'.format(idx)
            self._groups[group] = segment.data
            self._constraints[segment.data] = \
                compile_expression('(?:{})'.format(segment.regex), self.flags)
            parts.append('(?P<{}>{})'.format(group, segment.regex))

        if wildcard and not parts:
            expression = '/(?P<_tail>.*)'
        elif wildcard:
            expression = '/' + '/'.join(parts) + '(?P<_tail>(?:/.*)?)/?'
        else:
            expression = '/' + '/'.join(parts) + '/?'

        self.expression = expression
        self._regex = compile_expression(expression, self.flags)

    def __repr__(self):
        return '<Matcher {!r}{}>'.format(
            self.expression, '' if self.case_sensitive else ' (i)')

    def match(self, path):
        """Return ``(captures, tail)`` for a matching path, else ``None``.

        ``tail`` is ``None`` unless the pattern ends in a wildcard.
        """
        match = self._regex.fullmatch(path)
        if not match:
            return None

        captures = {
            name: match.group(group) for group, name in self._groups.items()}
        tail = match.group('_tail') if self.wildcard else None

        return captures, tail

    def has_segment(self, name):
        return name in self._constraints

    def match_segment(self, name, value):
        """Check a value against the whole expression of a named segment."""
        try:
            constraint = self._constraints[name]
        except KeyError:
            raise LookupError(
                'Pattern has no segment called "{}"'.format(name)) from None

        return constraint.fullmatch(str(value)) is not None
