import copy
from collections import namedtuple

from .matcher import Matcher
from .pattern import InvalidPatternException, SegmentType, names, parse


class RouteNotFoundException(Exception):
    pass


class NoHandlerException(RuntimeError):
    pass


class RouteValueException(ValueError):
    pass


class IncompleteRouteException(RuntimeError):
    pass


WildcardArg = namedtuple('WildcardArg', 'name,value')


def merge_arg(args, name, value):
    """Add a wildcard argument in place, a named one replacing its namesake."""
    if name is not None:
        for idx, arg in enumerate(args):
            if arg.name == name:
                args[idx] = WildcardArg(name, value)
                return

    args.append(WildcardArg(name, value))


def parse_wildcard_args(tail):
    """Parse a wildcard tail such as ``/foo/bar:baz/42``."""
    args = []
    for piece in tail.strip('/').split('/'):
        if not piece:
            continue
        name, colon, value = piece.partition(':')
        if colon:
            merge_arg(args, name, value)
        else:
            merge_arg(args, None, piece)

    return tuple(args)


def format_wildcard_args(args):
    return '/'.join(
        str(a.value) if a.name is None else '{}:{}'.format(a.name, a.value)
        for a in args)


def is_positional(key):
    """Integers and all-digit strings such as '0' name positional args."""
    if isinstance(key, int):
        return True

    return isinstance(key, str) and key.isascii() and key.isdigit()


def identical(a, b):
    return type(a) is type(b) and a == b


class Route:
    """A pattern plus the dispatch values that go with it.

    Matching never changes a route; ``match_url``, ``match_dispatch`` and
    the ``with_*`` methods return populated copies that share the compiled
    matcher, so a registered route works as a template.
    """

    def __init__(self, pattern, defaults=None, *, case_sensitive=True,
                 require_dispatch=False):
        segments, wildcard = parse(pattern)
        defaults = dict(defaults or {})

        for name in names(segments):
            if name in defaults:
                raise InvalidPatternException(
                    'Both the pattern "{}" and the defaults contain "{}"'
                    .format(pattern, name))
            defaults[name] = None

        if require_dispatch and not defaults and not wildcard:
            raise InvalidPatternException(
                'Pattern "{}" and its defaults contain nothing to dispatch on'
                .format(pattern))

        self._pattern = pattern
        self._matcher = Matcher(
            segments, wildcard, case_sensitive=case_sensitive)
        self._dispatch = defaults
        self._wildcard_args = ()
        self._url = None

    def __repr__(self):
        return '<Route {}, {} {}>'.format(
            self._pattern, self._dispatch, hex(id(self)))

    def describe(self):
        values = ' '.join(
            '{}={}'.format(k, v) for k, v in self._dispatch.items()
            if v is not None)
        return self._pattern + (' ' if values else '') + values

    def __eq__(self, other):
        if not isinstance(other, Route):
            return NotImplemented

        return self._pattern == other._pattern \
            and self.case_sensitive == other.case_sensitive \
            and self._dispatch == other._dispatch \
            and self._wildcard_args == other._wildcard_args

    __hash__ = None

    def _replace(self, **attrs):
        route = copy.copy(self)
        for name, value in attrs.items():
            setattr(route, '_' + name, value)

        return route

    @property
    def pattern(self):
        return self._pattern

    @property
    def matcher(self):
        return self._matcher

    @property
    def case_sensitive(self):
        return self._matcher.case_sensitive

    @property
    def supports_wildcard_args(self):
        return self._matcher.wildcard

    @property
    def matched_url(self):
        """The path this route was matched against, if any."""
        return self._url

    def match_url(self, url):
        result = self._matcher.match(url)
        if result is None:
            return None

        captures, tail = result
        dispatch = dict(self._dispatch)
        dispatch.update(captures)

        wildcard_args = self._wildcard_args
        if tail is not None:
            wildcard_args = parse_wildcard_args(tail)

        return self._replace(
            url=url, dispatch=dispatch, wildcard_args=wildcard_args)

    def match_dispatch(self, comparison):
        """Reverse match a mapping of values against this route.

        Every key of this route's dispatch map has to be present. Keys
        naming a pattern segment must satisfy its expression, other known
        keys must equal their default, and anything else becomes a
        wildcard argument if the route takes them.
        """
        for key in self._dispatch:
            if key not in comparison:
                return None

        dispatch = dict(self._dispatch)
        wildcard_args = []

        for key, value in comparison.items():
            if isinstance(key, str) and self._matcher.has_segment(key):
                if value is None \
                   or not self._matcher.match_segment(key, value):
                    return None
                dispatch[key] = value
            elif key in dispatch:
                if not identical(dispatch[key], value):
                    return None
            elif not self.supports_wildcard_args:
                return None
            elif is_positional(key):
                merge_arg(wildcard_args, None, value)
            else:
                merge_arg(wildcard_args, str(key), value)

        return self._replace(
            dispatch=dispatch, wildcard_args=tuple(wildcard_args))

    def url(self):
        dispatch = dict(self._dispatch)

        parts = []
        for segment in self._matcher.segments:
            if segment.type == SegmentType.EXACT:
                parts.append(segment.data)
                continue

            value = dispatch.pop(segment.data, None)
            if value is None:
                raise IncompleteRouteException(
                    'No value for "{}" to fill pattern "{}"'
                    .format(segment.data, self._pattern))
            parts.append(str(value))

        url = ('/' + '/'.join(parts)).rstrip('/')
        if self._wildcard_args:
            url += '/' + format_wildcard_args(self._wildcard_args)

        return url or '/'

    def get(self, name):
        """Dispatch value called name, else the named wildcard argument."""
        value = self._dispatch.get(name)
        if value is None:
            return self.wildcard_arg(name)

        return value

    def dispatch_values(self):
        return dict(self._dispatch)

    def dispatch_value(self, name):
        return self._dispatch.get(name)

    def wildcard_args(self):
        return self._wildcard_args

    def wildcard_arg(self, key):
        """Named wildcard argument, or the n-th positional one for an int."""
        if isinstance(key, int):
            positional = [a.value for a in self._wildcard_args
                          if a.name is None]
            try:
                return positional[key]
            except IndexError:
                return None

        for arg in self._wildcard_args:
            if arg.name == key:
                return arg.value

        return None

    def with_value(self, name, value):
        if isinstance(name, str) and name in self._dispatch:
            if self._matcher.has_segment(name) \
               and not self._matcher.match_segment(name, value):
                raise RouteValueException(
                    'Value "{}" does not match "{}" required for "{}"'
                    .format(value, self._constraint(name), name))

            dispatch = dict(self._dispatch)
            dispatch[name] = value
            return self._replace(dispatch=dispatch)

        return self.with_wildcard_arg(
            value, None if is_positional(name) else name)

    def with_wildcard_arg(self, value, name=None):
        if not self.supports_wildcard_args:
            raise RouteValueException(
                'Route "{}" does not take wildcard arguments, cannot set "{}"'
                .format(self._pattern, value if name is None else name))

        wildcard_args = list(self._wildcard_args)
        merge_arg(wildcard_args, name, value)

        return self._replace(wildcard_args=tuple(wildcard_args))

    def _constraint(self, name):
        for segment in self._matcher.segments:
            if segment.type != SegmentType.EXACT and segment.data == name:
                return segment.regex
