import logging
from collections import namedtuple

from .factory import CaseInsensitiveRouteFactory, RouteFactory
from .methods import DEFAULT_METHODS, Method, UnsupportedMethodException, \
    as_methods
from .pattern import InvalidPatternException
from .route import IncompleteRouteException, NoHandlerException, Route, \
    RouteNotFoundException, RouteValueException, WildcardArg


logger = logging.getLogger('signpost.router')

Entry = namedtuple('Entry', 'route,methods,handler')


def check_handler(handler, what='handler'):
    if handler is not None and not callable(handler):
        raise TypeError('{} must be callable, got {}'.format(
            what, type(handler).__name__))


class Router:
    """Ordered route table, first registered is first tried.

    Routes are added during setup and only read while routing; the table
    has no locking, so finish registering before routing from several
    threads.
    """

    def __init__(self, route_factory, *, default_handler=None):
        if not callable(route_factory):
            raise TypeError('route_factory must be callable, got {}'.format(
                type(route_factory).__name__))
        check_handler(default_handler, 'default_handler')

        self._routes = []
        self.route_factory = route_factory
        self._default_handler = default_handler

    def __len__(self):
        return len(self._routes)

    def __iter__(self):
        return iter(self._routes)

    @property
    def default_handler(self):
        return self._default_handler

    @default_handler.setter
    def default_handler(self, handler):
        check_handler(handler, 'default_handler')
        self._default_handler = handler

    def add(self, pattern, defaults=None, handler=None,
            methods=DEFAULT_METHODS):
        route = self.route_factory(pattern, defaults or {})

        return self.add_route(route, handler, methods)

    def add_route(self, route, handler=None, methods=DEFAULT_METHODS):
        check_handler(handler)
        methods = as_methods(methods)
        if methods is None:
            methods = DEFAULT_METHODS

        self._routes.append(Entry(route, methods, handler))
        logger.debug('Added %s for %s', route.describe(), methods)

        return route

    def add_get(self, pattern, defaults=None, handler=None):
        return self.add(pattern, defaults, handler, Method.GET)

    def add_post(self, pattern, defaults=None, handler=None):
        return self.add(pattern, defaults, handler, Method.POST)

    def add_put(self, pattern, defaults=None, handler=None):
        return self.add(pattern, defaults, handler, Method.PUT)

    def add_delete(self, pattern, defaults=None, handler=None):
        return self.add(pattern, defaults, handler, Method.DELETE)

    def match(self, path, methods=None):
        """Return ``(matched_route, handler)`` for the first match or None.

        ``methods`` filters entries by method; ``None`` tries them all.
        """
        methods = as_methods(methods)

        for entry in self._routes:
            if methods is not None and not entry.methods & methods:
                continue

            matched = entry.route.match_url(path)
            if matched is not None:
                logger.debug('%s matched %s', path, entry.route.pattern)
                return matched, entry.handler

        logger.debug('No route matched %s', path)

        return None

    def route(self, path, methods=None, no_match=None):
        check_handler(no_match, 'no_match')

        result = self.match(path, methods)
        if result is not None:
            return self._call(*result)

        if no_match is not None:
            return no_match(path)

        raise RouteNotFoundException('No route matched {}'.format(path))

    def reverse_route(self, values, methods=None):
        methods = as_methods(methods)

        for entry in self._routes:
            if methods is not None and not entry.methods & methods:
                continue

            matched = entry.route.match_dispatch(values)
            if matched is not None:
                return matched.url()

        return None

    def _call(self, route, handler):
        if handler is not None:
            return handler(route)

        if self._default_handler is not None:
            return self._default_handler(route)

        raise NoHandlerException(
            'Route {} matched URL {}, but no handler given'
            .format(route.pattern, route.matched_url))


__all__ = [
    'Router', 'Route', 'RouteFactory', 'CaseInsensitiveRouteFactory',
    'Method', 'DEFAULT_METHODS', 'WildcardArg', 'RouteNotFoundException',
    'NoHandlerException', 'RouteValueException', 'IncompleteRouteException',
    'InvalidPatternException', 'UnsupportedMethodException']
