from .router import CaseInsensitiveRouteFactory, Method, Route, \
    RouteFactory, Router

__version__ = '0.1.0'

__all__ = [
    'Router', 'Route', 'RouteFactory', 'CaseInsensitiveRouteFactory',
    'Method']
