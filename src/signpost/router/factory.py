from .route import Route


class RouteFactory:
    """Builds routes for a Router.

    A router only ever calls ``factory(pattern, defaults)``, so any callable
    with that signature (the Route class itself included) can stand in.
    """

    def __init__(self, *, case_sensitive=True, require_dispatch=False):
        self.case_sensitive = case_sensitive
        self.require_dispatch = require_dispatch

    def __repr__(self):
        return '<{} case_sensitive={} require_dispatch={}>'.format(
            type(self).__name__, self.case_sensitive, self.require_dispatch)

    def __call__(self, pattern, defaults=None):
        return Route(
            pattern, defaults, case_sensitive=self.case_sensitive,
            require_dispatch=self.require_dispatch)


class CaseInsensitiveRouteFactory(RouteFactory):
    def __init__(self, *, require_dispatch=False):
        super().__init__(
            case_sensitive=False, require_dispatch=require_dispatch)
