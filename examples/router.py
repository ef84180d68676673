from signpost import Method, RouteFactory, Router


r = Router(RouteFactory())


def show(route):
    return '{} {}'.format(route.pattern, route.dispatch_values())


r.default_handler = show


# Requests with the path set exactly to `/` end up here. The defaults
# are what reverse routing looks for, so `{'controller': 'pages',
# 'action': 'home'}` turns back into `/`.
r.add('/', {'controller': 'pages', 'action': 'home'})


# `:name` captures any segment. A request to `/pages/about` leaves
# `route.get('page')` set to `'about'`.
r.add('/pages/:page', {'controller': 'pages', 'action': 'view'})


# `<regex>:name` only captures segments matching the expression, and the
# trailing `*` collects the rest of the path as wildcard arguments.
# `/posts/42/comments/page:2` gives `id == '42'`, one positional argument
# `'comments'` and one named argument `page == '2'`.
r.add('/posts/<\\d+>:id/*', {'controller': 'posts', 'action': 'view'})


# Only POST requests are directed here, everything registered without
# methods answers GET, POST, PUT and DELETE.
r.add('/posts', {'controller': 'posts', 'action': 'create'},
      methods=Method.POST)


# Registration order is priority: this catches everything the routes
# above did not.
r.add('/*', {'controller': 'errors', 'action': 'missing'})


if __name__ == '__main__':
    print(r.route('/posts/42/comments/page:2'))
    print(r.route('/posts', Method.POST))
    print(r.reverse_route({'controller': 'pages', 'action': 'view',
                           'page': 'about'}))
