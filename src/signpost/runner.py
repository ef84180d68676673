from argparse import ArgumentParser
from importlib import import_module
import sys

from .router import Router, UnsupportedMethodException


def get_parser():
    prog = 'python -m signpost' if sys.argv[0].endswith('__main__.py') \
        else 'signpost'
    parser = ArgumentParser(
        prog=prog, description='Match a path or reverse route values.')
    parser.add_argument('--method', '-m', dest='method', type=str)
    parser.add_argument(
        '--reverse', '-r', dest='reverse', nargs='+', metavar='KEY=VALUE')
    parser.add_argument(
        '--verbose', '-v', dest='verbose', action='store_const',
        const=True, default=False)

    parser.add_argument('application')
    parser.add_argument('path', nargs='?')

    return parser


class InvalidRouterException(Exception):
    pass


def verify(args):
    """Import the router named by ``module.attribute``."""
    try:
        module, attribute = args.application.rsplit('.', 1)
    except ValueError:
        raise InvalidRouterException(
            "Router specifier must contain at least one '.', " +
            "got '{}'.".format(args.application)) from None

    try:
        module = import_module(module)
    except ModuleNotFoundError as e:
        raise InvalidRouterException(
            e.args[0] + ' on Python search path.') from None

    try:
        attribute = getattr(module, attribute)
    except AttributeError:
        raise InvalidRouterException(
            "Module '{}' does not have an attribute '{}'."
            .format(module.__name__, attribute)) from None

    if not isinstance(attribute, Router):
        raise InvalidRouterException(
            "{} is not an instance of 'signpost.Router'."
            .format(args.application))

    return attribute


def parse_value(value):
    if value.lstrip('-').isdigit():
        return int(value)

    return value


def parse_values(pairs):
    values = {}
    for pair in pairs:
        key, equals, value = pair.partition('=')
        if not equals or not key:
            print("Expected KEY=VALUE, got '{}'.".format(pair))
            return None
        values[parse_value(key)] = parse_value(value)

    return values


def print_match(route):
    print(route.pattern)
    for name, value in route.dispatch_values().items():
        print('  {} = {!r}'.format(name, value))
    positional = 0
    for arg in route.wildcard_args():
        if arg.name is None:
            print('  *{} = {!r}'.format(positional, arg.value))
            positional += 1
        else:
            print('  *{} = {!r}'.format(arg.name, arg.value))


def run(router, args):
    try:
        if args.reverse:
            return reverse(router, args)

        if not args.path:
            print('Give a path to match or --reverse KEY=VALUE pairs.')
            return 1

        result = router.match(args.path, args.method)
    except UnsupportedMethodException as e:
        print(e.args[0])
        return 1

    if result is None:
        print('No route matched {}'.format(args.path))
        return 1

    print_match(result[0])

    return 0


def reverse(router, args):
    values = parse_values(args.reverse)
    if values is None:
        return 1

    url = router.reverse_route(values, args.method)
    if url is None:
        print('No route matched {}'.format(values))
        return 1

    print(url)

    return 0
