import logging
import sys

from . import log
from .runner import InvalidRouterException, get_parser, verify, run


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)

    log.configure(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        router = verify(args)
    except InvalidRouterException as e:
        print(e.args[0])
        return 1

    return run(router, args)


if __name__ == '__main__':
    sys.exit(main())
