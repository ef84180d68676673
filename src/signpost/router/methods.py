from enum import IntFlag


class UnsupportedMethodException(ValueError):
    pass


class Method(IntFlag):
    GET = 1
    HEAD = 2
    POST = 4
    PUT = 8
    DELETE = 16
    PATCH = 32
    OPTIONS = 64
    TRACE = 128
    CONNECT = 256

    @classmethod
    def from_string(cls, name):
        """Look up a single method by name, case-insensitively."""
        if not isinstance(name, str):
            raise TypeError(
                'Method name must be a string, got {}'
                .format(type(name).__name__))

        try:
            return cls.__members__[name.strip().upper()]
        except KeyError:
            raise UnsupportedMethodException(
                'Unsupported method "{}"'.format(name)) from None


DEFAULT_METHODS = Method.GET | Method.POST | Method.PUT | Method.DELETE

ANY_METHOD = Method(0)
for _m in Method:
    ANY_METHOD |= _m
del _m


def as_methods(value):
    """Coerce a flag, a method string or an iterable of strings to a flag.

    Strings may list several methods separated by commas, so both
    ``'GET'`` and ``'GET,POST'`` are accepted. ``None`` stays ``None``.
    """
    if value is None or isinstance(value, Method):
        return value

    if isinstance(value, int):
        if not value or value & ~int(ANY_METHOD):
            raise UnsupportedMethodException(
                'Unsupported method mask {}'.format(value))
        return Method(value)

    if isinstance(value, str):
        value = value.split(',')

    result = Method(0)
    for name in value:
        if isinstance(name, Method):
            result |= name
        else:
            result |= Method.from_string(name)

    if not result:
        raise UnsupportedMethodException('No methods given')

    return result
