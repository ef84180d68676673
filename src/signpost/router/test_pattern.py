import pytest

from .pattern import parse, names, InvalidPatternException, Segment, \
    SegmentType, DEFAULT_REGEX


def exact(text):
    return Segment(SegmentType.EXACT, text, text)


def placeholder(name):
    return Segment(SegmentType.PLACEHOLDER, name, DEFAULT_REGEX)


def constrained(name, regex):
    return Segment(SegmentType.CONSTRAINED, name, regex)


@pytest.mark.parametrize('pattern,segments,wildcard', [
    ('/', [exact('')], False),
    ('/*', [], True),
    ('/foo', [exact('foo')], False),
    ('/foo/', [exact('foo')], False),
    ('/foo/bar/*', [exact('foo'), exact('bar')], True),
    ('/:controller/:action',
        [placeholder('controller'), placeholder('action')], False),
    (r'/foo/:bar/\d+:baz',
        [exact('foo'), placeholder('bar'), constrained('baz', r'\d+')],
        False),
    (r'/<\d+>:id', [constrained('id', r'\d+')], False),
    (r'/\w+_controller:controller/*',
        [constrained('controller', r'\w+_controller')], True),
    ('/a:b:c', [constrained('c', 'a:b')], False),
    ('/*/foo',
        [Segment(SegmentType.EXACT, '*', r'\*'), exact('foo')], False)
])
def test_parse(pattern, segments, wildcard):
    assert parse(pattern) == (segments, wildcard)


def test_parse_escapes_literals():
    segments, _ = parse('/file.txt/a+b')

    assert [s.data for s in segments] == ['file.txt', 'a+b']
    assert [s.regex for s in segments] == [r'file\.txt', r'a\+b']


@pytest.mark.parametrize('pattern,error', [
    ('', 'empty'),
    ('foo', 'must start with a /'),
    (':foo/bar', 'must start with a /'),
    ('/:foo/:foo', 'Duplicate'),
    (r'/\d+:id/:id', 'Duplicate'),
    ('/(:id', 'Invalid expression')
])
def test_parse_error(pattern, error):
    with pytest.raises(InvalidPatternException) as info:
        parse(pattern)
    assert error in info.value.args[0]


def test_parse_not_a_string():
    with pytest.raises(TypeError):
        parse(b'/foo')


def test_names():
    segments, _ = parse(r'/foo/:bar/\d+:baz/*')

    assert names(segments) == ['bar', 'baz']
