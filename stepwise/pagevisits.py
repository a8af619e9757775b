"""
Page visit report for web server access logs.

    127.0.0.5 - - [26/Feb/2015 19:27:35] "GET /blog/ HTTP/1.1" 200 -

becomes

    127.0.0.5 visited http://simplectic.com/blog/
"""
import re

from stepwise.compose import compose
from stepwise.util import all_pass, first, second, pipeline
from stepwise.xforms import filter, lines, map, remove

DEFAULT_HOST = 'http://simplectic.com'

_get = re.compile(r'GET /')
_static = re.compile(r'GET /static')
_line = re.compile(r'^(\S+).+"([^"]+)"')

is_get = lambda line: _get.search(line) is not None
not_static = lambda line: _static.search(line) is None
is_page = all_pass(is_get, not_static)


def split_line(line):
    """'log line' -> ('IP', 'GET /url/path HTTP/1.1'), or None when the line is malformed."""
    match = _line.match(line)
    if match is None:
        return None
    return match.groups()


def to_url(host=DEFAULT_HOST):
    """'GET /url/path HTTP/1.1' -> 'http://host/url/path'"""
    return pipeline(
        lambda request: request.split(' ')[1:2],
        lambda path: [host] + path,
        ''.join)


def value_to_url(host=DEFAULT_HOST):
    url = to_url(host)
    def convert(entry):
        return (first(entry), url(second(entry)))
    return convert


def join_visited(entry):
    return ' visited '.join(entry) + '\n'


def parse_log(host=DEFAULT_HOST):
    return compose(
        lines(),
        filter(is_page),
        map(split_line),
        remove(lambda entry: entry is None),
        map(value_to_url(host)),
        map(join_visited))
