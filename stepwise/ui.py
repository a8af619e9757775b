from docopt import docopt
from delnone import delnone
from json import JSONEncoder
from operator import add
from tqdm import tqdm
import sys

from stepwise.compose import compose
from stepwise.pagevisits import parse_log
from stepwise.steppers import appending_to_list, joined_with, multiplying, summing
from stepwise.transduce import eduction, fold, transduce
from stepwise.util import count, fmap, identity, is_even, is_odd, partial, pipeline, read_chunks
from stepwise.xforms import appending, drop, filter, map, take

json_encoder = JSONEncoder(ensure_ascii=False, sort_keys=True)
json_encode = lambda data: json_encoder.encode(data)

UI_USAGE = """
Stepwise

Usage:
  stepwise visits [--host=<host>] [--drop=<n>] [--take=<n>] [--progress] [<log>...]
  stepwise fold (sum|product|list|join <sep>) [--inc=<n>] [--odd|--even] [--drop=<n>] [--take=<n>] [--append=<v>] [<number>...]

Options:
  --host=<host>  Site prefix for visited urls [default: http://simplectic.com].
  --drop=<n>     Skip the first n items.
  --take=<n>     Stop after n items.
  --progress     Show a progress bar while reading logs.
  --inc=<n>      Add n to every number.
  --odd          Keep odd numbers only.
  --even         Keep even numbers only.
  --append=<v>   Fold an extra number in once the input is exhausted.
"""

def optional_count(stage, value):
    if value is None:
        return None
    return stage(int(value))

def build_xform(xforms):
    xforms = delnone(xforms)
    if len(xforms) == 0:
        return map(identity)
    return compose(*xforms)

def log_chunks(paths, stdin):
    if not paths:
        for chunk in read_chunks(stdin):
            yield chunk
    for path in paths:
        with open(path) as fd:
            chunk = ''
            for chunk in read_chunks(fd):
                yield chunk
            # Keep the last line of one file from running into the next.
            if chunk and not chunk.endswith('\n'):
                yield '\n'

def visits_ui(args, stdin):
    xform = build_xform([
        parse_log(args['--host']),
        optional_count(drop, args['--drop']),
        optional_count(take, args['--take']),
    ])
    chunks = tqdm(
        log_chunks(args['<log>'], stdin),
        desc="Reading logs",
        unit="chunk",
        disable=not args['--progress'],
        leave=False)
    with chunks:
        found = pipeline(
            partial(eduction, xform),
            fmap(partial(print, end='')),
            count
        )(chunks)
    return 0 if found > 0 else 1

def read_numbers(args, stdin):
    numbers = args['<number>']
    if not numbers:
        numbers = stdin.read().split()
    return [int(n) for n in numbers]

def fold_ui(args, stdin):
    inc = args['--inc']
    xform = build_xform([
        map(partial(add, int(inc))) if inc is not None else None,
        filter(is_odd) if args['--odd'] else None,
        filter(is_even) if args['--even'] else None,
        optional_count(drop, args['--drop']),
        optional_count(take, args['--take']),
        optional_count(appending, args['--append']),
    ])
    numbers = read_numbers(args, stdin)
    if args['sum']:
        print(fold(xform, summing(), numbers))
    elif args['product']:
        print(fold(xform, multiplying(), numbers))
    elif args['list']:
        print(json_encode(fold(xform, appending_to_list(), numbers)))
    elif args['join']:
        print(transduce(xform, joined_with(args['<sep>']), '', numbers))
    return 0

def ui_main():
    result = stepwise_ui(sys.argv[1:])
    sys.exit(result)

def stepwise_ui(argv, stdin=None):
    if stdin is None:
        stdin = sys.stdin
    args = docopt(UI_USAGE, argv)
    if args['visits']:
        return visits_ui(args, stdin)
    elif args['fold']:
        return fold_ui(args, stdin)
