"""
Transducers. Each factory returns a function which takes the inner
transformer xf and builds the stage that feeds it.

Stages which count or buffer keep that state on the stage instance, so every
wrapping call starts fresh and a transducer value can drive any number of
runs.
"""
from typing import TypeVar, Callable

from func_prototypes import typed

from stepwise.reduced import is_reduced, ensure_reduced, unreduced
from stepwise.transformer import Stage, Transformer
from stepwise.util import complement

A = TypeVar("A")
T = TypeVar("T")
U = TypeVar("U")


class Mapping(Stage[A, T]):

    def __init__(self, f: Callable[[T], U], xf: Transformer[A, U]):
        super().__init__(xf)
        self.f = f

    def step(self, acc: A, item: T):
        return self.xf.step(acc, self.f(item))


def map(f: Callable[[T], U]):
    def mapper(xf: Transformer[A, U]):
        return Mapping(f, xf)
    return mapper


class Filtering(Stage[A, T]):

    def __init__(self, pred: Callable[[T], bool], xf: Transformer[A, T]):
        super().__init__(xf)
        self.pred = pred

    def step(self, acc: A, item: T):
        if self.pred(item):
            return self.xf.step(acc, item)
        return acc


def filter(pred: Callable[[T], bool]):
    def filterer(xf: Transformer[A, T]):
        return Filtering(pred, xf)
    return filterer


def remove(pred: Callable[[T], bool]):
    return filter(complement(pred))


class Dropping(Stage[A, T]):

    def __init__(self, n: int, xf: Transformer[A, T]):
        super().__init__(xf)
        self.left = n

    def step(self, acc: A, item: T):
        if self.left > 0:
            self.left -= 1
            return acc
        return self.xf.step(acc, item)


@typed(int)
def drop(n):
    if n < 0:
        raise ValueError("Can't drop a negative number of items: %d" % n)
    def dropper(xf: Transformer[A, T]):
        return Dropping(n, xf)
    return dropper


class Taking(Stage[A, T]):

    def __init__(self, n: int, xf: Transformer[A, T]):
        super().__init__(xf)
        self.left = n

    def step(self, acc: A, item: T):
        # Only reachable from an outer stage's result, e.g. appending.
        if self.left <= 0:
            return ensure_reduced(acc)
        acc = self.xf.step(acc, item)
        self.left -= 1
        if self.left <= 0:
            return ensure_reduced(acc)
        return acc


@typed(int)
def take(n):
    if n < 1:
        raise ValueError("take needs a positive count, got %d" % n)
    def taker(xf: Transformer[A, T]):
        return Taking(n, xf)
    return taker


class Appending(Stage[A, T]):
    """
    Steps one extra value into the accumulator when the run finishes, unless
    the inner transformer already stopped the run.
    """

    def __init__(self, value: T, xf: Transformer[A, T]):
        super().__init__(xf)
        self.value = value
        self.stopped = False

    def step(self, acc: A, item: T):
        acc = self.xf.step(acc, item)
        self.stopped = is_reduced(acc)
        return acc

    def result(self, acc: A) -> A:
        if not self.stopped:
            acc = unreduced(self.xf.step(acc, self.value))
        return self.xf.result(acc)


def appending(value: T):
    def appender(xf: Transformer[A, T]):
        return Appending(value, xf)
    return appender


def _chomp(line):
    return line[:-1] if line.endswith('\r') else line


class Lines(Stage[A, str]):
    """
    Splits text chunks into lines. Lines are emitted without their newline
    (LF or CRLF); a trailing partial line is held back until result.
    """

    def __init__(self, xf: Transformer[A, str]):
        super().__init__(xf)
        self.buffer = ''

    def step(self, acc: A, chunk: str):
        pieces = (self.buffer + chunk).split('\n')
        self.buffer = pieces.pop()
        for line in pieces:
            acc = self.xf.step(acc, _chomp(line))
            if is_reduced(acc):
                self.buffer = ''
                return acc
        return acc

    def result(self, acc: A) -> A:
        if self.buffer:
            line, self.buffer = self.buffer, ''
            acc = unreduced(self.xf.step(acc, _chomp(line)))
        return self.xf.result(acc)


def lines():
    def splitter(xf: Transformer[A, str]):
        return Lines(xf)
    return splitter
