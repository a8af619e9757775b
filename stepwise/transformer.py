from typing import TypeVar, Callable, Generic

from stepwise.util import dethrow

A = TypeVar("A")
T = TypeVar("T")
Step = Callable[[A, T], A]


class UnsupportedInit(NotImplementedError):
    """init() was called on a transformer that has no notion of a seed."""


class Transformer(Generic[A, T]):
    """
    The three operation contract every stage implements.

    init produces a starting accumulator, step folds one item into the
    accumulator (possibly returning a Reduced to stop the run) and result
    finalizes the accumulator once the run is over.
    """

    def init(self) -> A:
        raise UnsupportedInit("init not supported")

    def step(self, acc: A, item: T):
        raise NotImplementedError()

    def result(self, acc: A) -> A:
        return acc


class Wrapped(Transformer[A, T]):

    def __init__(self, stepper: Step[A, T]):
        self.stepper = stepper

    def step(self, acc: A, item: T):
        return self.stepper(acc, item)

    def __repr__(self):
        return "wrap(%s)" % getattr(self.stepper, '__name__', repr(self.stepper))


class Seeded(Wrapped[A, T]):
    """A wrapped stepper which knows how to build its own initial accumulator."""

    def __init__(self, stepper: Step[A, T], seed: Callable[[], A]):
        super().__init__(stepper)
        self.seed = seed

    def init(self) -> A:
        return self.seed()


class Stage(Transformer[A, T]):
    """
    Base for transformers built by a transducer. Everything is delegated to
    the inner transformer xf; subclasses override what they change.
    """

    def __init__(self, xf: Transformer):
        self.xf = xf

    def init(self) -> A:
        return self.xf.init()

    def step(self, acc: A, item: T):
        return self.xf.step(acc, item)

    def result(self, acc: A) -> A:
        return self.xf.result(acc)


def wrap(stepper: Step[A, T]) -> Transformer[A, T]:
    return Wrapped(stepper)


def as_transformer(stepper) -> Transformer:
    """
    Resolves the stepper argument of the drivers. Transformers are used as
    is, other callables are wrapped.
    """
    if isinstance(stepper, Transformer):
        return stepper
    elif callable(stepper):
        return wrap(stepper)
    else:
        raise TypeError("Can't step with object of type %s" % type(stepper))


def try_init(xf: Transformer):
    """
    Returns xf.init(), or the UnsupportedInit instance when xf has no seed.
    """
    guarded = dethrow(xf.init, lambda e: isinstance(e, UnsupportedInit))
    return guarded()
