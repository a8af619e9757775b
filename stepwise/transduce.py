from collections import deque

from stepwise.reduced import is_reduced, deref
from stepwise.steppers import append, concat, merge, add_to
from stepwise.transformer import as_transformer, wrap


def reduce(xf, init, source):
    """
    Folds source into init with xf, which may be a transformer or a plain
    (acc, item) -> acc function. Stops pulling from source as soon as a step
    returns a Reduced. xf.result runs once on the final accumulator.
    """
    xf = as_transformer(xf)
    acc = init
    for item in source:
        acc = xf.step(acc, item)
        if is_reduced(acc):
            acc = deref(acc)
            break
    return xf.result(acc)


def transduce(xform, stepper, init, source):
    """
    xform is a transducer, (Transformer -> Transformer)
    stepper is a transformer or (acc -> item -> acc)
    init is acc
    source is [item]
    """
    xf = xform(as_transformer(stepper))
    return reduce(xf, init, source)


def fold(xform, stepper, source):
    """Like transduce, but the initial accumulator comes from the stepper's init."""
    xf = xform(as_transformer(stepper))
    return reduce(xf, xf.init(), source)


_into_steppers = [
    (list, append),
    (str, concat),
    (dict, merge),
    (set, add_to),
]


def into(to, xform, source):
    """Transduces source into the collection to, choosing the stepper from its type."""
    for (kind, stepper) in _into_steppers:
        if isinstance(to, kind):
            return transduce(xform, stepper, to, source)
    raise TypeError("Can't transduce into object of type %s" % type(to))


def _enqueue(buf, item):
    buf.append(item)
    return buf


def eduction(xform, source):
    """
    Lazily yields the items xform produces from source. Items come out as
    soon as they are stepped; whatever result adds is yielded last.
    """
    xf = xform(wrap(_enqueue))
    buf = deque()
    for item in source:
        acc = xf.step(buf, item)
        while buf:
            yield buf.popleft()
        if is_reduced(acc):
            break
    for item in xf.result(buf):
        yield item
