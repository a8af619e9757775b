from functools import partial as functools_partial


def identity(x):
    return x


def partial(fn, *args, **kwargs):
    out = functools_partial(fn, *args, **kwargs)
    out.__name__ = "partial_" + fn.__name__
    return out


def pipeline(*funcs):
    """Left to right composition: pipeline(f, g)(x) == g(f(x))."""
    if funcs:
        foo = funcs[0]
        rest = funcs[1:]
        if rest:
            next_hop = pipeline(*rest)
            def pipe(*args, **kwargs):
                return next_hop(foo(*args, **kwargs))
            return pipe
        else:  # no rest, foo is final function.
            return foo
    else:  # no funcs at all.
        return identity


def fmap(func):
    def mapped(collection):
        return map(func, collection)
    mapped.__name__ = "mapped_" + func.__name__
    return mapped


def count(iterator):
    c = 0
    for v in iterator:
        c += 1
    return c


def invert(v):
    return not v


def complement(f):
    """Negates a predicate."""
    def complemented(*args, **kwargs):
        return invert(f(*args, **kwargs))
    return complemented


def is_equal(y):
    def equal_to(x):
        return x == y
    return equal_to


def is_odd(x):
    return x % 2 == 1


def is_even(x):
    return x % 2 == 0


def every(predicate, coll):
    for x in coll:
        if not predicate(x):
            return False
    return True


def all_pass(*preds):
    """Predicate which holds when every one of preds holds. Stops at the first failure."""
    def passes(x):
        return every(lambda pred: pred(x), preds)
    return passes


def nth(n):
    def nth_getter(lst):
        return lst[n]
    return nth_getter


first = nth(0)
second = nth(1)


def dethrow(function, catch_predicate, error_encoder=identity):
    """
    Converts a function which raises exceptions to a function which returns either a result or an error value.
    catch_predicate is a function which takes an exception e, and returns whether the exception should be caught, or
    raised. Error encoder takes a caught exception e returns the error value for the wrapped function.
    """
    def dethrow_wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except Exception as e:
            if catch_predicate(e):
                return error_encoder(e)
            else:
                raise e
    return dethrow_wrapper


def read_chunks(fsrc, length=16 * 1024):
    """Yields successive reads of file like object fsrc until it is exhausted."""
    while 1:
        buf = fsrc.read(length)
        if not buf:
            break
        yield buf
