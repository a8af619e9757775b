def _comp_0():
    raise NotImplementedError("Composition of 0 transducers is not supported.")


def _comp_1(a):
    return a


def _comp_2(a, b):
    def _combined2(xf):
        return a(b(xf))

    return _combined2


def _comp_3(a, b, c):
    def _combined3(xf):
        return a(b(c(xf)))

    return _combined3


def _comp_n(*xforms):
    def _combined(xf):
        for xform in reversed(xforms):
            xf = xform(xf)
        return xf

    return _combined


_comp_fns = [
    _comp_0,
    _comp_1,
    _comp_2,
    _comp_3,
]


def compose(*xforms):
    """
    Combines transducers into one. The last transducer wraps the stepper
    first, so once driven items flow through xforms in the order given:
    compose(drop(1), take(3)) drops before it takes.
    """
    n = len(xforms)
    if n < len(_comp_fns):
        return _comp_fns[n](*xforms)
    return _comp_n(*xforms)
