from func_prototypes import returned


class Reduced(object):
    """
    Terminal accumulator. A step returning one of these asks the driver to
    stop pulling from its source. Any other value means keep going.
    """
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return "Reduced(%r)" % (self.value,)

    def __eq__(self, other):
        return isinstance(other, Reduced) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    __hash__ = None


@returned(Reduced)
def reduced(value):
    return Reduced(value)


def is_reduced(x):
    return isinstance(x, Reduced)


def deref(r):
    """Unwraps a Reduced. Must only be called on values where is_reduced is True."""
    return r.value


def ensure_reduced(x):
    """Wraps x unless it is already Reduced. Avoids Reduced(Reduced(acc))."""
    return x if is_reduced(x) else reduced(x)


def unreduced(x):
    return deref(x) if is_reduced(x) else x
