from stepwise.reduced import is_reduced, deref
from stepwise.transformer import as_transformer


class Pipe(object):
    """
    Push driven counterpart of transduce. Items are sent one at a time; once
    a step returns Reduced the pipe stops stepping and send returns False.
    close runs result exactly once.

        with Pipe(take(2), append, []) as p:
            for x in source:
                if not p.send(x):
                    break
        p.value  # [x0, x1]
    """

    def __init__(self, xform, stepper, init):
        self.xf = xform(as_transformer(stepper))
        self.acc = init
        self.done = False
        self.closed = False
        self.value = None

    def send(self, item):
        if self.closed:
            raise ValueError("Can't send to a closed pipe")
        if self.done:
            return False
        acc = self.xf.step(self.acc, item)
        if is_reduced(acc):
            self.acc = deref(acc)
            self.done = True
            return False
        self.acc = acc
        return True

    def close(self):
        if self.closed:
            raise ValueError("Pipe is already closed")
        self.closed = True
        self.value = self.xf.result(self.acc)
        return self.value

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        # On error the accumulator is abandoned rather than finalized.
        if exc_type is None and not self.closed:
            self.close()
        return False
