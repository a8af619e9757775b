import functools as f
from timeit import timeit
from stepwise.transduce import reduce
from stepwise.transformer import wrap

def plus(x, y):
    return x + y

def test_reduce():
    f.reduce(plus, range(10000), 0)

def test_stepwise_reduce():
    reduce(plus, 0, range(10000))

def test_stepwise_reduce_wrapped():
    reduce(wrap(plus), 0, range(10000))

def loop_reduce(fn, coll, init):
    acc = init
    for v in coll:
        acc = fn(acc, v)
    return acc

def test_loop():
    loop_reduce(plus, range(10000), 0)


if __name__ == '__main__':
    for case in [test_reduce, test_stepwise_reduce, test_stepwise_reduce_wrapped, test_loop]:
        print(case.__name__, timeit(case, number=1000))
