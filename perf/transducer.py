import timeit
from tabulate import tabulate
from stepwise.compose import compose
from stepwise.steppers import append, sum_of
from stepwise.transduce import transduce, eduction
from stepwise.util import partial, pipeline, fmap, is_even
from stepwise.xforms import map, filter, take

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if is_even(n):
            total += n
    return total

def sum_even_comprehension(ns):
    return sum([n for n in ns if is_even(n)])

def sum_even_builtin(ns):
    return sum(n for n in ns if is_even(n))

def sum_even_transduce(ns):
    return transduce(filter(is_even), sum_of, 0, ns)

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

def inc(x):
    return x + 1

def square(x):
    return x * x

inc_square_pipeline = pipeline(fmap(inc), fmap(square), list)

incs = map(inc)
squares = map(square)

def inc_square_transduce(nums):
    return transduce(compose(incs, squares), append, [], nums)

def inc_square_eduction(nums):
    return list(eduction(compose(incs, squares), nums))

def first_hundred_transduce(nums):
    return transduce(compose(incs, squares, take(100)), append, [], nums)

def first_hundred_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums][:100]

# args example: partial(inc_square_comprehension, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))


hundredK = range(100000)

def test_sum_even():
    performance_compare(sum_even_loop,
                        sum_even_comprehension,
                        sum_even_builtin,
                        sum_even_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_inc_square():
    performance_compare(inc_square_comprehension,
                        inc_square_loop,
                        inc_square_pipeline,
                        inc_square_transduce,
                        inc_square_eduction,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_early_termination():
    performance_compare(first_hundred_comprehension,
                        first_hundred_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})


if __name__ == '__main__':
    test_sum_even()
    test_inc_square()
    test_early_termination()
