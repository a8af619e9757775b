# Combining functions for the drivers. Each is (acc, item) -> acc.
from stepwise.transformer import Seeded

append = lambda acc, val: acc.append(val) or acc
append.__name__ = 'append'
append.__doc__ = \
"""
List accumulator which appends in place instead of building a new list on
every step.
"""

sum_of = lambda acc, val: acc + val
sum_of.__name__ = 'sum_of'
sum_of.__doc__ = """Reducer which computes a sum"""

product_of = lambda acc, val: acc * val
product_of.__name__ = 'product_of'
product_of.__doc__ = """Reducer which computes a product"""


def concat(acc, s):
    return acc + s


def joined_with(separator):
    def joint(acc, val):
        if acc == '':
            return "%s" % (val,)
        else:
            return "%s%s%s" % (acc, separator, val)
    return joint


def merge(acc, pair):
    (key, value) = pair
    acc[key] = value
    return acc


def add_to(acc, val):
    acc.add(val)
    return acc


def summing():
    return Seeded(sum_of, lambda: 0)


def multiplying():
    return Seeded(product_of, lambda: 1)


def appending_to_list():
    return Seeded(append, list)
