import pytest
from stepwise.compose import compose
from stepwise.reduced import reduced, is_reduced, deref, Reduced
from stepwise.steppers import append, sum_of, product_of, joined_with, summing, multiplying, appending_to_list
from stepwise.transduce import reduce, transduce, fold, into, eduction
from stepwise.transformer import Transformer, UnsupportedInit, wrap, try_init
from stepwise.util import identity, is_odd, is_equal
from stepwise.xforms import map, filter, remove, take, drop, appending

inc = lambda x: x + 1
double = lambda x: x * 2
one2ten = list(range(1, 10 + 1))
squares = map(lambda x: x * x)

def test_reduce_with_function():
    assert reduce(sum_of, 1, [2, 3, 4]) == 10
    assert reduce(product_of, 1, [2, 3, 4]) == 24
    assert reduce(product_of, 2, [2, 3, 4]) == 48
    assert reduce(append, [], [2, 3, 4]) == [2, 3, 4]

def test_reduce_with_transformer():
    assert reduce(wrap(sum_of), 2, [2, 3, 4]) == 11
    assert reduce(wrap(product_of), 1, [2, 3, 4]) == 24

def test_reduce_empty_source():
    assert reduce(sum_of, 7, []) == 7

def test_reduce_calls_result_once():
    class Counted(Transformer):
        results = 0
        def step(self, acc, item):
            return acc + item
        def result(self, acc):
            self.results += 1
            return acc * 10
    xf = Counted()
    assert reduce(xf, 0, [1, 2, 3]) == 60
    assert xf.results == 1

def test_reduce_stops_on_reduced():
    pulled = []
    def source():
        for x in irange_from(1):
            pulled.append(x)
            yield x
    def stop_at_three(acc, item):
        acc = acc + item
        return reduced(acc) if item == 3 else acc
    assert reduce(stop_at_three, 0, source()) == 6
    assert pulled == [1, 2, 3]

def irange_from(start):
    while True:
        yield start
        start += 1

def test_wrap_init_not_supported():
    with pytest.raises(UnsupportedInit):
        wrap(sum_of).init()
    assert isinstance(try_init(wrap(sum_of)), UnsupportedInit)
    assert try_init(summing()) == 0

def test_wrap_result_is_identity():
    acc = [1]
    assert wrap(append).result(acc) is acc

def test_reduced_signal():
    r = reduced(5)
    assert is_reduced(r)
    assert not is_reduced(5)
    assert not is_reduced(None)
    assert deref(r) == 5
    assert r == Reduced(5)

def test_transduce_map():
    assert transduce(map(inc), append, [], [2, 3, 4]) == [3, 4, 5]
    assert transduce(map(inc), sum_of, 0, [2, 3, 4]) == 12
    assert transduce(map(inc), product_of, 1, [2, 3, 4]) == 60
    assert transduce(map(lambda x: x + 2), product_of, 1, [2, 3, 4]) == 120

def test_identity_transducer():
    assert transduce(compose(map(identity)), append, [], one2ten) == one2ten

def test_composition_order():
    assert transduce(compose(map(inc), map(double)), append, [], [2, 3]) == [6, 8]
    plus5 = compose(map(inc), map(lambda x: x + 2), map(inc), map(inc))
    assert transduce(plus5, append, [], [2, 3, 4]) == [7, 8, 9]

def test_filter_map_order():
    assert transduce(compose(map(inc), filter(is_odd)), append, [], [1, 2, 3, 4, 5]) == [3, 5]
    assert transduce(compose(filter(is_odd), map(inc)), append, [], [1, 2, 3, 4, 5]) == [2, 4, 6]

def test_remove():
    xform = compose(filter(is_odd), map(inc), remove(is_equal(4)))
    assert transduce(xform, append, [], [1, 2, 3, 4, 5]) == [2, 6]

def test_squares_of_odds():
    squaresOfTheOddNumbers = compose(filter(is_odd), squares)
    assert transduce(squaresOfTheOddNumbers, sum_of, 0, one2ten) == 165
    assert transduce(squaresOfTheOddNumbers, append, [], one2ten) == [1, 9, 25, 49, 81]

def test_take_halts_pulling():
    pulled = []
    def source():
        for x in [1, 2, 3, 4, 5]:
            pulled.append(x)
            yield x
    assert transduce(take(3), append, [], source()) == [1, 2, 3]
    assert pulled == [1, 2, 3]

def test_take_from_infinite_source():
    assert transduce(compose(filter(is_odd), take(4)), append, [], irange_from(0)) == [1, 3, 5, 7]

def test_drop_take_drop():
    xform = compose(drop(1), take(3), drop(1))
    assert transduce(xform, append, [], [1, 2, 3, 4, 5]) == [3, 4]

def test_appending():
    assert transduce(appending(7), append, [], [1, 2, 3]) == [1, 2, 3, 7]
    assert transduce(compose(map(inc), appending(7)), append, [], [1, 2, 3]) == [2, 3, 4, 7]
    assert transduce(compose(take(2), appending(7)), append, [], [1, 2, 3]) == [1, 2, 7]

def test_appending_into_reduced_stage():
    # take is inside appending, so the appended value is the one which fills it.
    assert transduce(compose(appending(7), take(4)), append, [], [1, 2, 3]) == [1, 2, 3, 7]
    assert transduce(compose(appending(7), take(2)), append, [], [1, 2, 3]) == [1, 2]

def test_stateful_reuse():
    take3 = take(3)
    assert transduce(take3, append, [], [1, 2, 3, 4, 5]) == [1, 2, 3]
    assert transduce(take3, append, [], [6, 7, 8, 9]) == [6, 7, 8]
    drop2 = drop(2)
    assert transduce(drop2, append, [], [1, 2, 3]) == [3]
    assert transduce(drop2, append, [], [1, 2, 3]) == [3]

def test_caller_errors_propagate():
    def boom(x):
        raise KeyError(x)
    with pytest.raises(KeyError):
        transduce(map(boom), append, [], [1])

def test_fold():
    assert fold(map(inc), summing(), [2, 3, 4]) == 12
    assert fold(map(inc), multiplying(), [2, 3, 4]) == 60
    assert fold(compose(take(2), appending(9)), appending_to_list(), [1, 2, 3]) == [1, 2, 9]
    with pytest.raises(UnsupportedInit):
        fold(map(inc), sum_of, [1, 2, 3])

def test_fold_seeds_fresh_list():
    xform = map(inc)
    stepper = appending_to_list()
    assert fold(xform, stepper, [1]) == [2]
    assert fold(xform, stepper, [1]) == [2]

def test_joined_with():
    assert transduce(map(inc), joined_with(', '), '', [1, 2, 3]) == "2, 3, 4"
    assert transduce(map(inc), joined_with('.'), '', []) == ''

def test_into():
    assert into([], map(inc), [1, 2, 3]) == [2, 3, 4]
    assert into('', map(str), [1, 2, 3]) == '123'
    assert into({}, map(lambda x: (x, x * x)), [1, 2]) == {1: 1, 2: 4}
    assert into(set(), map(lambda x: x % 2), [1, 2, 3]) == {0, 1}
    with pytest.raises(TypeError):
        into(0, map(inc), [1, 2])

def test_bad_stepper():
    with pytest.raises(TypeError):
        transduce(map(inc), 5, 0, [1])

def test_eduction():
    assert list(eduction(map(inc), [1, 2, 3])) == [2, 3, 4]
    assert list(eduction(compose(map(inc), appending(0)), [1, 2])) == [2, 3, 0]
    assert list(eduction(compose(filter(is_odd), take(3)), irange_from(0))) == [1, 3, 5]

def test_eduction_is_lazy():
    pulled = []
    def source():
        for x in irange_from(0):
            pulled.append(x)
            yield x
    items = eduction(map(inc), source())
    assert next(items) == 1
    assert pulled == [0]
    assert next(items) == 2
    assert pulled == [0, 1]
