import suite
from decimal import Decimal
from linqy import (
    Q, Queryable, empty, EmptySequenceError, NullSourceError, MissingCapabilityError
)
from pies import get_test_pies

test = suite.test
assert_that = suite.assert_that
raises = suite.raises
close_to = suite.close_to

pies = Q(get_test_pies())
numbers = Q([4, 8, 15, 16, 23, 42])


# --- count ---

@test("count with and without predicate")
def test_count():
    assert_that(numbers.count() == 6, "six numbers")
    assert_that(numbers.count(lambda x: x % 2 == 0) == 4, "four evens")
    assert_that(pies.count(lambda p: p.name == "Meat") == 2, "two meat pies")
    assert_that(empty().count() == 0, "empty")


# --- sum ---

@test("sum adds numbers left to right")
def test_sum_numbers():
    assert_that(numbers.sum() == 108, "sum of the numbers")
    assert_that(Q([Decimal("0.10"), Decimal("0.20")]).sum() == Decimal("0.30"), "decimals stay exact")


@test("sum with selector")
def test_sum_selector():
    assert_that(close_to(pies.sum(lambda p: p.cost), 21.55, 1e-9), "total pie cost")


@test("sum of an empty sequence is zero")
def test_sum_empty():
    assert_that(empty().sum() == 0, "zero")
    assert_that(empty().sum(lambda p: p.cost) == 0, "zero with selector")


@test("sum of an absent source fails")
def test_sum_absent():
    with raises(NullSourceError, "absent source"):
        Queryable(None).sum()
    with raises(EmptySequenceError, "null source is also an empty-sequence violation"):
        Queryable(None).sum()


@test("sum rejects non-numeric elements")
def test_sum_non_numeric():
    with raises(MissingCapabilityError, "pies are not numbers"):
        pies.sum()
    with raises(TypeError, "builtin TypeError still catches it"):
        Q([1, "2"]).sum()


# --- average ---

@test("average of costs")
def test_average_selector():
    assert_that(close_to(pies.average(lambda p: p.cost), 3.5917, 1e-4), "average pie cost")


@test("average of numbers")
def test_average_numbers():
    assert_that(numbers.average() == 18.0, "108 / 6")
    assert_that(Q([1, 2]).average() == 1.5, "true division")


@test("average of an empty sequence fails")
def test_average_empty():
    with raises(EmptySequenceError, "empty"):
        empty().average()
    with raises(EmptySequenceError, "absent"):
        Queryable(None).average(lambda p: p.cost)


# --- max / min ---

@test("max and min over numbers")
def test_max_min_numbers():
    assert_that(numbers.max() == 42, "max")
    assert_that(numbers.min() == 4, "min")
    assert_that(Q([-3]).max() == -3 and Q([-3]).min() == -3, "single element")


@test("max and min return the extracted value")
def test_max_min_selector():
    assert_that(pies.max(lambda p: p.cost) == 5.70, "most expensive")
    assert_that(pies.min(lambda p: p.cost) == 0.99, "cheapest")


@test("max and min call the selector once per element")
def test_max_min_invocations():
    calls = []
    numbers.max(lambda x: calls.append(x) or x)
    assert_that(calls == [4, 8, 15, 16, 23, 42], "single pass")


@test("max and min fail on empty sequences")
def test_max_min_empty():
    with raises(EmptySequenceError, "max"):
        empty().max()
    with raises(EmptySequenceError, "min"):
        empty().min(lambda x: x)


# --- aggregate ---

@test("aggregate folds with and without a seed")
def test_aggregate():
    assert_that(numbers.aggregate(lambda acc, x: acc + x) == 108, "no seed")
    assert_that(Q(['a', 'b', 'c']).aggregate(lambda acc, x: acc + x, '>') == '>abc', "string seed")
    assert_that(empty().aggregate(lambda acc, x: acc + x, 0) == 0, "seed only")
    assert_that(empty().aggregate(lambda acc, x: acc, None) is None, "None is a valid seed")
    with raises(EmptySequenceError, "empty without seed"):
        empty().aggregate(lambda acc, x: acc + x)


if __name__ == "__main__":
    suite.run(title="linqy aggregation test suite")
