import suite
import re
from datagen import from_schema
from linqy import Q, empty
from pies import get_test_pies, names

test = suite.test
assert_that = suite.assert_that

# test data schemas
person_schema = {
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_provider': 'choice', 'from': ['eng', 'sales', 'hr']},
}

numbers = Q(range(1, 11))  # 1 through 10
pies = Q(get_test_pies())


# where() tests

@test("where filters elements correctly")
def test_where_basic():
    evens = numbers.where(lambda x: x % 2 == 0).to_list()
    assert_that(evens == [2, 4, 6, 8, 10], "should filter even numbers")


@test("where keeps relative order of objects")
def test_where_pies():
    cheap = pies.where(lambda p: p.cost < 4).to_list()
    assert_that(names(cheap) == ["Apple (3.29)", "Lemon (0.99)", "Meat (2.99)"], "cheap pies in source order")


@test("where calls the predicate once per element, left to right")
def test_where_invocations():
    seen = []
    numbers.where(lambda x: seen.append(x) or x > 5)
    assert_that(seen == list(range(1, 11)), "one call per element in order")


@test("where with complex predicate on generated data")
def test_where_complex():
    people = from_schema(person_schema, seed=42).take(25)
    senior_eng = people.where(lambda p: p['department'] == 'eng' and p['age'] > 40).to_list()
    for person in senior_eng:
        assert_that(person['department'] == 'eng', "all should be engineers")
        assert_that(person['age'] > 40, "all should be over 40")


@test("where with regex pattern")
def test_where_regex():
    text_data = Q(['apple123', 'banana', 'cherry456', 'date', '789elderberry'])
    with_numbers = text_data.where(lambda x: bool(re.search(r'\d', x))).to_list()
    assert_that(len(with_numbers) == 3, "should find 3 items with numbers")


@test("where handles empty result")
def test_where_empty_result():
    assert_that(numbers.where(lambda x: x > 100).to_list() == [], "no matches gives empty")


# select() tests

@test("select transforms elements")
def test_select_basic():
    squares = numbers.select(lambda x: x * x).to_list()
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], "should square all numbers")


@test("select projects to another type")
def test_select_projection():
    costs = pies.select(lambda p: p.cost).to_list()
    assert_that(costs == [3.29, 4.29, 0.99, 4.29, 5.70, 2.99], "costs in order")


@test("select calls the projection once per element")
def test_select_invocations():
    calls = []
    Q([3, 1, 2]).select(lambda x: calls.append(x) or x)
    assert_that(calls == [3, 1, 2], "one call per element in order")


@test("select_many flattens sequences")
def test_select_many():
    flattened = Q([[1, 2], [3, 4, 5], [], [6]]).select_many(lambda x: x).to_list()
    assert_that(flattened == [1, 2, 3, 4, 5, 6], "should flatten all sublists")
    words = Q(['hello world', 'linq rocks']).select_many(lambda s: s.split()).to_list()
    assert_that(words == ['hello', 'world', 'linq', 'rocks'], "split then flatten")


# all() tests

@test("all is true when every element passes")
def test_all_true():
    assert_that(numbers.all(lambda x: x > 0), "all positive")
    assert_that(pies.all(lambda p: p.cost < 10), "all pies under 10")


@test("all is false when one element fails")
def test_all_false():
    assert_that(not numbers.all(lambda x: x < 10), "10 fails")


@test("all is vacuously true on an empty sequence")
def test_all_empty():
    assert_that(empty().all(lambda x: False), "no element can fail")


# any() tests

@test("any without predicate checks for elements")
def test_any_no_predicate():
    assert_that(pies.any(), "pies are not empty")
    assert_that(not empty().any(), "empty has none")


@test("any with predicate")
def test_any_predicate():
    assert_that(pies.any(lambda p: p.cost > 3), "some pie costs more than 3")
    assert_that(not pies.any(lambda p: p.cost > 20), "no pie costs more than 20")
    assert_that(not pies.any(lambda p: p.cost == 0), "no free pie")
    assert_that(not empty().any(lambda p: p.cost > 20), "empty never matches")


@test("any stops at the first match")
def test_any_short_circuits():
    seen = []
    assert_that(numbers.any(lambda x: seen.append(x) or x == 3), "3 is present")
    assert_that(seen == [1, 2, 3], "should stop once 3 matched")


if __name__ == "__main__":
    suite.run(title="linqy filtering and projection test suite")
