import sys
import numpy as np
import pandas as pd
from faker import Faker

import suite
from seqops import A, Array, from_iterable, from_mapping, empty, repeat, attempt

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

Faker.seed(42)
fake = Faker()

records = [
    {'name': fake.first_name(), 'age': fake.pyint(min_value=18, max_value=65),
     'dept': fake.random_element(['eng', 'sales', 'hr'])}
    for _ in range(20)
]


# factory tests

@test("factories build arrays")
def test_factories():
    assert_that(isinstance(from_iterable([1, 2]), Array), "from_iterable should build an Array")
    assert_equal(from_iterable(range(3)).to.list(), [0, 1, 2])
    assert_equal(from_iterable(None).to.list(), [])
    assert_equal(empty().to.count(), 0)
    assert_equal(repeat('x', 3).to.list(), ['x', 'x', 'x'])
    assert_that(A is from_iterable, "A should alias from_iterable")


@test("from_mapping reads keys or values")
def test_from_mapping():
    scores = {'ann': 3, 'bob': 5}
    assert_equal(sorted(from_mapping(scores)), ['ann', 'bob'])
    assert_equal(sorted(from_mapping(scores, values=True)), [3, 5])
    assert_equal(from_mapping(None).to.list(), [])


# chaining tests

@test("filter then map chains eagerly")
def test_chain_filter_map():
    result = A(range(1, 11)).filter(lambda n: n % 2 == 0).map(lambda n: n * n)
    assert_equal(result, [4, 16, 36, 64, 100])


@test("chained queries over generated records")
def test_chain_records():
    engineers = A(records).filter(lambda r: r['dept'] == 'eng')
    names = engineers.map(lambda r: r['name'])
    assert_equal(len(names), len([r for r in records if r['dept'] == 'eng']))
    assert_that(engineers.every(lambda r: r['dept'] == 'eng'), "filter should only keep engineers")
    total_age = A(records).reduce(0, lambda acc, r: acc + r['age'])
    assert_equal(total_age, sum(r['age'] for r in records))


@test("filter_errors on the wrapper drops failures")
def test_array_filter_errors():
    assert_equal(A(['1', 'x', '3']).filter_errors(attempt(int)), [1, 3])


@test("search methods delegate to the function library")
def test_array_search():
    data = A(['a', 'b', 'c'])
    assert_equal(data.index('b'), 1)
    assert_equal(data.index_func(lambda s: s > 'a'), 1)
    assert_that(data.contains('c'), "should contain c")
    assert_that(data.some(lambda s: s == 'a'), "some should find a")
    assert_equal(data.find(lambda s: s == 'z', default=''), ('', False))
    assert_that(empty().every(lambda s: False), "an empty array is present, so every is true")


@test("fill and reverse mutate the array and return it")
def test_array_mutation():
    data = A([1, 2, 3, 4])
    returned = data.fill(0, 1, 2).reverse()
    assert_that(returned is data, "should return the same array")
    assert_equal(data, [4, 0, 0, 1])


@test("range returns a new array window")
def test_array_range():
    data = A('abcd')
    assert_equal(data.range(1, 2), ['b', 'c'])
    assert_equal(data.range(100, 1), [])
    assert_equal(data, ['a', 'b', 'c', 'd'])


@test("for_each runs eagerly and returns the array")
def test_array_for_each():
    seen = []
    data = A([3, 1, 2])
    assert_that(data.for_each(seen.append) is data, "should return the same array")
    assert_equal(seen, [3, 1, 2])


# terminal tests

@test("terminal conversions")
def test_terminal():
    data = A([1, 2, 3])
    as_list = data.to.list()
    as_list.append(4)
    assert_equal(len(data), 3, "to.list should return a copy")
    assert_that(isinstance(data.to.array(), np.ndarray), "array should be numpy")
    assert_equal(data.to.array().sum(), 6)
    series = data.to.pandas()
    assert_that(isinstance(series, pd.Series), "pandas should be a series")
    assert_equal(series.tolist(), [1, 2, 3])
    assert_equal(data.to.count(lambda n: n > 1), 2)


@test("equality and repr")
def test_array_dunder():
    assert_that(A([1]) == A([1]), "arrays with equal data should be equal")
    assert_that(A([1]) != A([2]), "different data should differ")
    assert_equal(repr(A([1, 2])), "Array([1, 2])")


if __name__ == "__main__":
    sys.exit(not suite.run(title="seqops array test suite"))
