import numpy as np
import pandas as pd
import suite
from collections import namedtuple
from queryable import Q, from_iterable, from_range, repeat, empty, query, Queryable

test = suite.test
assert_that = suite.assert_that

Person = namedtuple('Person', ['name', 'age', 'city'])

sample_people = [
    Person('alice', 25, 'nyc'),
    Person('bob', 30, 'la'),
    Person('charlie', 25, 'nyc'),
]

sample_numbers = [1, 2, 3, 4, 5]


# to_array()

@test("to_array exposes the live backing list")
def test_to_array_live():
    q = Q(sample_numbers)
    assert_that(q.to_array() == sample_numbers, "content should match")
    assert_that(q.to_array() is q.to_array(), "to_array should return the same list object")


@test("to.list returns a defensive copy")
def test_to_list_copy():
    q = Q(sample_numbers)
    copy = q.to.list()
    copy.append(99)
    assert_that(q.to_array() == sample_numbers, "mutating the copy should not touch the wrapper")


# to accessor conversions

@test("array conversion creates numpy array")
def test_to_array_numpy():
    result = Q(sample_numbers).to.array()
    assert_that(isinstance(result, np.ndarray), f"should return ndarray: {type(result)}")
    assert_that(np.array_equal(result, np.array(sample_numbers)), "array conversion failed")


@test("set and dict conversions")
def test_to_set_dict():
    assert_that(Q([1, 2, 2, 3]).to.set() == {1, 2, 3}, "set conversion failed")
    by_name = Q(sample_people).to.dict(lambda p: p.name, lambda p: p.age)
    assert_that(by_name == {'alice': 25, 'bob': 30, 'charlie': 25}, f"dict conversion failed: {by_name}")
    whole = Q(sample_people).to.dict(lambda p: p.name)
    assert_that(whole['bob'] is sample_people[1], "without value selector the element is the value")


@test("pandas series and dataframe conversions")
def test_to_pandas():
    series = Q(sample_numbers).to.pandas()
    assert_that(isinstance(series, pd.Series) and series.sum() == 15, "series conversion failed")
    frame = Q(sample_people).select(lambda p: p._asdict()).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should be a dataframe")
    assert_that(list(frame.columns) == ['name', 'age', 'city'], f"unexpected columns: {list(frame.columns)}")
    assert_that(len(frame) == 3, "should have 3 rows")


# factories and protocol

@test("factories build queryables")
def test_factories():
    assert_that(from_range(3, 4).to_array() == [3, 4, 5, 6], "from_range failed")
    assert_that(repeat('x', 3).to_array() == ['x', 'x', 'x'], "repeat failed")
    assert_that(empty().to_array() == [], "empty failed")
    assert_that(Q is from_iterable and query is from_iterable, "aliases should point at from_iterable")


@test("from_iterable copies its input")
def test_from_iterable_copies():
    source = [1, 2, 3]
    q = from_iterable(source)
    source.append(4)
    assert_that(q.to_array() == [1, 2, 3], "later changes to the input should not leak in")
    assert_that(Q(x * 2 for x in range(3)).to_array() == [0, 2, 4], "generators should be materialized")


@test("len, iteration and repr")
def test_protocol():
    q = Q(range(8))
    assert_that(len(q) == 8, "len should count elements")
    assert_that(list(q) == list(range(8)), "iteration should follow order")
    assert_that(repr(q) == "Queryable([0, 1, 2, 3, 4, ...], count=8)", f"unexpected repr: {q!r}")
    assert_that(isinstance(q.take(2), Queryable), "operators should return queryables")


if __name__ == "__main__":
    suite.run(title="queryable terminal operations test suite")
