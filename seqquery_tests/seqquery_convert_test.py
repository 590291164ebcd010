import numpy as np
import pandas as pd
import suite
from seqquery import (
    SequenceQuery, Q, query, from_iterable, from_range, repeat, empty, generate
)

test = suite.test
assert_that = suite.assert_that

products = [
    {'id': 1, 'name': 'Laptop', 'price': 1000, 'category': 'Electronics'},
    {'id': 2, 'name': 'Mouse', 'price': 25, 'category': 'Electronics'},
    {'id': 3, 'name': 'Desk', 'price': 300, 'category': 'Furniture'}
]


# --- factories ---

@test("from_iterable copies its input")
def test_from_iterable_copies():
    source = [1, 2]
    q = from_iterable(source)
    assert_that(q.to_list() == source and q.to_list() is not source, "should be an equal copy")
    assert_that(Q is from_iterable and query is from_iterable, "aliases point at from_iterable")


@test("from_range, repeat, empty and generate")
def test_factories():
    assert_that(from_range(3, 4).to_list() == [3, 4, 5, 6], "range from start")
    assert_that(repeat('x', 3).to_list() == ['x', 'x', 'x'], "repeat")
    assert_that(empty().to_list() == [], "empty")
    counter = iter(range(100))
    assert_that(generate(lambda: next(counter), 3).to_list() == [0, 1, 2], "generate calls the function count times")


@test("factories reject negative counts")
def test_factories_negative():
    suite.assert_raises(ValueError, from_range, 0, -1)
    suite.assert_raises(ValueError, repeat, 'x', -1)
    suite.assert_raises(ValueError, generate, lambda: 0, -1)


# --- conversion accessor ---

@test("to.list returns a copy")
def test_to_list_copy():
    q = Q([1, 2])
    copied = q.to.list()
    copied.append(3)
    assert_that(q.to_list() == [1, 2], "accessor list should not alias the working list")


@test("to.set and to.dict")
def test_to_set_dict():
    assert_that(Q([1, 1, 2]).to.set() == {1, 2}, "set")
    by_id = Q(products).to.dict(lambda p: p['id'], lambda p: p['name'])
    assert_that(by_id == {1: 'Laptop', 2: 'Mouse', 3: 'Desk'}, "dict with value selector")


@test("to.array builds a numpy array")
def test_to_array_numpy():
    arr = from_range(1, 4).select(lambda x: x * 2).to.array()
    assert_that(isinstance(arr, np.ndarray), "numpy array")
    assert_that(arr.tolist() == [2, 4, 6, 8], "values in order")


@test("to.pandas and to.df build pandas objects")
def test_to_pandas():
    series = Q([1, 2, 3]).to.pandas()
    assert_that(isinstance(series, pd.Series) and series.sum() == 6, "series")
    frame = Q(products).where(lambda p: p['price'] > 100).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "dataframe")
    assert_that(list(frame['name']) == ['Laptop', 'Desk'], "rows in order")


@test("to.df expands groups into key and values columns")
def test_to_df_groups():
    frame = Q(products).group_by(lambda p: p['category'], lambda p: p['name']).to.df()
    assert_that(list(frame.columns) == ['key', 'values'], "group columns")
    assert_that(list(frame['key']) == ['Electronics', 'Furniture'], "group keys")
    assert_that(frame['values'].iloc[0] == ['Laptop', 'Mouse'], "group values")


@test("to.json matches to_json")
def test_to_json_accessor():
    q = SequenceQuery([{'a': 1}])
    assert_that(q.to.json() == q.to_json(), "accessor delegates to to_json")


@test("to_json converts numpy values")
def test_to_json_numpy():
    q = Q([np.int64(3), np.float64(1.5), np.array([1, 2])])
    assert_that(q.to_json() == '[3, 1.5, [1, 2]]', "numpy scalars and arrays become plain json")


if __name__ == "__main__":
    suite.run(title="seqquery conversion test suite")
