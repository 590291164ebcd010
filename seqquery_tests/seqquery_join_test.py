import suite
from dgen import from_schema
from seqquery import SequenceQuery, Q, empty

test = suite.test
assert_that = suite.assert_that

# --- test data schemas ---
customer_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 8}),
    'name': 'name'
}

order_schema = {
    'id': 'uuid4',
    'customer_id': ('pyint', {'min_value': 1, 'max_value': 10}),  # includes customers that do not exist
    'amount': ('pyint', {'min_value': 100, 'max_value': 1000})
}

# --- helper data ---
people_data = [
    {'id': 1, 'name': 'alice', 'dept': 'eng'},
    {'id': 2, 'name': 'bob', 'dept': 'sales'},
    {'id': 3, 'name': 'charlie', 'dept': 'eng'}
]

orders_data = [
    {'id': 101, 'customer_id': 1, 'amount': 250},
    {'id': 102, 'customer_id': 1, 'amount': 150},
    {'id': 103, 'customer_id': 2, 'amount': 500},
    {'id': 104, 'customer_id': 4, 'amount': 300}  # no matching person
]


# --- inner join ---

@test("join performs inner join correctly")
def test_join_basic():
    result = SequenceQuery(list(people_data)).join(
        orders_data,
        lambda p: p['id'],
        lambda o: o['customer_id'],
        lambda p, o: {'name': p['name'], 'order_id': o['id']}
    ).to_list()

    assert_that(result == [
        {'name': 'alice', 'order_id': 101},
        {'name': 'alice', 'order_id': 102},
        {'name': 'bob', 'order_id': 103},
    ], "outer-major order, inner matches in encounter order, charlie dropped")


@test("join with no matches yields an empty sequence")
def test_join_no_matches():
    result = Q([{'id': 1}, {'id': 2}]).join(
        [{'customer_id': 9}],
        lambda p: p['id'],
        lambda o: o['customer_id'],
        lambda p, o: (p, o)
    ).to_list()
    assert_that(result == [], "no match anywhere should be empty, not an error")


@test("join with empty sides")
def test_join_empty_sides():
    key = lambda x: x
    assert_that(empty().join([1, 2], key, key, lambda a, b: a).to_list() == [], "empty outer")
    assert_that(Q([1, 2]).join([], key, key, lambda a, b: a).to_list() == [], "empty inner")


@test("join cardinality matches per-key match counts")
def test_join_cardinality_generated():
    customers = from_schema(customer_schema, seed=21).records(12)
    orders = from_schema(order_schema, seed=22).records(30)
    expected = sum(sum(1 for o in orders if o['customer_id'] == c['id']) for c in customers)
    joined = Q(customers).join(orders, lambda c: c['id'], lambda o: o['customer_id'],
                               lambda c, o: (c['id'], o['id'])).count()
    assert_that(joined == expected, "result length should be the sum of matches per outer element")


@test("join accepts another query as the inner sequence")
def test_join_inner_query():
    inner = Q([('a', 1), ('b', 2)])
    result = Q(['b', 'a', 'c']).join(inner, lambda x: x, lambda t: t[0], lambda x, t: t[1]).to_list()
    assert_that(result == [2, 1], "should look up through the inner query's data")


@test("join with unhashable keys raises TypeError")
def test_join_unhashable_key():
    suite.assert_raises(TypeError, Q([1]).join, [1], lambda x: [x], lambda y: [y], lambda x, y: x)


# --- left join ---

@test("left_join keeps unmatched outer elements")
def test_left_join():
    result = Q(people_data).left_join(
        orders_data,
        lambda p: p['id'],
        lambda o: o['customer_id'],
        lambda p, o: (p['name'], o['id'] if o else None)
    ).to_list()
    assert_that(result == [('alice', 101), ('alice', 102), ('bob', 103), ('charlie', None)],
                "charlie should pair with the default")


# --- group join ---

@test("group_join pairs each outer element with its matches")
def test_group_join():
    result = Q(people_data).group_join(
        orders_data,
        lambda p: p['id'],
        lambda o: o['customer_id'],
        lambda p, orders: (p['name'], [o['amount'] for o in orders])
    ).to_list()
    assert_that(result == [('alice', [250, 150]), ('bob', [500]), ('charlie', [])],
                "one result per outer element")


if __name__ == "__main__":
    suite.run(title="seqquery join test suite")
