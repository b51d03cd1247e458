import suite
from dgen import from_schema
from linqy import P, empty

test = suite.test
assert_that = suite.assert_that

# --- test data schemas ---
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 5}),
    'name': 'word',
    'city': {'_qen_provider': 'choice', 'from': ['ny', 'la', 'chi']},
    'score': ('pyint', {'min_value': 80, 'max_value': 100})
}


# --- distinct ---

@test("distinct removes duplicates while preserving order")
def test_distinct_basic():
    result = P([1, 3, 2, 3]).set.distinct().to.list()
    assert_that(result == [1, 3, 2], f"distinct should preserve first occurrence order: {result}")


@test("distinct is idempotent")
def test_distinct_idempotent():
    data = from_schema(person_schema, seed=3).take(40).select(lambda p: p['city'])
    once = data.set.distinct()
    assert_that(once.set.distinct().to.sequence_equal(once), "distinct twice should equal distinct once")


@test("distinct handles empty sequences")
def test_distinct_empty():
    assert_that(empty().set.distinct().to.list() == [], "distinct on empty should be empty")


@test("distinct compares unhashable elements by value")
def test_distinct_unhashable():
    rows = P([{'a': 1}, {'a': 2}, {'a': 1}, [1], [1]])
    result = rows.set.distinct().to.list()
    assert_that(result == [{'a': 1}, {'a': 2}, [1]], f"equal dicts and lists should collapse: {result}")


@test("distinct matches hashable elements against equal unhashable ones")
def test_distinct_mixed_hashability():
    result = P([{1}, frozenset({1}), frozenset({2})]).set.distinct().to.list()
    assert_that(result == [{1}, frozenset({2})], f"frozenset({{1}}) equals {{1}} and should collapse: {result}")
    assert_that(isinstance(result[0], set), "the first occurrence should win")


@test("intersect finds hashable elements among unhashable ones")
def test_intersect_mixed_hashability():
    result = P([frozenset({1}), frozenset({3})]).set.intersect([{1}, {2}]).to.list()
    assert_that(result == [frozenset({1})], f"unexpected intersection: {result}")


@test("distinct with key selector delegates to distinct_by")
def test_distinct_with_key():
    people = from_schema(person_schema, seed=42).take(20)
    unique_cities = people.set.distinct(lambda p: p['city']).to.list()
    city_names = P(unique_cities).select(lambda p: p['city']).to.list()
    assert_that(len(city_names) == len(set(city_names)), "each city should appear once")


# --- distinct_by ---

@test("distinct_by keeps the first element of each key")
def test_distinct_by_first_wins():
    words = P(['apple', 'avocado', 'banana', 'blueberry', 'cherry'])
    result = words.set.distinct_by(lambda w: w[0]).to.list()
    assert_that(result == ['apple', 'banana', 'cherry'], f"unexpected result: {result}")


@test("distinct_by keeps first key occurrence order")
def test_distinct_by_order():
    result = P([5, 12, 3, 14, 25]).set.distinct_by(lambda x: x % 10).to.list()
    assert_that(result == [5, 12, 3, 14], f"unexpected result: {result}")


# --- union ---

@test("union combines sequences removing duplicates")
def test_union_basic():
    result = P([1, 2]).set.union([2, 3, 4]).to.list()
    assert_that(result == [1, 2, 3, 4], f"unexpected union: {result}")


@test("union also removes duplicates inside the first sequence")
def test_union_self_duplicates():
    result = P([1, 1, 2]).set.union(P([2, 1])).to.list()
    assert_that(result == [1, 2], f"unexpected union: {result}")


@test("union count never exceeds concat count")
def test_union_count_bound():
    s, t = P([1, 2, 2, 3]), P([3, 4])
    assert_that(s.set.concat(t).to.count() == s.to.count() + t.to.count(), "concat should keep every element")
    assert_that(s.set.union(t).to.count() <= s.to.count() + t.to.count(), "union should not add elements")


# --- intersect / except ---

@test("intersect keeps elements present in the other sequence")
def test_intersect():
    result = P([1, 2, 3, 4, 2]).set.intersect([2, 4, 6]).to.list()
    assert_that(result == [2, 4, 2], f"unexpected intersection: {result}")


@test("except_ keeps elements missing from the other sequence")
def test_except():
    result = P([1, 2, 3, 4, 1]).set.except_(P([2, 4])).to.list()
    assert_that(result == [1, 3, 1], f"unexpected difference: {result}")


@test("intersect and except_ work on unhashable elements")
def test_set_ops_unhashable():
    a = P([{'id': 1}, {'id': 2}, {'id': 3}])
    b = [{'id': 2}]
    assert_that(a.set.intersect(b).to.list() == [{'id': 2}], "should match dicts by value")
    assert_that(a.set.except_(b).to.list() == [{'id': 1}, {'id': 3}], "should drop dicts by value")


@test("except_ with empty other returns everything")
def test_except_empty_other():
    assert_that(P([1, 2]).set.except_([]).to.list() == [1, 2], "nothing should be removed")


# --- concat ---

@test("concat preserves all elements and order")
def test_concat():
    result = P([1, 2]).set.concat(P([2, 3])).to.list()
    assert_that(result == [1, 2, 2, 3], f"unexpected concat: {result}")


if __name__ == "__main__":
    suite.run(title="linqy set operations test suite")
