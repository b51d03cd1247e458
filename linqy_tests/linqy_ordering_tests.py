import suite
from collections import namedtuple
from dgen import from_schema
from linqy import P, empty, OrderedEnumerable, for_key, compose, sort_with

test = suite.test
assert_that = suite.assert_that

Person = namedtuple('Person', ['name', 'age'])

people = P([Person('Ana', 30), Person('Bo', 25), Person('Cy', 30)])

record_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'group': {'_qen_provider': 'choice', 'from': ['a', 'b', 'c']},
    'rank': ('pyint', {'min_value': 1, 'max_value': 3})
}


# --- comparer builder ---

@test("for_key orders by the selected key")
def test_for_key_ascending():
    by_len = for_key(len)
    assert_that(by_len('a', 'bbb') < 0, "shorter key should sort first")
    assert_that(by_len('bbb', 'a') > 0, "longer key should sort last")
    assert_that(by_len('ab', 'cd') == 0, "equal keys should tie")


@test("for_key descending inverts the order")
def test_for_key_descending():
    by_len = for_key(len, descending=True)
    assert_that(by_len('a', 'bbb') > 0, "shorter key should sort last")
    assert_that(by_len('ab', 'cd') == 0, "equal keys should still tie")


@test("compose defers to the inner comparer only on ties")
def test_compose_tie_breaking():
    calls = []

    def inner(a, b):
        calls.append((a, b))
        return -1

    composed = compose(for_key(lambda s: s[0]), inner)
    assert_that(composed('a1', 'b1') < 0, "outer result should win")
    assert_that(calls == [], "inner should not run when outer decides")
    assert_that(composed('a1', 'a2') == -1, "inner should break the tie")
    assert_that(calls == [('a1', 'a2')], "inner should run once on a tie")


@test("sort_with is stable")
def test_sort_with_stable():
    items = [('x', 2), ('y', 1), ('z', 2), ('w', 1)]
    result = sort_with(items, for_key(lambda t: t[1]))
    assert_that(result == [('y', 1), ('w', 1), ('x', 2), ('z', 2)], f"ties should keep input order: {result}")
    assert_that(items[0] == ('x', 2), "input list should not be modified")


# --- order_by ---

@test("order_by sorts ascending")
def test_order_by_basic():
    result = P([1, 3, 2, 3]).order_by(lambda x: x).to.list()
    assert_that(result == [1, 2, 3, 3], f"unexpected order: {result}")


@test("order_by_descending sorts descending")
def test_order_by_descending():
    result = P([1, 3, 2, 3]).order_by_descending(lambda x: x).to.list()
    assert_that(result == [3, 3, 2, 1], f"unexpected order: {result}")


@test("order_by sorts eagerly and keeps its comparer")
def test_order_by_keeps_comparer():
    ordered = P(['bb', 'a', 'ccc']).order_by(len)
    assert_that(isinstance(ordered, OrderedEnumerable), "should be ordered enumerable")
    assert_that(ordered.comparer('a', 'bb') < 0, "retained comparer should order by length")
    assert_that(ordered.to.list() == ['a', 'bb', 'ccc'], "data should already be sorted")


@test("order_by on empty sequence")
def test_order_by_empty():
    assert_that(empty().order_by(lambda x: x).then_by(lambda x: x).to.list() == [], "should stay empty")


# --- then_by ---

@test("then_by breaks ties with a secondary key")
def test_then_by_people():
    names = people.order_by(lambda p: p.age).then_by(lambda p: p.name).select(lambda p: p.name).to.list()
    assert_that(names == ['Bo', 'Ana', 'Cy'], f"unexpected order: {names}")


@test("then_by_descending breaks ties in reverse")
def test_then_by_descending_people():
    names = people.order_by(lambda p: p.age).then_by_descending(lambda p: p.name).select(lambda p: p.name).to.list()
    assert_that(names == ['Bo', 'Cy', 'Ana'], f"unexpected order: {names}")


@test("order_by_descending then_by")
def test_descending_then_ascending():
    names = people.order_by_descending(lambda p: p.age).then_by(lambda p: p.name).select(lambda p: p.name).to.list()
    assert_that(names == ['Ana', 'Cy', 'Bo'], f"unexpected order: {names}")


@test("three sort keys compose left to right")
def test_three_keys():
    data = P([(1, 'b', 2), (0, 'z', 0), (1, 'a', 9), (1, 'b', 1), (0, 'a', 5)])
    result = (data.order_by(lambda t: t[0])
              .then_by(lambda t: t[1])
              .then_by_descending(lambda t: t[2])
              .to.list())
    expected = [(0, 'a', 5), (0, 'z', 0), (1, 'a', 9), (1, 'b', 2), (1, 'b', 1)]
    assert_that(result == expected, f"unexpected order: {result}")


@test("then_by keeps source order for full ties")
def test_then_by_stable():
    records = from_schema(record_schema, seed=11).take(60)
    indexed = records.select_with_index(lambda r, i: {**r, 'pos': i})
    result = indexed.order_by(lambda r: r['group']).then_by(lambda r: r['rank']).to.list()
    for a, b in zip(result, result[1:]):
        if (a['group'], a['rank']) == (b['group'], b['rank']):
            assert_that(a['pos'] < b['pos'], "full ties must keep their source order")


@test("then_by carries the unsorted input forward")
def test_then_by_keeps_source_snapshot():
    data = [('c', 1), ('a', 2), ('b', 1), ('d', 2)]
    first = P(data).order_by_descending(lambda t: t[0])
    refined = first.then_by(lambda t: t[1])
    assert_that(first._source == data, f"order_by should keep the input order: {first._source}")
    assert_that(refined._source == data, f"then_by should reuse the input order: {refined._source}")
    assert_that(refined.to.list() == [('d', 2), ('c', 1), ('b', 1), ('a', 2)], "primary key still decides")


@test("then_by returns a new ordered enumerable each time")
def test_then_by_is_pure():
    first = people.order_by(lambda p: p.age)
    refined = first.then_by(lambda p: p.name)
    assert_that(refined is not first, "then_by should build a new sequence")
    assert_that(first.select(lambda p: p.name).to.list() == ['Bo', 'Ana', 'Cy'], "the first ordering should be unchanged")


@test("order_by after order_by starts a fresh ordering")
def test_order_by_resets():
    result = P([(2, 'a'), (1, 'b'), (2, 'c')]).order_by(lambda t: t[0]).order_by(lambda t: t[1]).to.list()
    assert_that(result == [(2, 'a'), (1, 'b'), (2, 'c')], f"second order_by should replace the first: {result}")


@test("ordering does not touch the source sequence")
def test_order_by_source_untouched():
    source = P([3, 1, 2])
    source.order_by(lambda x: x).then_by_descending(lambda x: x)
    assert_that(source.to.list() == [3, 1, 2], "source should keep its order")


if __name__ == "__main__":
    suite.run(title="linqy ordering test suite")
