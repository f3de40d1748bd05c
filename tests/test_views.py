import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from orderedunionfind.union_find import StandardUnionFind
from orderedunionfind.views import EquivalenceClassView


def test_find_all_singleton_then_merged():
    uf = StandardUnionFind()
    uf.add(5)
    view = uf.find_all(5)
    assert isinstance(view, EquivalenceClassView)
    assert len(view) == 1
    assert list(view) == [5]
    uf.union(5, 6)
    fresh = uf.find_all(5)
    assert len(fresh) == 2
    assert set(fresh) == {5, 6}
    assert 6 in fresh


def test_view_reflects_later_unions():
    uf = StandardUnionFind(["a", "b", "c", "d"])
    uf.union("a", "b")
    view = uf.find_all("a")
    assert list(view) == ["a", "b"]
    assert "c" not in view
    uf.union("d", "c")
    uf.union("c", "b")
    assert list(view) == ["a", "b", "c", "d"]
    assert len(view) == 4
    assert "c" in view


def test_view_contains_handles_unknown_and_self():
    uf = StandardUnionFind([1, 2])
    view = uf.find_all(1)
    assert 1 in view
    assert 2 not in view
    assert 42 not in view


def test_view_members_follow_insertion_order():
    uf = StandardUnionFind()
    uf.union(3, 1)
    uf.union(2, 3)
    uf.add(0)
    assert list(uf.find_all(2)) == [3, 1, 2]


def test_view_set_algebra():
    uf = StandardUnionFind()
    uf.union("x", "y")
    uf.add("z")
    view = uf.find_all("y")
    assert view == {"x", "y"}
    assert (view & {"y", "z"}) == frozenset({"y"})
    assert (view | {"z"}) == frozenset({"x", "y", "z"})
    assert view <= {"x", "y", "z"}
    assert view.isdisjoint(uf.find_all("z"))


def test_view_len_matches_class_size():
    uf = StandardUnionFind(range(6))
    uf.union(0, 2)
    uf.union(4, 2)
    for x in range(6):
        assert len(uf.find_all(x)) == uf.class_size(x) == len(list(uf.find_all(x)))
