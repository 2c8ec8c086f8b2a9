"""Tests for the frontier candidate set."""
from __future__ import annotations

import pytest

from wdgraph.paths.frontier import Frontier, PathRecord


class TestPathRecord:
    def test_unknown_weight_by_default(self) -> None:
        r = PathRecord(1, 0)
        assert r.weight is None
        assert not r.reachable

    def test_zero_and_negative_weights_are_reachable(self) -> None:
        assert PathRecord(1, 0, 0).reachable
        assert PathRecord(1, 0, -1).reachable

    def test_identity_equality(self) -> None:
        a = PathRecord(1, 0, 4)
        b = PathRecord(1, 0, 4)
        assert a != b
        assert a == a


class TestFrontier:
    def test_empty(self) -> None:
        f = Frontier()
        assert f.is_empty()
        assert not f
        assert len(f) == 0
        assert f.first_reachable() is None
        assert f.get(0) is None

    def test_insertion_order(self) -> None:
        f = Frontier()
        records = [PathRecord(v, 0, 10 - v) for v in (3, 1, 2)]
        for r in records:
            f.add(r)
        assert list(f) == records
        assert len(f) == 3

    def test_mutation_keeps_position(self) -> None:
        f = Frontier()
        a, b = PathRecord(1, 0, 9), PathRecord(2, 0, 1)
        f.add(a)
        f.add(b)
        a.weight = 100
        a.predecessor = 2
        assert list(f) == [a, b]

    def test_remove_by_identity(self) -> None:
        f = Frontier()
        twin1 = PathRecord(1, 0, 4)
        twin2 = PathRecord(1, 0, 4)
        f.add(twin1)
        f.add(twin2)
        f.remove(twin2)
        assert len(f) == 1
        assert next(iter(f)) is twin1

    def test_remove_missing_raises(self) -> None:
        f = Frontier()
        f.add(PathRecord(1, 0, 4))
        with pytest.raises(ValueError, match="not in the frontier"):
            f.remove(PathRecord(1, 0, 4))

    def test_first_reachable_is_first_not_lightest(self) -> None:
        f = Frontier()
        none = PathRecord(1, 0)
        heavy = PathRecord(2, 0, 50)
        light = PathRecord(3, 0, 1)
        for r in (none, heavy, light):
            f.add(r)
        assert f.first_reachable() is heavy

    def test_first_reachable_none_when_all_unknown(self) -> None:
        f = Frontier()
        f.add(PathRecord(1, 0))
        f.add(PathRecord(2, 0))
        assert f.first_reachable() is None
        assert not f.is_empty()

    def test_get_by_vertex(self) -> None:
        f = Frontier()
        r = PathRecord(7, 0, 3)
        f.add(PathRecord(5, 0))
        f.add(r)
        assert f.get(7) is r
        assert f.get(6) is None

    def test_iteration_safe_while_removing(self) -> None:
        f = Frontier()
        for v in range(4):
            f.add(PathRecord(v, 0, v))
        for r in f:
            f.remove(r)
        assert f.is_empty()
