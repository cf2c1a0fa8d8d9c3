"""Tests for the union-find structure."""

import pytest

from graphalgo import UnionFind


class TestUnionFind:
    """Tests for UnionFind operations."""

    def test_initial_singletons(self):
        """Test every element starts as its own root of size 1."""
        uf = UnionFind(4)
        assert len(uf) == 4
        assert uf.count() == 4
        for v in range(4):
            assert uf.find(v) == v
            assert uf.size_of(v) == 1
            assert uf.get_parent(v) == -1

    def test_union_connects(self):
        """Test union makes elements connected."""
        uf = UnionFind(5)
        assert uf.union(0, 1) is True
        assert uf.connected(0, 1)
        assert not uf.connected(0, 2)
        assert uf.size_of(1) == 2
        assert uf.count() == 4

    def test_union_already_connected_is_noop(self):
        """Test union of connected elements changes nothing."""
        uf = UnionFind(3)
        uf.union(0, 1)
        before = [uf.get_parent(v) for v in range(3)]
        assert uf.union(1, 0) is False
        assert [uf.get_parent(v) for v in range(3)] == before

    def test_equal_sizes_first_goes_under_second(self):
        """Test ties attach the first argument's root under the second's."""
        uf = UnionFind(2)
        uf.union(0, 1)
        assert uf.get_parent(0) == 1
        assert uf.get_parent(1) == -2

    def test_smaller_goes_under_larger(self):
        """Test the smaller set's root is attached to the larger set's root."""
        uf = UnionFind(4)
        uf.union(0, 1)  # root 1, size 2
        uf.union(1, 2)  # 2 is smaller, goes under 1
        assert uf.get_parent(2) == 1
        assert uf.size_of(2) == 3
        uf.union(1, 3)
        assert uf.get_parent(3) == 1
        assert uf.get_parent(1) == -4

    def test_path_compression(self):
        """Test find repoints every visited element at the root."""
        uf = UnionFind(4)
        uf.union(0, 1)  # 0 -> 1
        uf.union(2, 3)  # 2 -> 3
        uf.union(1, 3)  # 1 -> 3, so 0 -> 1 -> 3
        assert uf.get_parent(0) == 1
        assert uf.find(0) == 3
        assert uf.get_parent(0) == 3

    def test_find_idempotent(self):
        """Test repeated finds return the same root."""
        uf = UnionFind(6)
        for a, b in [(0, 1), (2, 3), (1, 3), (4, 5)]:
            uf.union(a, b)
        for v in range(6):
            assert uf.find(v) == uf.find(uf.find(v))

    def test_out_of_range(self):
        """Test out-of-range elements raise IndexError."""
        uf = UnionFind(3)
        with pytest.raises(IndexError):
            uf.find(3)
        with pytest.raises(IndexError):
            uf.find(-1)
        with pytest.raises(IndexError):
            uf.union(0, 5)
        with pytest.raises(IndexError):
            uf.connected(7, 0)

    def test_negative_size(self):
        """Test a negative universe size is rejected."""
        with pytest.raises(ValueError):
            UnionFind(-1)

    def test_empty(self):
        """Test a zero-size structure has no sets."""
        uf = UnionFind(0)
        assert uf.count() == 0
        assert uf.roots() == []

    def test_long_chain_no_recursion_limit(self):
        """Test find on a very deep chain works iteratively."""
        n = 5000
        uf = UnionFind(n)
        # Build a chain by hand to bypass union-by-size balancing.
        uf._parent = [i + 1 for i in range(n - 1)] + [-n]
        assert uf.find(0) == n - 1
        assert uf.get_parent(0) == n - 1
        assert uf.get_parent(n // 2) == n - 1

    def test_random_unions_sizes_sum(self, rng):
        """Test root sizes always sum to N and unions connect."""
        n = 50
        uf = UnionFind(n)
        for a, b in rng.integers(0, n, size=(80, 2)).tolist():
            uf.union(a, b)
            assert uf.connected(a, b)
            roots = uf.roots()
            assert sum(uf.size_of(r) for r in roots) == n
            assert len(roots) == uf.count()
