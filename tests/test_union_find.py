"""Tests for the weighted quick-union structure."""

import numpy as np
import pytest

from site_percolation.connectivity import WeightedQuickUnionUF


class TestConstruction:
    """Tests for WeightedQuickUnionUF construction."""

    def test_singletons(self):
        """Every element starts in its own set."""
        uf = WeightedQuickUnionUF(5)

        assert len(uf) == 5
        assert uf.count == 5
        for p in range(5):
            assert uf.find(p) == p

    @pytest.mark.parametrize("n", [0, -3, 2.5, True])
    def test_invalid_size(self, n):
        """Non-positive or non-integer universe sizes are rejected."""
        with pytest.raises(ValueError):
            WeightedQuickUnionUF(n)


class TestMerge:
    """Tests for merge and connected."""

    def test_merge_connects(self):
        uf = WeightedQuickUnionUF(10)
        uf.merge(1, 2)
        uf.merge(2, 7)

        assert uf.connected(1, 7)
        assert uf.connected(7, 1)
        assert not uf.connected(1, 3)
        assert uf.count == 8

    def test_merge_same_element(self):
        """Merging an element with itself is a no-op."""
        uf = WeightedQuickUnionUF(3)
        uf.merge(1, 1)

        assert uf.count == 3
        assert uf.connected(1, 1)

    def test_merge_idempotent(self):
        uf = WeightedQuickUnionUF(4)
        uf.merge(0, 3)
        uf.merge(3, 0)
        uf.merge(0, 3)

        assert uf.count == 3

    def test_smaller_tree_goes_under_larger(self):
        uf = WeightedQuickUnionUF(6)
        uf.merge(0, 1)
        uf.merge(0, 2)
        # {0, 1, 2} is larger than {5}
        uf.merge(5, 0)

        assert uf.find(5) == uf.find(0)
        assert uf.size[uf.find(0)] == 4

    def test_path_compression(self):
        uf = WeightedQuickUnionUF(8)
        for p in range(1, 8):
            uf.merge(p - 1, p)
        root = uf.find(7)

        assert uf.parent[7] == root

    def test_sizes_sum_to_universe(self):
        rng = np.random.default_rng(0)
        uf = WeightedQuickUnionUF(50)
        for p, q in rng.integers(0, 50, size=(40, 2)):
            uf.merge(p, q)

        roots = uf.get_roots()
        unique_roots = np.unique(roots)
        assert len(unique_roots) == uf.count
        assert uf.size[unique_roots].sum() == 50


class TestBounds:
    """Labels outside the universe fail fast."""

    @pytest.mark.parametrize("label", [-1, 5, 100])
    def test_out_of_range(self, label):
        uf = WeightedQuickUnionUF(5)

        with pytest.raises(IndexError):
            uf.merge(0, label)
        with pytest.raises(IndexError):
            uf.connected(label, 0)
        with pytest.raises(IndexError):
            uf.find(label)

    def test_failed_merge_leaves_state(self):
        uf = WeightedQuickUnionUF(3)
        with pytest.raises(IndexError):
            uf.merge(0, 3)

        assert uf.count == 3

    def test_non_integer_label(self):
        uf = WeightedQuickUnionUF(3)
        with pytest.raises(IndexError):
            uf.find(1.0)

    def test_numpy_integer_label(self):
        uf = WeightedQuickUnionUF(3)
        uf.merge(np.int64(0), np.int32(2))

        assert uf.connected(0, 2)


class TestGetRoots:
    """Tests for get_roots."""

    def test_roots_match_find(self):
        uf = WeightedQuickUnionUF(6)
        uf.merge(0, 4)
        uf.merge(4, 5)
        uf.merge(1, 2)

        roots = uf.get_roots()

        assert roots.tolist() == [uf.find(p) for p in range(6)]
        assert roots[0] == roots[5]
        assert roots[1] == roots[2]
        assert roots[3] == 3
        assert len(np.unique(roots)) == uf.count
