"""Tests for incidencegraph.classes.utils helpers."""

from __future__ import annotations

import numpy as np
import pytest

from incidencegraph import pyedge
from incidencegraph.classes.utils import build_index, build_weight_matrix, coerce_weight


class TestCoerceWeight:
    @pytest.mark.parametrize("weight", [0, 1, -2, 2.5, float("inf"), np.int32(3), np.float32(0.5)])
    def test_accepts_real_numbers(self, weight) -> None:
        assert coerce_weight(weight) is weight

    @pytest.mark.parametrize("weight", [None, "1", True, False, np.bool_(True), 1 + 2j, [1]])
    def test_rejects_others(self, weight) -> None:
        with pytest.raises(TypeError, match="real number"):
            coerce_weight(weight)


class TestBuildIndex:
    def test_positions(self) -> None:
        assert build_index(["B", "A", 3]) == {"B": 0, "A": 1, 3: 2}

    def test_duplicates(self) -> None:
        with pytest.raises(ValueError):
            build_index(["A", "B", "A"])


class TestBuildWeightMatrix:
    def test_places_weights(self) -> None:
        index = {"A": 0, "B": 1}
        edges = [pyedge("A", "B", 2), pyedge("B", "A", 5), pyedge("A", "Z", 9)]
        matrix = build_weight_matrix(edges, index, fill_value=-1.0)
        np.testing.assert_array_equal(matrix, np.array([[-1.0, 2.0], [5.0, -1.0]]))
        assert matrix.dtype == float
