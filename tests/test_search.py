"""
Tests for the exhaustive base-code search
"""

import pytest

from largegap import Code, compute_gaps
from largegap.search import find_transitions, min_gap_upper_bound, search_beyond, search_transitions


class TestUpperBound:

    @pytest.mark.parametrize("width,bound", [(1, 1), (2, 2), (3, 2), (4, 4), (5, 4), (6, 5)])
    def test_counting_bound(self, width, bound):
        assert min_gap_upper_bound(width) == bound


class TestFindTransitions:

    def test_three_bit_code(self):
        """Ascending bit order reproduces the reflected code"""
        assert find_transitions(3, 2) == [0, 1, 0, 2, 0, 1, 0, 2]

    def test_impossible_gap(self):
        assert find_transitions(3, 3) is None

    def test_single_bit(self):
        assert find_transitions(1, 1) == [0, 0]

    def test_found_code_meets_gap(self):
        sequence = find_transitions(4, 2)
        code = Code.from_transitions(sequence, 4).validate()
        assert compute_gaps(code).min_gap >= 2

    def test_node_budget(self):
        assert find_transitions(4, 2, max_nodes=3) is None
        assert find_transitions(4, 2, max_nodes=100_000) == find_transitions(4, 2)


class TestSearchTransitions:

    @pytest.mark.parametrize("width", [1, 2, 3, 4, 5])
    def test_searched_codes_are_valid(self, width):
        code = Code.from_transitions(search_transitions(width), width)
        code.validate()
        assert code.length == 2 ** width

    def test_five_bit_code_reaches_bound(self):
        code = Code.from_transitions(search_transitions(5), 5)
        assert compute_gaps(code).min_gap == min_gap_upper_bound(5) == 4

    def test_deterministic(self):
        assert search_transitions(4) == search_transitions(4)


class TestSearchBeyond:

    def test_six_bit_improvement(self):
        sequence = search_beyond(6, 3, max_nodes=100_000)
        code = Code.from_transitions(sequence, 6).validate()
        assert compute_gaps(code).min_gap >= 4

    def test_nothing_above_the_bound(self):
        assert search_beyond(3, min_gap_upper_bound(3), max_nodes=1000) is None
