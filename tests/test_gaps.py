"""
Tests for the gap analyzer
"""

import numpy as np
import pytest

from largegap import (
    Code, CodeBuilder, DegenerateCode, InvalidWidth, Statistics,
    build_from_parameters, compute_all_statistics, compute_gaps, gap_records,
)


class TestGapRecords:

    def test_reflected_code(self, brgc3):
        records = gap_records(brgc3)
        assert [r.bit for r in records] == [0, 1, 2]
        assert records[0].flip_indices.tolist() == [1, 3, 5, 7]
        assert records[0].gaps.tolist() == [2, 2, 2, 2]
        assert records[1].flip_indices.tolist() == [2, 6]
        assert records[1].gaps.tolist() == [4, 4]
        # bit 2 flips on the wrap from word 7 back to word 0
        assert records[2].flip_indices.tolist() == [0, 4]
        assert records[2].gaps.tolist() == [4, 4]

    def test_gaps_sum_to_length(self, builder):
        code = builder.build_canonical(10)
        for record in gap_records(code):
            assert record.gaps.sum() == code.length
            assert record.flip_count % 2 == 0

    def test_flip_counts_sum_to_length(self, builder):
        code = builder.build_canonical(8)
        assert sum(r.flip_count for r in gap_records(code)) == code.length


class TestComputeGaps:

    def test_reflected_code(self, brgc3):
        assert compute_gaps(brgc3) == Statistics(width=3, length=8, min_gap=2, max_gap=4)

    def test_single_bit_boundary(self):
        stats = compute_gaps(Code([0, 1], 1))
        assert stats == Statistics(1, 2, 1, 1)

    @pytest.mark.parametrize("offset", [1, 5, 100, 511])
    def test_rotation_invariant(self, builder, offset):
        code = builder.build_canonical(9)
        assert compute_gaps(code.rotated(offset)) == compute_gaps(code)

    def test_multi_bit_step(self):
        with pytest.raises(DegenerateCode, match="exactly one bit"):
            compute_gaps(Code([0, 3, 1, 2], 2))

    def test_repeated_words(self):
        """Adjacent steps are single-bit but word 1 appears twice"""
        with pytest.raises(DegenerateCode, match="distinct"):
            compute_gaps(Code([0, 1, 3, 1], 2))

    def test_stuck_bit_shows_as_repeat(self):
        with pytest.raises(DegenerateCode, match="distinct"):
            gap_records(Code([0, 1, 0, 1], 2))

    def test_matching_width(self, brgc3):
        assert compute_gaps(brgc3, width=3) == compute_gaps(brgc3)

    def test_mismatched_width(self, brgc3):
        with pytest.raises(InvalidWidth, match="at width 4"):
            compute_gaps(brgc3, width=4)

    def test_theorem1_code_at_its_width(self):
        code = build_from_parameters(14, 2, 3, 1)
        stats = compute_gaps(code, width=16)
        assert stats.width == 16
        assert stats.length == 65536
        assert stats.min_gap <= stats.max_gap

    def test_as_row(self):
        assert Statistics(3, 8, 2, 4).as_row() == (3, 8, 2, 4)


class TestStatisticsSweep:

    def test_full_range(self):
        sweep = compute_all_statistics(3, 20)
        assert len(sweep) == 18
        rows = list(sweep)
        assert [s.width for s in rows] == list(range(3, 21))
        assert all(s.length == 2 ** s.width for s in rows)
        assert all(1 <= s.min_gap <= s.max_gap for s in rows)

    def test_restartable(self):
        sweep = compute_all_statistics(3, 8, CodeBuilder())
        assert list(sweep) == list(sweep)

    def test_lazy(self):
        sweep = compute_all_statistics(3, 6)
        first = next(iter(sweep))
        assert first.width == 3

    def test_single_width(self, builder):
        assert list(compute_all_statistics(5, 5, builder)) == [compute_gaps(builder.build_canonical(5))]

    @pytest.mark.parametrize("bounds", [(0, 5), (5, 25), (8, 3)])
    def test_invalid_range(self, bounds):
        with pytest.raises(InvalidWidth):
            compute_all_statistics(*bounds)

    def test_respects_builder_ceiling(self):
        with pytest.raises(InvalidWidth):
            compute_all_statistics(3, 10, CodeBuilder(max_width=8))

    def test_statistics_match_records(self, builder):
        code = builder.build_canonical(11)
        records = gap_records(code)
        stats = compute_gaps(code)
        assert stats.min_gap == min(int(np.min(r.gaps)) for r in records)
        assert stats.max_gap == max(int(np.max(r.gaps)) for r in records)
