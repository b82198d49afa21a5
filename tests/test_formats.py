"""
Tests for text renderings and file output
"""

import pytest

from largegap import Code, Statistics
from largegap.formats import (
    format_c_array, format_horizontal, format_statistics, format_statistics_table,
    format_vertical, render, statistics_header, write_code,
)


@pytest.fixture
def code2():
    return Code([0, 1, 3, 2], 2)


class TestRenderings:

    def test_horizontal(self, code2):
        assert format_horizontal(code2) == "0110\n0011\n"

    def test_vertical(self, code2):
        assert format_vertical(code2) == "00\n10\n11\n01\n"

    def test_transpose_matches(self, builder):
        code = builder.build_canonical(7)
        horizontal = format_horizontal(code).splitlines()
        vertical = format_vertical(code).splitlines()
        assert len(horizontal) == 7
        assert all(len(line) == 128 for line in horizontal)
        assert [''.join(column) for column in zip(*horizontal)] == vertical

    def test_c_array(self, code2):
        assert format_c_array(code2) == (
            "unsigned int lggc_2[4] = {\n"
            "\t0x0,\n"
            "\t0x1,\n"
            "\t0x3,\n"
            "\t0x2\n"
            "};\n"
        )

    def test_c_array_padding(self, builder):
        text = format_c_array(builder.build_canonical(13), name="codes")
        lines = text.splitlines()
        assert lines[0] == "unsigned int codes[8192] = {"
        assert lines[1] == "\t0x0000,"
        assert lines[-1] == "};"
        assert len(lines) == 8192 + 2
        assert not lines[-2].endswith(",")

    def test_render_dispatch(self, code2):
        assert render(code2, "vertical") == format_vertical(code2)
        with pytest.raises(ValueError, match="Unknown format"):
            render(code2, "json")


class TestStatisticsText:

    def test_header_and_row(self):
        assert statistics_header().split() == ["Bits", "Length", "MinGap", "MaxGap"]
        assert format_statistics(Statistics(16, 65536, 11, 30)).split() == ["16", "65536", "11", "30"]

    def test_table(self):
        rows = [Statistics(3, 8, 2, 4), Statistics(4, 16, 2, 8)]
        lines = format_statistics_table(rows).splitlines()
        assert len(lines) == 3
        assert lines[2].split() == ["4", "16", "2", "8"]


class TestWriteCode:

    def test_writes_nested_path(self, tmp_path, code2):
        path = write_code(code2, tmp_path / "out" / "code.txt", "vertical")
        assert path.read_text() == "00\n10\n11\n01\n"

    def test_c_file(self, tmp_path, code2):
        path = write_code(code2, tmp_path / "lggc.c", "c")
        assert path.read_text().startswith("unsigned int lggc_2[4]")

    def test_unwritable_destination(self, tmp_path, code2):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(OSError):
            write_code(code2, blocker / "code.txt")
