# hull_io_test.py
# PyTest unit tests for hull_io.py

import io
import logging

import pytest

import hull_io as hio
from hull_io import MalformedInputError


# ---------- Reading ----------

def test_parse_points_basic():
    text = "3\n0 0\n4 0\n2.5 3\n"
    assert hio.parse_points(text) == [(0.0, 0.0), (4.0, 0.0), (2.5, 3.0)]


def test_parse_points_ignores_blank_lines_and_extra_spaces():
    text = "\n2\n\n  1   2 \n-3.5\t4e1\n\n"
    assert hio.parse_points(text) == [(1.0, 2.0), (-3.5, 40.0)]


def test_parse_points_zero():
    assert hio.parse_points("0\n") == []


@pytest.mark.parametrize("text", [
    "",                      # no count
    "three\n1 2\n",          # count not an integer
    "-1\n",                  # negative count
    "3\n1 2\n3 4\n",         # too few lines
    "1\n1 x\n",              # non-numeric token
    "1\n1 2 3\n",            # too many tokens
    "1\n7\n",                # too few tokens
])
def test_parse_points_malformed(text):
    with pytest.raises(MalformedInputError):
        hio.parse_points(text)


def test_malformed_input_is_value_error():
    assert issubclass(MalformedInputError, ValueError)


def test_read_points_from_stream():
    assert hio.read_points(io.StringIO("1\n5 5\n")) == [(5.0, 5.0)]


# ---------- Writing ----------

def test_format_point_rounds_half_up():
    assert hio.format_point((0.0, 1.0)) == "(0,1)"
    assert hio.format_point((2.5, -2.5)) == "(3,-2)"
    assert hio.format_point((1.49, -1.51)) == "(1,-2)"


def test_format_points_space_separated():
    assert hio.format_points([(0, 0), (1, 0), (1, 1)]) == "(0,0) (1,0) (1,1)"
    assert hio.format_points([]) == ""


def test_write_guess_and_result():
    out = io.StringIO()
    hio.write_guess(out, 2, [[(0, 0), (4, 0)], [(2, 3)]])
    hio.write_result(out, [(0, 0), (4, 0), (2, 3)])
    assert out.getvalue() == (
        "\nM (Chunk Size): 2\n"
        "Convex Hull for Hull #0 (Graham Scan)\n"
        "(0,0) (4,0)\n"
        "Convex Hull for Hull #1 (Graham Scan)\n"
        "(2,3)\n"
        f"\n{hio.RESULT_DIVIDER}\n"
        f"\n{hio.RESULT_TITLE}\n"
        "(0,0) (4,0) (2,3)\n"
    )


# ---------- CLI ----------

def test_main_triangle_full_output():
    out = io.StringIO()
    rc = hio.main([], stdin=io.StringIO("3\n0 0\n4 0\n2 3\n"), stdout=out)
    assert rc == 0
    assert out.getvalue() == (
        "\nM (Chunk Size): 2\n"
        "Convex Hull for Hull #0 (Graham Scan)\n"
        "(0,0) (4,0)\n"
        "Convex Hull for Hull #1 (Graham Scan)\n"
        "(2,3)\n"
        "\nM (Chunk Size): 3\n"
        "Convex Hull for Hull #0 (Graham Scan)\n"
        "(0,0) (4,0) (2,3)\n"
        f"\n{hio.RESULT_DIVIDER}\n"
        f"\n{hio.RESULT_TITLE}\n"
        "(0,0) (4,0) (2,3)\n"
    )


def test_main_square_last_line_is_hull():
    out = io.StringIO()
    rc = hio.main([], stdin=io.StringIO("5\n0 0\n0 1\n1 0\n1 1\n0.5 0.5\n"), stdout=out)
    assert rc == 0
    lines = out.getvalue().splitlines()
    assert lines[-1] == "(0,0) (1,0) (1,1) (0,1)"
    assert "M (Chunk Size): 2" in lines
    assert "M (Chunk Size): 4" in lines


def test_main_single_point_prints_only_result():
    out = io.StringIO()
    assert hio.main([], stdin=io.StringIO("1\n5 5\n"), stdout=out) == 0
    assert "M (Chunk Size)" not in out.getvalue()
    assert out.getvalue().splitlines()[-1] == "(5,5)"


def test_main_malformed_input_writes_nothing(caplog):
    out = io.StringIO()
    with caplog.at_level(logging.ERROR, logger="hull_io"):
        rc = hio.main([], stdin=io.StringIO("2\n1 2\n"), stdout=out)
    assert rc == 1
    assert out.getvalue() == ""
    assert "malformed input" in caplog.text


def test_main_rejects_arguments(caplog):
    out = io.StringIO()
    with caplog.at_level(logging.ERROR, logger="hull_io"):
        rc = hio.main(["--fast"], stdin=io.StringIO("0\n"), stdout=out)
    assert rc == 2
    assert out.getvalue() == ""
