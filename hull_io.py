"""
Module: hull_io
Description: Text front end for chans_hull.
             Input:  N on the first line, then N lines of "x y".
             Output: every guessed chunk size with its Graham-scan sub-hulls,
                     then the final hull, points printed as (x,y) rounded to ints.
"""

import logging
import math
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from chans_hull import Hull, Point, chans_algorithm

logger = logging.getLogger(__name__)

RESULT_DIVIDER = "---------After Using Chan's Algorithm---------------"
RESULT_TITLE = "***************** CONVEX HULL **********************"


class MalformedInputError(ValueError):
    """Input text does not follow the `N` + `x y` line format."""


# ---------- Reading ----------
def parse_points(text: str) -> List[Point]:
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    if not lines:
        raise MalformedInputError("missing point count")
    try:
        n = int(lines[0])
    except ValueError:
        raise MalformedInputError(f"point count is not an integer: {lines[0]!r}") from None
    if n < 0:
        raise MalformedInputError(f"negative point count: {n}")
    if len(lines) - 1 < n:
        raise MalformedInputError(f"expected {n} points, found {len(lines) - 1}")

    points: List[Point] = []
    for lineno, line in enumerate(lines[1:n + 1], start=2):
        tokens = line.split()
        if len(tokens) != 2:
            raise MalformedInputError(f"line {lineno}: expected 2 coordinates, got {len(tokens)}")
        try:
            points.append((float(tokens[0]), float(tokens[1])))
        except ValueError:
            raise MalformedInputError(f"line {lineno}: non-numeric coordinate in {line!r}") from None
    return points


def read_points(stream: TextIO) -> List[Point]:
    return parse_points(stream.read())


# ---------- Writing ----------
def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def format_point(p: Point) -> str:
    return f"({_round_half_up(p[0])},{_round_half_up(p[1])})"


def format_points(points: Iterable[Point]) -> str:
    return " ".join(format_point(p) for p in points)


def write_guess(out: TextIO, m: int, hulls: Sequence[Hull]) -> None:
    """Diagnostics for one guess: the chunk size and each chunk's sub-hull."""
    out.write(f"\nM (Chunk Size): {m}\n")
    for i, hull in enumerate(hulls):
        out.write(f"Convex Hull for Hull #{i} (Graham Scan)\n")
        out.write(format_points(hull) + "\n")


def write_result(out: TextIO, hull: Sequence[Point]) -> None:
    out.write(f"\n{RESULT_DIVIDER}\n")
    out.write(f"\n{RESULT_TITLE}\n")
    out.write(format_points(hull) + "\n")


# ---------- CLI ----------
def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    """Read points from stdin, print the guesses and the hull to stdout."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    if argv:
        logger.error("unexpected arguments: %s", " ".join(argv))
        return 2

    try:
        points = read_points(stdin)
    except MalformedInputError as exc:
        logger.error("malformed input: %s", exc)
        return 1

    hull = chans_algorithm(points, on_guess=lambda m, hulls: write_guess(stdout, m, hulls))
    write_result(stdout, hull)
    return 0


def cli() -> None:
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
