"""
Module: chans_hull
Description: Output-sensitive 2D convex hull (Chan's algorithm).
             - Split the points into chunks of size m and build each chunk's hull
               with a Graham scan.
             - Gift-wrap across the chunk hulls, using a binary-search tangent
               per hull instead of scanning every point.
             - Grow m as 2, 4, 16, 256, ... until the wrap closes in m steps.
             Total work is O(n log h) for h hull vertices.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Hull = List[Point]


class Turn(IntEnum):
    RIGHT_TURN = -1
    COLINEAR = 0
    LEFT_TURN = 1


RIGHT_TURN = Turn.RIGHT_TURN
COLINEAR = Turn.COLINEAR
LEFT_TURN = Turn.LEFT_TURN


@dataclass(frozen=True)
class HullVertexRef:
    """A vertex of the hull collection: hulls[hull][vertex]."""
    hull: int
    vertex: int


class HullClosureError(RuntimeError):
    """The gift-wrapping walk did not close even with all points in one chunk."""


# ---------- Geometry helpers ----------
def orientation(p: Point, q: Point, r: Point) -> Turn:
    """
    Turn direction of p -> q -> r.
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
      > 0  => clockwise          (RIGHT_TURN)
      < 0  => counterclockwise   (LEFT_TURN)
      == 0 => collinear          (COLINEAR)
    No tolerance: only an exact zero counts as collinear, so nearly collinear
    float inputs may be classified either way.
    """
    val = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return COLINEAR
    return RIGHT_TURN if val > 0 else LEFT_TURN


def next_index(i: int, m: int) -> int:
    """Circular 'next' index on a polygon of size m (Counterclockwise order)."""
    return (i + 1) % m


def prev_index(i: int, m: int) -> int:
    """Circular 'previous' index on a polygon of size m (Counterclockwise order)."""
    return (i - 1 + m) % m


def lowest_point(points: Sequence[Point]) -> Point:
    """Lowest point; ties on y go to the smaller x."""
    return min(points, key=lambda pt: (pt[1], pt[0]))


# ---------- Sub-hulls (Graham scan) ----------
def keep_left(chain: List[Point], p: Point) -> None:
    """
    Push p onto the chain, first popping every tail vertex that would not make
    a strict left turn. p is not pushed again if it equals the current tail.
    """
    while len(chain) > 1 and orientation(chain[-2], chain[-1], p) != LEFT_TURN:
        chain.pop()
    if not chain or chain[-1] != p:
        chain.append(p)


def graham_scan(points: Iterable[Point]) -> Hull:
    """
    Convex hull of one chunk, CCW, starting at the chunk's lowest point.
      - pick the lowest point as pivot,
      - sort the rest by polar angle around the pivot (nearer first on ties),
      - build the lower chain over the sorted points and the upper chain over
        the reversed points, both with keep_left,
      - join them, dropping the upper chain's first vertex and any vertex
        that wraps back onto the start.
    The input is copied, never reordered in place.
    """
    pts = list(points)
    if len(pts) <= 1:
        return pts

    pivot = lowest_point(pts)
    rest = list(pts)
    rest.remove(pivot)

    def by_angle(p1: Point, p2: Point) -> int:
        turn = orientation(pivot, p1, p2)
        if turn == COLINEAR:
            d1, d2 = math.dist(pivot, p1), math.dist(pivot, p2)
            if d1 == d2:
                return 0
            return -1 if d1 < d2 else 1
        return -1 if turn == LEFT_TURN else 1

    ordered = [pivot] + sorted(rest, key=cmp_to_key(by_angle))

    lower: Hull = []
    for p in ordered:
        keep_left(lower, p)

    ordered.reverse()
    upper: Hull = []
    for p in ordered:
        keep_left(upper, p)

    hull = lower + upper[1:]
    while len(hull) > 1 and hull[-1] == hull[0]:
        hull.pop()
    return hull


# ---------- Tangents ----------
def tangent(hull: Sequence[Point], p: Point) -> int:
    """
    Index of the vertex of `hull` where the supporting line from p touches,
    with the whole hull on the left of p -> hull[i].
    Binary search over [l, r): a vertex c is the answer when neither neighbour
    lies to the right of p -> hull[c]. Otherwise the side of hull[c] relative
    to hull[l], together with the neighbour turns at l and c, tells whether
    the tangent sits in [l, c) or [c+1, r).
    Returns len(hull) when the search runs off the end (e.g. p inside the
    hull); callers must treat that as "no tangent".
    """
    size = len(hull)
    l, r = 0, size
    l_before = orientation(p, hull[0], hull[prev_index(0, size)])
    l_after = orientation(p, hull[0], hull[next_index(0, size)])
    while l < r:
        if l_before != RIGHT_TURN and l_after != RIGHT_TURN:
            return _farthest_on_ray(hull, p, l)
        c = (l + r) // 2
        c_before = orientation(p, hull[c], hull[prev_index(c, size)])
        c_after = orientation(p, hull[c], hull[next_index(c, size)])
        c_side = orientation(p, hull[l], hull[c])
        if c_before != RIGHT_TURN and c_after != RIGHT_TURN:
            return _farthest_on_ray(hull, p, c)
        if (c_side != RIGHT_TURN and (l_after == RIGHT_TURN or l_before == l_after)) or \
                (c_side == RIGHT_TURN and c_before == RIGHT_TURN):
            r = c                       # tangent before c
        else:
            l = c + 1                   # tangent after c
            l_before = Turn(-c_after)
            if l >= size:
                break
            l_after = orientation(p, hull[l], hull[next_index(l, size)])
    return l


def _farthest_on_ray(hull: Sequence[Point], p: Point, i: int) -> int:
    """If hull[i] and its successor are collinear with p, keep the farther one."""
    j = next_index(i, len(hull))
    if orientation(p, hull[i], hull[j]) == COLINEAR and \
            math.dist(p, hull[j]) > math.dist(p, hull[i]):
        return j
    return i


# ---------- Gift wrapping across sub-hulls ----------
def extreme_hullpt_pair(hulls: Sequence[Hull]) -> HullVertexRef:
    """
    Lowest vertex over all hulls; ties keep the first one met scanning hull
    by hull, vertex by vertex. It is always a vertex of the global hull.
    """
    best = HullVertexRef(0, 0)
    for h, hull in enumerate(hulls):
        for v, pt in enumerate(hull):
            if pt[1] < hulls[best.hull][best.vertex][1]:
                best = HullVertexRef(h, v)
    return best


def next_hullpt_pair(hulls: Sequence[Hull], current: HullVertexRef) -> HullVertexRef:
    """
    One gift-wrapping step from `current`: the candidates are the next vertex
    of its own hull and the tangent point of every other hull. Keep the most
    clockwise candidate, the farthest one on a tie.
    """
    p = hulls[current.hull][current.vertex]
    best = HullVertexRef(current.hull, next_index(current.vertex, len(hulls[current.hull])))
    for h, hull in enumerate(hulls):
        if h == current.hull:
            continue
        s = tangent(hull, p)
        if s >= len(hull):
            continue
        q = hulls[best.hull][best.vertex]
        r = hull[s]
        turn = orientation(p, q, r)
        if turn == RIGHT_TURN or (turn == COLINEAR and math.dist(p, r) > math.dist(p, q)):
            best = HullVertexRef(h, s)
    return best


def partition(points: Sequence[Point], m: int) -> List[List[Point]]:
    """Contiguous chunks of size m in input order; the last may be shorter."""
    return [list(points[i:i + m]) for i in range(0, len(points), m)]


def chunk_size(t: int, n: int) -> int:
    """m = 2^(2^t), capped at n (and at least 1)."""
    return max(min(2 ** (2 ** t), n), 1)


# ---------- Driver ----------
class Phase(Enum):
    GUESSING = "guessing"
    WALKING = "walking"
    CLOSED = "closed"
    EXHAUSTED = "exhausted"


GuessCallback = Callable[[int, List[Hull]], None]


class HullSearch:
    """
    Chan's guess-and-check loop as an explicit state machine.

    GUESSING  -> build sub-hulls for m = 2^(2^t), pick the start   -> WALKING
    WALKING   -> one merge step per advance();
                 back at the start                                 -> CLOSED
                 m steps used up                                   -> GUESSING (t + 1)
                 m steps used up with a single chunk               -> EXHAUSTED
    CLOSED and EXHAUSTED are terminal.
    """

    def __init__(self, points: Sequence[Point], on_guess: Optional[GuessCallback] = None):
        self.points: List[Point] = list(points)
        self.on_guess = on_guess
        self.phase = Phase.GUESSING
        self.t = 0
        self.m = 0
        self.hulls: List[Hull] = []
        self.path: List[HullVertexRef] = []
        self.steps = 0
        self.hull: Optional[List[Point]] = None

    @property
    def done(self) -> bool:
        return self.phase in (Phase.CLOSED, Phase.EXHAUSTED)

    def advance(self) -> Phase:
        """Perform one transition and return the new phase."""
        if self.phase == Phase.GUESSING:
            self._guess()
        elif self.phase == Phase.WALKING:
            self._walk()
        return self.phase

    def run(self) -> List[Point]:
        while not self.done:
            self.advance()
        if self.phase == Phase.EXHAUSTED:
            raise HullClosureError(
                f"hull walk did not close with chunk size {self.m} over {len(self.points)} points"
            )
        return self.hull

    def resolve(self, path: Sequence[HullVertexRef]) -> List[Point]:
        return [self.hulls[ref.hull][ref.vertex] for ref in path]

    def _guess(self) -> None:
        n = len(self.points)
        if n <= 1:
            self.hull = list(self.points)
            self.phase = Phase.CLOSED
            return
        self.m = chunk_size(self.t, n)
        self.hulls = [graham_scan(chunk) for chunk in partition(self.points, self.m)]
        logger.debug("guess t=%d: chunk size %d, %d sub-hulls", self.t, self.m, len(self.hulls))
        if self.on_guess is not None:
            self.on_guess(self.m, self.hulls)
        self.path = [extreme_hullpt_pair(self.hulls)]
        self.steps = 0
        self.phase = Phase.WALKING

    def _walk(self) -> None:
        start = self.path[0]
        nxt = next_hullpt_pair(self.hulls, self.path[-1])
        self.steps += 1
        if self.hulls[nxt.hull][nxt.vertex] == self.hulls[start.hull][start.vertex]:
            self.hull = self.resolve(self.path)
            self.phase = Phase.CLOSED
            logger.debug("walk closed after %d steps: %d hull vertices", self.steps, len(self.hull))
            return
        if self.steps >= self.m:
            logger.debug("walk still open after %d steps, escalating", self.steps)
            exhausted = self.m >= len(self.points)
            self.hulls, self.path = [], []
            if exhausted:
                self.phase = Phase.EXHAUSTED
            else:
                self.t += 1
                self.phase = Phase.GUESSING
            return
        self.path.append(nxt)


def as_points(points: Iterable[Sequence[float]]) -> List[Point]:
    """Normalize pairs (tuples, lists, numpy rows) to (float, float) tuples."""
    return [(float(x), float(y)) for x, y in points]


def chans_algorithm(points: Iterable[Sequence[float]],
                    on_guess: Optional[GuessCallback] = None) -> List[Point]:
    """
    Entry point:
      - 0 or 1 points: the input is its own hull.
      - otherwise run the guess-and-check search.
    Returns the hull CCW, starting at the lowest vertex, with collinear
    boundary points and duplicates removed.
    """
    return HullSearch(as_points(points), on_guess=on_guess).run()
