"""Lattice intersections of the parabola y = x²/a.

Everything here is pure: explicit parameters in, immutable tuples out. The
diagram modules consume these results and never feed state back.

A point (x, y) with integer coordinates lies on y = x²/a exactly when
a divides x². Writing a = s·t² with s square-free, every such x is a
multiple of t = sqrt(a / s), so only multiples of t need to be tested.
"""

import math
import numbers
from typing import Iterator, NamedTuple

import numpy as np

DEFAULT_SAMPLE_STEP = 0.5


class InvalidArgument(ValueError):
    """Raised for a non-positive or non-integer parameter, or a bad range."""


class Point(NamedTuple):
    x: float
    y: float


class LatticeResult(NamedTuple):
    curve_points: tuple
    lattice_points: tuple


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_parameter(a) -> int:
    """Return a as a plain int, or raise InvalidArgument."""
    if isinstance(a, bool) or not isinstance(a, numbers.Integral):
        raise InvalidArgument(f"parameter a must be a positive integer, got {a!r}")
    a = int(a)
    if a < 1:
        raise InvalidArgument(f"parameter a must be a positive integer, got {a}")
    return a


def _check_bound(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a real number, got {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite:
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    return value


def validate_range(x_min, x_max, y_min, y_max) -> None:
    """Raise InvalidArgument unless both intervals are finite and ordered."""
    x_min = _check_bound("x_min", x_min)
    x_max = _check_bound("x_max", x_max)
    y_min = _check_bound("y_min", y_min)
    y_max = _check_bound("y_max", y_max)
    if x_min > x_max:
        raise InvalidArgument(f"inverted x range: [{x_min}, {x_max}]")
    if y_min > y_max:
        raise InvalidArgument(f"inverted y range: [{y_min}, {y_max}]")


# ---------------------------------------------------------------------------
# Square-free decomposition
# ---------------------------------------------------------------------------


def square_free_part(n: int) -> int:
    """Product of the primes that divide n an odd number of times."""
    n = validate_parameter(n)
    result = 1
    p = 2
    while p * p <= n:
        count = 0
        while n % p == 0:
            n //= p
            count += 1
        if count % 2 == 1:
            result *= p
        p += 1
    # Whatever is left over is a prime with exponent 1
    if n > 1:
        result *= n
    return result


def lattice_step(a: int) -> int:
    """Spacing in x between candidate lattice points on y = x²/a."""
    a = validate_parameter(a)
    return math.isqrt(a // square_free_part(a))


# ---------------------------------------------------------------------------
# Lattice points
# ---------------------------------------------------------------------------


def find_lattice_points(a, x_min, x_max, y_min, y_max) -> tuple:
    """Every integer point on y = x²/a inside the box, ascending by x."""
    a = validate_parameter(a)
    validate_range(x_min, x_max, y_min, y_max)

    y_hi = math.floor(y_max)
    if y_hi < 0:
        return ()

    # y <= y_hi  <=>  x² <= y_hi * a  (x² is a multiple of a)
    reach = math.isqrt(y_hi * a)
    lo = max(math.ceil(x_min), -reach)
    hi = min(math.floor(x_max), reach)
    if lo > hi:
        return ()

    step = lattice_step(a)
    points = []
    for k in range(-(-lo // step), hi // step + 1):
        x = k * step
        square = x * x
        if square % a:
            continue
        y = square // a
        if y_min <= y <= y_max:
            points.append(Point(x, y))
    return tuple(points)


# ---------------------------------------------------------------------------
# Curve sampling
# ---------------------------------------------------------------------------


class CurveSampler:
    """Samples of y = x²/a across [x_min, x_max] at a fixed increment.

    Iterating yields Point(x, y) for every visited x whose y falls inside
    [y_min, y_max]. Each call to iter() starts over from x_min.
    """

    def __init__(self, a, x_min, x_max, y_min, y_max, step=DEFAULT_SAMPLE_STEP):
        self.a = validate_parameter(a)
        validate_range(x_min, x_max, y_min, y_max)
        step = _check_bound("step", step)
        if step <= 0:
            raise InvalidArgument(f"step must be positive, got {step!r}")
        self.x_min = float(x_min)
        self.x_max = float(x_max)
        self.y_min = y_min
        self.y_max = y_max
        self.step = step
        positions = (self.x_max - self.x_min) / step
        if not math.isfinite(positions):
            raise InvalidArgument(f"range [{x_min}, {x_max}] too wide to sample at step {step!r}")
        # Tolerance keeps x_max itself when the span is a multiple of step
        self._count = math.floor(positions + 1e-9) + 1

    def __len__(self):
        return self._count

    def __iter__(self) -> Iterator[Point]:
        for i in range(self._count):
            x = min(self.x_min + i * self.step, self.x_max)
            y = x * x / self.a
            if self.y_min <= y <= self.y_max:
                yield Point(x, y)

    def as_arrays(self):
        """Return the kept samples as (xs, ys) numpy arrays."""
        xs = np.minimum(self.x_min + np.arange(self._count) * self.step, self.x_max)
        ys = xs * xs / self.a
        keep = (ys >= self.y_min) & (ys <= self.y_max)
        return xs[keep], ys[keep]


def compute_lattice_intersections(
    a, x_min, x_max, y_min, y_max, sample_step=DEFAULT_SAMPLE_STEP
) -> LatticeResult:
    """Curve samples and exact lattice points of y = x²/a inside the box."""
    sampler = CurveSampler(a, x_min, x_max, y_min, y_max, step=sample_step)
    return LatticeResult(
        curve_points=tuple(sampler),
        lattice_points=find_lattice_points(a, x_min, x_max, y_min, y_max),
    )


# ---------------------------------------------------------------------------
# Grid helpers
# ---------------------------------------------------------------------------


def integer_points(x_min, x_max, y_min, y_max) -> list:
    """All lattice points in the box, ordered by x then y."""
    validate_range(x_min, x_max, y_min, y_max)
    return [
        Point(x, y)
        for x in range(math.ceil(x_min), math.floor(x_max) + 1)
        for y in range(math.ceil(y_min), math.floor(y_max) + 1)
    ]


def satisfies_conic(x, y, A=0, B=0, C=0, D=0, E=0, F=0, tolerance=1e-3) -> bool:
    """Whether (x, y) lies on Ax² + Bxy + Cy² + Dx + Ey + F = 0."""
    value = A * x * x + B * x * y + C * y * y + D * x + E * y + F
    return abs(value) < tolerance


# ---------------------------------------------------------------------------
# Text table
# ---------------------------------------------------------------------------


def format_lattice_table(points, limit=20, horizontal=False) -> str:
    """Plain-text x/y table of the first `limit` points plus a total line."""
    if limit < 1:
        raise InvalidArgument(f"limit must be at least 1, got {limit!r}")
    points = list(points)
    shown = points[:limit]
    truncated = len(points) > limit
    footer = f"Total: {len(points)} intersections"
    if not shown:
        return footer

    xs = [str(p.x) for p in shown]
    ys = [str(p.y) for p in shown]

    if horizontal:
        if truncated:
            xs.append("...")
            ys.append("...")
        widths = [max(len(x), len(y)) for x, y in zip(xs, ys)]
        x_row = " ".join(x.rjust(w) for x, w in zip(xs, widths))
        y_row = " ".join(y.rjust(w) for y, w in zip(ys, widths))
        return f"x | {x_row}\ny | {y_row}\n{footer}"

    wx = max(1, *(len(x) for x in xs))
    wy = max(1, *(len(y) for y in ys))
    lines = [f"{'x'.rjust(wx)} | {'y'.rjust(wy)}", f"{'-' * wx}-+-{'-' * wy}"]
    lines += [f"{x.rjust(wx)} | {y.rjust(wy)}" for x, y in zip(xs, ys)]
    if truncated:
        lines.append(f"{'...'.rjust(wx)} |")
    lines.append(footer)
    return "\n".join(lines)
