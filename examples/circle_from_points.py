"""Example: center and radius of the circle through three points."""

from vecmath import DegenerateInputError, Point, circle3pts, circle_radius

POINTS = [
    (Point(1.0, 1.0), Point(2.0, 0.0), Point(3.0, 1.0)),
    (Point(0.0, 2.0, dtype="single"), Point(2.0, 0.0, dtype="single"), Point(0.0, -2.0, dtype="single")),
    (Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0)),
]


def main() -> None:
    for a, b, c in POINTS:
        print(f"a={a} b={b} c={c}")
        try:
            center = circle3pts(a, b, c)
        except DegenerateInputError as exc:
            print(f"  no circle: {exc}")
            continue
        print(f"  center={center} radius={float(circle_radius(a, b, c)):.6f}")


if __name__ == "__main__":
    main()
