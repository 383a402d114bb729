import itertools
import math

import numpy as np
import pytest

from vecmath import (
    EPS,
    SINGLE,
    IndexRangeError,
    Matrix,
    Point,
    Vector,
    apply_as_column,
    apply_as_row,
    compose,
)

XUNIT = Vector.x_unit()
YUNIT = Vector.y_unit()
ZUNIT = Vector.z_unit()
HALF_SQRT2 = math.sqrt(2.0) / 2.0


def _assert_identity(m: Matrix) -> None:
    for row, col in itertools.product(range(4), repeat=2):
        expected = 1.0 if row == col else 0.0
        assert m.get(row, col) == pytest.approx(expected, abs=EPS)


def test_default_matrix_is_identity():
    _assert_identity(Matrix())
    _assert_identity(Matrix(dtype=SINGLE))


@pytest.mark.parametrize("row, col", [(-1, 0), (4, 0), (100, 0), (0, -1), (0, 4), (0, 100), (-2, 5)])
def test_get_rejects_out_of_range_indices(row, col):
    with pytest.raises(IndexRangeError):
        Matrix().get(row, col)


def test_get_accepts_every_valid_index():
    m = Matrix.translation(1.0, 2.0, 3.0)
    for row, col in itertools.product(range(4), repeat=2):
        m.get(row, col)


def test_index_range_error_is_an_index_error():
    with pytest.raises(IndexError):
        Matrix().get(4, 4)


def test_scale_factory():
    m = Matrix.scale(2.0, 3.0, 4.0)
    assert (m.get(0, 0), m.get(1, 1), m.get(2, 2), m.get(3, 3)) == (2.0, 3.0, 4.0, 1.0)


def test_translation_factory():
    m = Matrix.translation(2.0, 3.0, 4.0)
    assert (m.get(0, 3), m.get(1, 3), m.get(2, 3)) == (2.0, 3.0, 4.0)
    assert m.get(3, 3) == 1.0


def test_rotate_x_factory():
    m = Matrix.rotate_x(math.pi / 2.0)
    assert m.get(0, 0) == pytest.approx(1.0, abs=EPS)
    assert m.get(1, 1) == pytest.approx(0.0, abs=EPS)
    assert m.get(2, 2) == pytest.approx(0.0, abs=EPS)
    assert m.get(1, 2) == pytest.approx(-1.0, abs=EPS)
    assert m.get(2, 1) == pytest.approx(1.0, abs=EPS)


def test_rotate_y_factory():
    m = Matrix.rotate_y(math.pi / 2.0)
    assert m.get(1, 1) == pytest.approx(1.0, abs=EPS)
    assert m.get(0, 0) == pytest.approx(0.0, abs=EPS)
    assert m.get(2, 2) == pytest.approx(0.0, abs=EPS)
    assert m.get(0, 2) == pytest.approx(1.0, abs=EPS)
    assert m.get(2, 0) == pytest.approx(-1.0, abs=EPS)


def test_rotate_z_factory():
    m = Matrix.rotate_z(math.pi / 2.0)
    assert m.get(2, 2) == pytest.approx(1.0, abs=EPS)
    assert m.get(0, 0) == pytest.approx(0.0, abs=EPS)
    assert m.get(1, 1) == pytest.approx(0.0, abs=EPS)
    assert m.get(0, 1) == pytest.approx(-1.0, abs=EPS)
    assert m.get(1, 0) == pytest.approx(1.0, abs=EPS)


def test_matrices_are_values():
    m = Matrix.translation(1.0, 2.0, 3.0)
    arr = m.to_array()
    arr[0, 3] = 99.0
    assert m.get(0, 3) == 1.0
    assert m.copy() == m
    with pytest.raises(TypeError):
        hash(m)


def test_identity_products(backend):
    identity = Matrix()
    for v in (XUNIT, YUNIT, ZUNIT, Vector(1.5, -2.0, 3.0), Point(4.0, 5.0, 6.0)):
        assert apply_as_row(v, identity) == v
        assert apply_as_column(identity, v) == v
    _assert_identity(compose(identity, identity))


def test_products_keep_role_and_precision(backend):
    m = Matrix.rotate_z(0.3, dtype=SINGLE)
    p = Point(1.0, 2.0, 3.0, dtype=SINGLE)
    assert isinstance(m.apply_as_column(p), Point)
    assert isinstance(m.apply_as_row(Vector(1.0, 0.0, 0.0, dtype=SINGLE)), Vector)
    assert m.apply_as_column(p).dtype == SINGLE


@pytest.mark.parametrize("factory", [Matrix.rotate_x, Matrix.rotate_y, Matrix.rotate_z])
@pytest.mark.parametrize("theta", [0.0, 0.25, math.pi / 3, -2.0, math.pi, 5.5])
def test_rotation_round_trip(backend, factory, theta):
    v = Vector(0.3, -1.2, 2.5)
    forward = factory(theta)
    back = factory(-theta)
    assert apply_as_column(back, apply_as_column(forward, v)).isclose(v)
    assert apply_as_row(apply_as_row(v, forward), back).isclose(v)


def test_rotate_zx_lands_in_xz_plane(backend):
    rz = Matrix.rotate_z(math.pi / 4, dtype=SINGLE)
    rx = Matrix.rotate_x(math.pi / 2, dtype=SINGLE)
    xunit = Vector.x_unit(dtype=SINGLE)

    r = apply_as_column(rx @ rz, xunit)
    assert r.x == pytest.approx(HALF_SQRT2, abs=EPS)
    assert r.y == pytest.approx(0.0, abs=EPS)
    assert r.z == pytest.approx(HALF_SQRT2, abs=EPS)

    ry = Matrix.rotate_y(-math.pi / 4, dtype=SINGLE)
    assert apply_as_column(ry, xunit).isclose(r)


def test_row_and_column_forms_differ(backend):
    rz = Matrix.rotate_z(math.pi / 2)

    r = apply_as_column(rz, XUNIT)
    assert r.isclose((0.0, 1.0, 0.0, 1.0))

    r = apply_as_row(XUNIT, rz)
    assert r.isclose((0.0, -1.0, 0.0, 1.0))


def test_translation_moves_points(backend):
    t = Matrix.translation(1.0, 2.0, 1.0)
    moved = t.apply_as_column(Point(1.0, 1.0, 1.0))
    assert moved == Point(2.0, 3.0, 2.0)

    # the row form reads translations from the bottom row
    assert t.transposed().apply_as_row(Point(1.0, 1.0, 1.0)) == Point(2.0, 3.0, 2.0)
    assert t.apply_as_row(Point(1.0, 1.0, 1.0)).w == 5.0


def test_composition_order(backend):
    scale = Matrix.scale(2.0, 2.0, 2.0)
    move = Matrix.translation(1.0, 0.0, 0.0)
    p = Point(1.0, 0.0, 0.0)

    # column form composes right to left
    assert apply_as_column(move @ scale, p).isclose(Point(3.0, 0.0, 0.0))
    assert apply_as_column(scale @ move, p).isclose(Point(4.0, 0.0, 0.0))
    assert apply_as_column(move, apply_as_column(scale, p)).isclose(Point(3.0, 0.0, 0.0))

    # row form composes left to right
    row_move = move.transposed()
    assert apply_as_row(p, scale @ row_move).isclose(Point(3.0, 0.0, 0.0))


def test_matrix_product_is_associative_not_commutative(backend):
    a = Matrix.rotate_z(math.pi / 4)
    b = Matrix.rotate_x(math.pi / 2)
    c = Matrix.translation(1.0, -2.0, 0.5)

    assert ((a @ b) @ c).isclose(a @ (b @ c))
    assert not (a @ b).isclose(b @ a)
    assert compose(a, b) == a.compose(b)


def test_matmul_rejects_vectors():
    with pytest.raises(TypeError):
        Matrix() @ XUNIT


def test_transposed_swaps_entries(backend):
    m = Matrix.translation(1.0, 2.0, 3.0).transposed()
    assert (m.get(3, 0), m.get(3, 1), m.get(3, 2)) == (1.0, 2.0, 3.0)
    assert np.array_equal(m.transposed().to_array(), Matrix.translation(1.0, 2.0, 3.0).to_array())


def test_rows_are_plain_floats():
    rows = Matrix.scale(2.0, 3.0, 4.0).rows()
    assert rows[1] == (0.0, 3.0, 0.0, 0.0)
    assert all(isinstance(value, float) for row in rows for value in row)


def test_backend_is_keyword_only():
    m = Matrix.rotate_z(0.5)
    with pytest.raises(TypeError):
        m.transposed("simd")
    with pytest.raises(TypeError):
        m.apply_as_column(XUNIT, "simd")
    assert m.transposed(backend="simd") == m.transposed(backend="scalar")
