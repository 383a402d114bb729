"""Example: the same rotation written in the column and row conventions."""

import math

from vecmath import Matrix, Vector, apply_as_column, apply_as_row, use_backend


def main() -> None:
    rz = Matrix.rotate_z(math.pi / 4)
    rx = Matrix.rotate_x(math.pi / 2)
    xunit = Vector.x_unit()

    # column vectors compose right to left: RX x (RZ x v)
    column = apply_as_column(rx @ rz, xunit)
    print(f"RX x RZ x xunit  => {column}")
    print(f"RY(-45) x xunit  => {apply_as_column(Matrix.rotate_y(-math.pi / 4), xunit)}")

    # row vectors compose left to right with the transposed matrices
    row = apply_as_row(xunit, rz.transposed() @ rx.transposed())
    print(f"xunit x RZ' x RX' => {row}")

    with use_backend("simd"):
        packed = apply_as_column(rx @ rz, xunit)
    print(f"simd backend     => {packed} (agrees: {packed.isclose(column)})")
    print(f"composite matrix:\n{rx @ rz}")


if __name__ == "__main__":
    main()
