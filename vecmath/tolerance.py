from __future__ import annotations

EPS = 1e-6


def approx_equal(a: float, b: float, epsilon: float = EPS) -> bool:
    """Return ``True`` when ``a`` and ``b`` differ by less than ``epsilon``."""

    return bool(abs(a - b) < epsilon)


def snap_zero(value, epsilon: float = EPS):
    # keep the scalar type of value (np.float32 stays np.float32)
    if approx_equal(value, 0.0, epsilon):
        return type(value)(0.0)
    return value


__all__ = ["EPS", "approx_equal", "snap_zero"]
