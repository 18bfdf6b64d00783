"""Interpolation of tabulated EOP series.

Both interpolants locate the bracketing interval with
``jnp.searchsorted`` and evaluate a cubic in the offset from its left
node.  Queries outside the table are clamped; range checks are the
caller's responsibility.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype
from orientax.eop._types import EopInterpolation


def _interval(x: Array, xi: Array) -> Array:
    """Index of the left node of the interval containing *xi*."""
    idx = jnp.searchsorted(x, xi, side="right") - 1
    return jnp.clip(idx, 0, x.shape[0] - 2)


class Akima(NamedTuple):
    """Akima spline through ``(x, y)``.

    Attributes:
        x: Sorted nodes, shape ``(N,)``.
        y: Values at the nodes, shape ``(N,)``.
        b: Linear coefficients, shape ``(N,)``.
        c: Quadratic coefficients, shape ``(N - 1,)``.
        d: Cubic coefficients, shape ``(N - 1,)``.
    """

    x: Array
    y: Array
    b: Array
    c: Array
    d: Array

    @classmethod
    def fit(cls, x: ArrayLike, y: ArrayLike) -> Akima:
        """Compute the spline coefficients.

        Args:
            x: Strictly increasing nodes, at least three.
            y: Values at the nodes.

        Raises:
            ValueError: If the sizes differ or there are fewer than three nodes.
        """
        dtype = get_dtype()
        x = jnp.asarray(x, dtype=dtype)
        y = jnp.asarray(y, dtype=dtype)
        n = x.shape[0]
        if y.shape[0] != n:
            raise ValueError(f"size of x ({n}) and y ({y.shape[0]}) must match")
        if n < 3:
            raise ValueError(f"an Akima spline needs at least 3 nodes, got {n}")

        dx = jnp.diff(x)
        m = jnp.diff(y) / dx
        # Two extrapolated slopes at either end
        m_start = 2.0 * m[0] - m[1]
        m_end = 2.0 * m[-1] - m[-2]
        m = jnp.concatenate(
            [
                jnp.stack([2.0 * m_start - m[0], m_start]),
                m,
                jnp.stack([m_end, 2.0 * m_end - m[-1]]),
            ]
        )

        b = 0.5 * (m[3:] + m[:-3])
        dm = jnp.abs(jnp.diff(m))
        f1 = dm[2 : n + 2]
        f2 = dm[0:n]
        f12 = f1 + f2
        weighted = f12 > 1e-9 * jnp.max(f12)
        b = jnp.where(
            weighted,
            (f1 * m[1 : n + 1] + f2 * m[2 : n + 2]) / jnp.where(weighted, f12, 1.0),
            b,
        )

        c = (3.0 * m[2 : n + 1] - 2.0 * b[:-1] - b[1:]) / dx
        d = (b[:-1] + b[1:] - 2.0 * m[2 : n + 1]) / dx**2
        return cls(x, y, b, c, d)

    def interpolate(self, xi: ArrayLike) -> Array:
        xi = jnp.asarray(xi, dtype=get_dtype())
        idx = _interval(self.x, xi)
        w = jnp.clip(xi, self.x[0], self.x[-1]) - self.x[idx]
        return self.y[idx] + w * (self.b[idx] + w * (self.c[idx] + w * self.d[idx]))


class Lagrange(NamedTuple):
    """Four-point Lagrange interpolation through ``(x, y)``.

    The window holds the two nodes on either side of the query, shifted
    inward at the ends of the table.
    """

    x: Array
    y: Array

    @classmethod
    def fit(cls, x: ArrayLike, y: ArrayLike) -> Lagrange:
        """Store the nodes.

        Raises:
            ValueError: If the sizes differ or there are fewer than four nodes.
        """
        dtype = get_dtype()
        x = jnp.asarray(x, dtype=dtype)
        y = jnp.asarray(y, dtype=dtype)
        if y.shape[0] != x.shape[0]:
            raise ValueError(f"size of x ({x.shape[0]}) and y ({y.shape[0]}) must match")
        if x.shape[0] < 4:
            raise ValueError(f"four-point Lagrange interpolation needs 4 nodes, got {x.shape[0]}")
        return cls(x, y)

    def interpolate(self, xi: ArrayLike) -> Array:
        xi = jnp.asarray(xi, dtype=get_dtype())
        k = jnp.clip(_interval(self.x, xi), 1, self.x.shape[0] - 3)
        window = k - 1 + jnp.arange(4)
        xs = self.x[window]
        ys = self.y[window]
        # Off-diagonal factors (xi - x_j) / (x_m - x_j); ones on the diagonal
        diff = xs[:, None] - xs[None, :]
        eye = jnp.eye(4, dtype=bool)
        factors = jnp.where(eye, 1.0, (xi - xs[None, :]) / jnp.where(eye, 1.0, diff))
        return jnp.sum(ys * jnp.prod(factors, axis=1))


Interpolant = Akima | Lagrange


def fit(method: EopInterpolation, x: ArrayLike, y: ArrayLike) -> Interpolant:
    """Fit an interpolant of the given kind."""
    if method is EopInterpolation.LAGRANGE:
        return Lagrange.fit(x, y)
    return Akima.fit(x, y)
