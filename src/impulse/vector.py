# MIT License (see LICENSE)
"""
Fixed-length real vectors.

A Vector is an ordered sequence of float64 components whose length is set
at construction and never changes afterwards. Components live in a
contiguous numpy array; every operation either returns a new Vector or
updates the receiver's array in place, it never resizes it.

Only the 3-component form is used by the particle integrator, so a few
operations (named x/y/z accessors, cross product, unit axes) require N == 3.
"""
from __future__ import annotations
import numbers
import operator
from typing import Iterable

import numpy as np

from .constants import DEFAULT_TOLERANCE
from .util import f64


class Vector:
    """
    Value-style numeric vector of fixed length.

    Example:
        v = Vector3(1.0, 2.0, 3.0)
        w = v.normalize() * 5.0
        v += w
    """

    __slots__ = ("_elements",)

    # Make numpy defer to our reflected operators (np.float64(2) * v).
    __array_ufunc__ = None

    def __init__(self, *components: float) -> None:
        if not components:
            raise ValueError("Vector needs at least one component")
        self._elements = f64(components)

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    @classmethod
    def from_iterable(cls, values: Iterable[float] | np.ndarray) -> Vector:
        """Build a vector from any flat array-like."""
        if isinstance(values, Vector):
            return values.copy()
        if not isinstance(values, np.ndarray):
            # np.array cannot consume generators.
            values = list(values)
        return cls(*f64(values))

    @classmethod
    def zero(cls, n: int = 3) -> Vector:
        """All-zero vector of length n."""
        if n < 1:
            raise ValueError(f"Vector length must be positive, got {n}")
        return cls(*([0.0] * n))

    @classmethod
    def x_axis(cls) -> Vector:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def y_axis(cls) -> Vector:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def z_axis(cls) -> Vector:
        return cls(0.0, 0.0, 1.0)

    def copy(self) -> Vector:
        return Vector(*self._elements)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self):
        return (float(e) for e in self._elements)

    def _check_index(self, index) -> int:
        i = operator.index(index)
        # Negative indices are caller bugs here, not "count from the end".
        if not 0 <= i < len(self._elements):
            raise IndexError(
                f"Vector index {i} out of range for length {len(self._elements)}"
            )
        return i

    def __getitem__(self, index: int) -> float:
        return float(self._elements[self._check_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._elements[self._check_index(index)] = value

    def _require_3d(self, op: str) -> None:
        if len(self._elements) != 3:
            raise ValueError(f"{op} needs a 3-component vector, got {len(self._elements)}")

    @property
    def x(self) -> float:
        self._require_3d("x")
        return self[0]

    @x.setter
    def x(self, value: float) -> None:
        self._require_3d("x")
        self[0] = value

    @property
    def y(self) -> float:
        self._require_3d("y")
        return self[1]

    @y.setter
    def y(self, value: float) -> None:
        self._require_3d("y")
        self[1] = value

    @property
    def z(self) -> float:
        self._require_3d("z")
        return self[2]

    @z.setter
    def z(self, value: float) -> None:
        self._require_3d("z")
        self[2] = value

    def to_list(self) -> list[float]:
        return self._elements.tolist()

    def to_numpy(self) -> np.ndarray:
        """Copy of the components as a float64 array."""
        return self._elements.copy()

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._elements, other._elements))

    # Mutable, so not hashable.
    __hash__ = None

    def isclose(
        self,
        other: Vector,
        rel_tol: float = 1e-9,
        abs_tol: float = DEFAULT_TOLERANCE,
    ) -> bool:
        """Componentwise approximate equality."""
        rhs = self._operand(other)
        return bool(np.allclose(self._elements, rhs, rtol=rel_tol, atol=abs_tol))

    def __repr__(self) -> str:
        inner = ", ".join(repr(float(e)) for e in self._elements)
        return f"Vector({inner})"

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _operand(self, other: Vector) -> np.ndarray:
        """Components of another vector, enforcing matching length."""
        if not isinstance(other, Vector):
            raise TypeError(f"Expected Vector, got {type(other).__name__}")
        if len(other) != len(self):
            raise ValueError(
                f"Vector length mismatch: {len(self)} vs {len(other)}"
            )
        return other._elements

    @classmethod
    def _wrap(cls, elements: np.ndarray) -> Vector:
        v = cls.__new__(cls)
        v._elements = elements
        return v

    def inverse(self) -> Vector:
        """New vector with every component negated."""
        return self._wrap(-self._elements)

    def __neg__(self) -> Vector:
        return self.inverse()

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._wrap(self._elements + self._operand(other))

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._elements += self._operand(other)
        return self

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._wrap(self._elements - self._operand(other))

    def __isub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._elements -= self._operand(other)
        return self

    def __mul__(self, other: Vector | float) -> Vector:
        """Scale by a real number, or multiply componentwise by another vector."""
        if isinstance(other, Vector):
            return self.component_product(other)
        if isinstance(other, numbers.Real):
            return self._wrap(self._elements * float(other))
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if isinstance(other, numbers.Real):
            return self._wrap(self._elements * float(other))
        return NotImplemented

    def __imul__(self, other: Vector | float) -> Vector:
        if isinstance(other, Vector):
            self._elements *= self._operand(other)
            return self
        if isinstance(other, numbers.Real):
            self._elements *= float(other)
            return self
        return NotImplemented

    def component_product(self, other: Vector) -> Vector:
        """Elementwise (Hadamard) product."""
        return self._wrap(self._elements * self._operand(other))

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def magnitude_squared(self) -> float:
        """Sum of squared components. Avoids sqrt when only comparing lengths."""
        return float(np.dot(self._elements, self._elements))

    def magnitude(self) -> float:
        return float(np.sqrt(self.magnitude_squared()))

    def normalize(self) -> Vector:
        """
        Unit-length vector pointing the same way.

        A vector of exactly zero length has no direction; it is returned
        unchanged (as a copy) instead of producing NaNs.
        """
        length = self.magnitude()
        if length > 0.0:
            return self * (1.0 / length)
        return self.copy()

    def dot(self, other: Vector) -> float:
        return float(np.dot(self._elements, self._operand(other)))

    def cross(self, other: Vector) -> Vector:
        """
        Right-handed cross product a × b.

        Only defined for 3-component vectors:
            (ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)
        """
        if len(self) != 3:
            raise ValueError(f"Cross product needs 3-component vectors, got {len(self)}")
        b = self._operand(other)
        ax, ay, az = self._elements
        bx, by, bz = b
        return Vector(
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        )


def Vector3(x: float, y: float, z: float) -> Vector:
    """
    3-component vector, the only form the particle integrator uses.

    Takes exactly three components; use Vector(...) for other lengths.
    """
    return Vector(x, y, z)
