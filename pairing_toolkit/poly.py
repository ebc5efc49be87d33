"""
Field Polynomial Engine
=======================

Polynomial arithmetic over the scalar field Z_q of a pairing group.

Representation:
---------------
A polynomial is a numpy object array of Python ints in [0, q), in ascending
degree order: coeffs[i] is the coefficient of X^i. The zero polynomial is
the empty array. Nothing here trims trailing zeros except normalize().

Scalar arguments may be charm ZR elements or Python ints; scalar results are
returned as ZR elements so that they can be used directly as exponents.
"""

from typing import Iterable, Sequence, Union

import numpy as np
from charm.toolbox.pairinggroup import PairingGroup, ZR

from .errors import DegenerateInputError
from .groups import field_order, random_scalar, to_int

Scalar = Union[ZR, int]


def _mul_linear(poly: np.ndarray, r: int, p: int) -> np.ndarray:
    """Return poly · (X − r) as a new array one coefficient longer."""
    new_poly = np.zeros(len(poly) + 1, dtype=object)
    new_poly[1:] += poly        # poly · X
    new_poly[:-1] -= poly * r   # − r · poly
    return new_poly % p


def build_vanishing_polynomial(roots: Iterable[Scalar], group: PairingGroup) -> np.ndarray:
    """
    Compute the coefficients of P(X) = ∏_{r ∈ roots} (X − r).

    The result is monic of degree len(roots); the empty root set gives the
    constant polynomial 1. Repeated roots are not rejected here and yield a
    repeated factor; use ensure_distinct() first when simple roots matter.

    Time complexity: O(n²) field multiplications for n roots.

    Examples
    --------
    >>> build_vanishing_polynomial([2, 3], group)  # 6, q-5, 1  (6 − 5X + X²)
    """
    p = field_order(group)
    poly = np.array([1], dtype=object)
    for r in roots:
        poly = _mul_linear(poly, to_int(r, group), p)
    return poly


def build_product_polynomial(elements: Iterable[Scalar], group: PairingGroup) -> np.ndarray:
    """
    Compute the coefficients of ∏_{r ∈ elements} (X + r).

    coeffs[0] is the product of all elements and the leading coefficient is 1.
    """
    p = field_order(group)
    return build_vanishing_polynomial([(-to_int(r, group)) % p for r in elements], group)


def evaluate(coeffs: Sequence[Scalar], x: Scalar, group: PairingGroup) -> ZR:
    """
    Evaluate a polynomial at x with Horner's rule.

    result = a_n; then result = result·x + a_{i} for i = n−1 .. 0.
    The empty polynomial evaluates to 0 everywhere.
    """
    if len(coeffs) == 0:
        return group.init(ZR, 0)

    p = field_order(group)
    x_int = to_int(x, group)
    result = to_int(coeffs[-1], group)
    for c in reversed(coeffs[:-1]):
        result = (result * x_int + to_int(c, group)) % p
    return group.init(ZR, result)


def random_polynomial(degree: int, constant_term: Scalar, group: PairingGroup) -> np.ndarray:
    """
    Generate a random polynomial with a fixed constant term.

    Parameters
    ----------
    degree : int
        Number of coefficients (the polynomial has degree at most degree − 1).
    constant_term : ZR or int
        The value placed at coeffs[0], typically the secret being shared.
    group : PairingGroup
        Source of the uniform coefficients coeffs[1..degree−1].

    Returns
    -------
    np.ndarray
        An array of exactly ``degree`` coefficients, or the empty array when
        degree <= 0.
    """
    if degree <= 0:
        return np.array([], dtype=object)

    coeffs = np.zeros(degree, dtype=object)
    coeffs[0] = to_int(constant_term, group)
    for i in range(1, degree):
        coeffs[i] = to_int(random_scalar(group), group)
    return coeffs


def normalize(coeffs: Sequence[Scalar]) -> np.ndarray:
    """Drop trailing zero coefficients; the zero polynomial becomes empty."""
    arr = np.array([int(c) for c in coeffs], dtype=object)
    return np.trim_zeros(arr, 'b')


def degree(coeffs: Sequence[Scalar]) -> int:
    """Degree of the normalized polynomial, −1 for the zero polynomial."""
    return len(normalize(coeffs)) - 1


def ensure_distinct(values: Iterable[Scalar], group: PairingGroup, what: str = "root") -> None:
    """Raise DegenerateInputError if two values coincide modulo q."""
    seen = set()
    for v in values:
        v_int = to_int(v, group)
        if v_int in seen:
            raise DegenerateInputError(f"Duplicate {what} {v_int}")
        seen.add(v_int)
