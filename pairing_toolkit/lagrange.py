"""
Threshold / Lagrange Module
===========================

Lagrange basis coefficients over integer index sets, Shamir-style secret
sharing built on top of them, and the attribute-set helpers of the fuzzy
IBE scheme.

Formula:
--------
Δ_{i,S}(x) = ∏_{j ∈ S, j ≠ i} (x − j) / (i − j)   (mod q)

Indices are small positive integers (party or attribute numbers) embedded
into Z_q; they must stay distinct after reduction modulo q.
"""

from typing import Dict, Iterable, List, Sequence, Union

from charm.toolbox.pairinggroup import PairingGroup, ZR

from .errors import DegenerateInputError, InvalidParameterError
from .groups import field_order, to_int
from .poly import evaluate, random_polynomial


def _check_index_set(S: Sequence[int], group: PairingGroup) -> List[int]:
    p = field_order(group)
    reduced = [int(j) % p for j in S]
    if len(set(reduced)) != len(reduced):
        raise DegenerateInputError(f"Index set {list(S)} contains duplicates modulo q")
    return reduced


def lagrange_basis(i: int, S: Sequence[int], x: Union[ZR, int], group: PairingGroup) -> ZR:
    """
    Compute the Lagrange basis coefficient Δ_{i,S}(x) mod q.

    Parameters
    ----------
    i : int
        The index whose coefficient is computed; must be a member of S.
    S : Sequence[int]
        The index set. Duplicates (also modulo q) are rejected.
    x : ZR or int
        The evaluation point.
    group : PairingGroup
        The pairing group providing Z_q.

    Returns
    -------
    ZR
        Δ_{i,S}(x). Equals 1 at x = i and 0 at every other member of S.

    Examples
    --------
    >>> lagrange_basis(1, [1, 2, 3], 0, group)   # (0−2)(0−3) / ((1−2)(1−3))
    3
    """
    p = field_order(group)
    reduced = _check_index_set(S, group)
    i_int = int(i) % p
    if i_int not in reduced:
        raise DegenerateInputError(f"Index {i} is not a member of {list(S)}")

    x_int = to_int(x, group)
    numerator, denominator = 1, 1
    for j_int in reduced:
        if j_int == i_int:
            continue
        numerator = (numerator * (x_int - j_int)) % p
        denominator = (denominator * (i_int - j_int)) % p
    delta = (numerator * pow(denominator, -1, p)) % p
    return group.init(ZR, delta)


def lagrange_coefficients(S: Sequence[int], x: Union[ZR, int], group: PairingGroup) -> Dict[int, ZR]:
    """Return {i: Δ_{i,S}(x)} for every i in S."""
    return {i: lagrange_basis(i, S, x, group) for i in S}


def share_secret(secret: Union[ZR, int], threshold: int, indices: Iterable[int],
                 group: PairingGroup) -> Dict[int, ZR]:
    """
    Split ``secret`` into shares q(i) of a random polynomial with q(0) = secret.

    Any ``threshold`` of the returned shares reconstruct the secret; fewer
    reveal nothing about it.
    """
    indices = list(indices)
    if threshold < 1:
        raise InvalidParameterError(f"threshold must be >= 1, got {threshold}")
    if len(indices) < threshold:
        raise InvalidParameterError(
            f"need at least {threshold} share indices, got {len(indices)}")
    if any(int(j) % field_order(group) == 0 for j in indices):
        raise DegenerateInputError("share index 0 would reveal the secret")
    _check_index_set(indices, group)

    coeffs = random_polynomial(threshold, secret, group)
    return {j: evaluate(coeffs, j, group) for j in indices}


def reconstruct_secret(shares: Dict[int, ZR], group: PairingGroup) -> ZR:
    """Recover q(0) = Σ_i share_i · Δ_{i,S}(0) from a dict of shares."""
    S = list(shares.keys())
    secret = group.init(ZR, 0)
    for i, share in shares.items():
        secret += share * lagrange_basis(i, S, 0, group)
    return secret


def check_attributes_array(attributes: Sequence[int], universe: int) -> bool:
    """True iff ``attributes`` is non-empty and every entry lies in [1, universe]."""
    if not attributes:
        return False
    return all(1 <= a <= universe for a in attributes)


def find_common_attributes(attributes1: Sequence[int], attributes2: Sequence[int],
                           required: int) -> Union[List[int], None]:
    """
    Return the first ``required`` distinct attributes shared by both sets,
    in the order of ``attributes2``, or None if fewer are shared.
    """
    wanted = set(attributes1)
    common = []
    for a in attributes2:
        if a in wanted and a not in common:
            common.append(a)
    if len(common) < required:
        return None
    return common[:required]
