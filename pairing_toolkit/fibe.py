"""
Fuzzy Identity-Based Encryption (Sahai-Waters 2005, small universe)
===================================================================

An identity is a set of attributes drawn from the universe {1, ..., n}. A
ciphertext for attribute set ω' opens with a key for ω whenever the two
sets share at least d attributes (d is the error-tolerance distance).

Keys:
-----
pk  = (T_i = ĝ^{t_i} for i ∈ [n], Y = e(g, ĝ)^y)
msk = (t_1, ..., t_n, y)
sk_ω = {D_i = g^{q(i)/t_i} : i ∈ ω},  q random of degree d − 1 with q(0) = y

Encryption of M ∈ GT under ω':
------------------------------
E' = M · Y^s,  E_i = T_i^s for i ∈ ω'

Decryption with S ⊆ ω ∩ ω', |S| = d:
------------------------------------
M = E' / ∏_{i ∈ S} e(D_i, E_i)^{Δ_{i,S}(0)}
"""

import logging
from typing import Sequence

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .errors import DegenerateInputError, InvalidParameterError
from .groups import get_generators, random_scalar, random_scalars
from .lagrange import check_attributes_array, find_common_attributes, lagrange_basis
from .poly import evaluate, random_polynomial
from .utils import gt_div

logger = logging.getLogger(__name__)

# type annotations
pk_t = {'n': int, 'd': int, 'g': G1, 'g_hat': G2, 'T': {int: G2}, 'Y': GT}
msk_t = {'t': {int: ZR}, 'y': ZR}
sk_t = {'attributes': [int], 'D': {int: G1}}
ct_t = {'attributes': [int], 'E_prime': GT, 'E': {int: G2}}


def _check_attributes(attributes: Sequence[int], n: int, what: str) -> list:
    if not check_attributes_array(attributes, n):
        raise InvalidParameterError(
            f"invalid {what} attributes {attributes!r}, expected a non-empty subset of [1, {n}]")
    return list(attributes)


def setup(group: PairingGroup, n: int, d: int) -> tuple:
    """
    Generate (pk, msk) for the attribute universe [1, n] and distance d.

    Parameters
    ----------
    group : PairingGroup
        The pairing group
    n : int
        Size of the attribute universe.
    d : int
        Number of attributes a key and a ciphertext must share.

    Raises
    ------
    InvalidParameterError
        If n < 1 or d is not in [1, n].
    RandomnessError
        If the random source fails; no keys are returned.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidParameterError(f"invalid universe size n={n!r}, must be an integer >= 1")
    if isinstance(d, bool) or not isinstance(d, int) or not 1 <= d <= n:
        raise InvalidParameterError(f"invalid distance d={d!r}, must be an integer in [1, {n}]")

    t = dict(zip(range(1, n + 1), random_scalars(group, n)))
    y = random_scalar(group)
    g, g_hat = get_generators(group)

    pk = {
        'n': n,
        'd': d,
        'g': g,
        'g_hat': g_hat,
        'T': {i: g_hat ** t_i for i, t_i in t.items()},
        'Y': pair(g, g_hat) ** y,
    }
    msk = {'t': t, 'y': y}
    logger.debug("fuzzy IBE keys generated for n=%d, d=%d", n, d)
    return pk, msk


def keygen(pk: dict, msk: dict, attributes: Sequence[int], group: PairingGroup) -> dict:
    """Derive the private key for an attribute set from a fresh sharing of y."""
    attributes = _check_attributes(attributes, pk['n'], "user")

    q = random_polynomial(pk['d'], msk['y'], group)
    D = {}
    for i in attributes:
        D[i] = pk['g'] ** (evaluate(q, i, group) / msk['t'][i])
    return {'attributes': attributes, 'D': D}


def encrypt(pk: dict, message: GT, attributes: Sequence[int], group: PairingGroup) -> dict:
    """
    Encrypt ``message`` under an attribute set.

    Raises
    ------
    InvalidParameterError
        If the attribute set is empty or leaves the universe.
    """
    attributes = _check_attributes(attributes, pk['n'], "message")

    s = random_scalar(group)
    return {
        'attributes': attributes,
        'E_prime': message * (pk['Y'] ** s),
        'E': {i: pk['T'][i] ** s for i in attributes},
    }


def decrypt(pk: dict, sk: dict, ct: dict, group: PairingGroup) -> GT:
    """
    Recover the message when the key and ciphertext share at least d attributes.

    Raises
    ------
    InvalidParameterError
        If either attribute set is invalid.
    DegenerateInputError
        If fewer than d attributes are shared.
    """
    user_attributes = _check_attributes(sk['attributes'], pk['n'], "user")
    message_attributes = _check_attributes(ct['attributes'], pk['n'], "message")

    S = find_common_attributes(user_attributes, message_attributes, pk['d'])
    if S is None:
        raise DegenerateInputError(
            f"key and ciphertext share fewer than d={pk['d']} attributes")

    blinding = group.init(GT, 1)
    for i in S:
        blinding *= pair(sk['D'][i], ct['E'][i]) ** lagrange_basis(i, S, 0, group)
    return gt_div(ct['E_prime'], blinding)
