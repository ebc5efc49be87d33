"""
Utility Functions
=================

Group-side helpers shared by the schemes.

Key Operations:
- Multi-exponentiation: Compute ∏ ĝ_i^{e_i} in G2
- Evaluation in the exponent: Compute base^{P(γ)} from a powers-of-γ SRS
- GT operations: Division (multiplication by inverse) in GT

According to charm-crypto documentation:
- Group operations use * for multiplication, ** for exponentiation
- Inverse is computed as elem ** -1
- Exponents may be ZR elements or Python ints
"""

from typing import List, Sequence, Union

from charm.toolbox.pairinggroup import PairingGroup, ZR, G2, GT

from .errors import InvalidParameterError

Exponent = Union[ZR, int]


def _multiexp(kind, bases: Sequence, exponents: Sequence[Exponent], group: PairingGroup):
    if len(bases) != len(exponents):
        raise ValueError(f"bases and exponents must have same length: {len(bases)} != {len(exponents)}")

    result = group.init(kind, 1)
    for base, exp in zip(bases, exponents):
        result *= base ** exp
    return result


def multiexp_g2(bases: List[G2], exponents: List[Exponent], group: PairingGroup) -> G2:
    """
    Compute multi-exponentiation in G2: ∏ bases[i]^{exponents[i]}.

    Returns the identity element 1_Ĝ when bases is empty.
    """
    return _multiexp(G2, bases, exponents, group)


def eval_in_exponent_g2(coeffs: Sequence[Exponent], base: G2, powers: Sequence[G2],
                        group: PairingGroup) -> G2:
    """
    Compute base^{P(γ)} without knowing γ.

    Formula:
    --------
    base^{P(γ)} = base^{c_0} · ∏_{i=1}^{d} (base^{γ^i})^{c_i}

    Parameters
    ----------
    coeffs : Sequence
        Coefficients c_0 .. c_d of P in ascending degree (ints or ZR).
    base : G2
        The generator ĝ = base^{γ^0}.
    powers : Sequence[G2]
        [base^{γ^1}, ..., base^{γ^m}] with m >= d.
    group : PairingGroup
        The pairing group

    Notes
    -----
    An empty coefficient list is the zero polynomial and gives 1_Ĝ.
    """
    if len(coeffs) == 0:
        return group.init(G2, 1)
    if len(coeffs) - 1 > len(powers):
        raise InvalidParameterError(
            f"polynomial of degree {len(coeffs) - 1} exceeds the {len(powers)} available powers")

    exponents = list(coeffs)
    return base ** exponents[0] * multiexp_g2(list(powers[:len(coeffs) - 1]), exponents[1:], group)


def gt_div(numerator: GT, denominator: GT) -> GT:
    """
    Compute division in GT: numerator / denominator.

    This is implemented as: numerator * denominator^{-1}
    """
    return numerator * (denominator ** -1)
