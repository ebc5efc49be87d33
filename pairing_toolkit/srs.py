"""
Structured Reference String (SRS) Generation
============================================

This module implements Setup and KeyGen of the batched identity-based
encryption scheme of Gong, Waters, Wee and Wu (ePrint 2025/2103).

The SRS consists of powers of a secret τ in Ĝ (G2), together with G1
encodings of the master secret:
- For Ĝ:  ĝ_i := ĝ^{τ^i}          for i ∈ [B]
- For G:  g^τ, g^w, g^{wτ}, g^v, g^h
- For G_T: e(g, ĝ)^α

Mathematical Notation:
----------------------
- [B] = {1, 2, ..., B}, B is the batch capacity
- τ, w, v, h, α ∈ Z_q form the master secret key
- g ∈ G, ĝ ∈ Ĝ are the fixed bases published with the public key

τ is the trapdoor: it must be destroyed after generation in a real
deployment. Growing B later requires a fresh setup.
"""

import logging

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .config import config
from .errors import InvalidParameterError
from .groups import get_generators, random_scalars

logger = logging.getLogger(__name__)

# type annotations
params_t = {'B': int}
msk_t = {'tau': ZR, 'w': ZR, 'v': ZR, 'h': ZR, 'alpha': ZR}
mpk_t = {'B': int, 'g': G1, 'g_hat': G2, 'g2_tau_powers': [G2],
         'g1_tau': G1, 'g1_w': G1, 'g1_w_tau': G1, 'g1_v': G1, 'g1_h': G1,
         'gt_alpha': GT}


def setup(B: int = None) -> dict:
    """
    Fix the batch capacity B.

    Parameters
    ----------
    B : int, optional
        Maximum number of identities in a batch. Defaults to
        ``config.batch_capacity``.

    Returns
    -------
    dict
        {'B': B}

    Raises
    ------
    InvalidParameterError
        If B is not an integer >= 1.
    """
    if B is None:
        B = config.batch_capacity
    if isinstance(B, bool) or not isinstance(B, int) or B < 1:
        raise InvalidParameterError(f"invalid batch capacity B={B!r}, must be an integer >= 1")
    return {'B': B}


def keygen(params: dict, group: PairingGroup) -> tuple:
    """
    Generate the master public key (SRS) and master secret key.

    Parameters
    ----------
    params : dict
        The capacity descriptor from setup()
    group : PairingGroup
        The initialized pairing group from groups.setup()

    Returns
    -------
    tuple
        (mpk, msk) where mpk follows ``mpk_t`` and msk follows ``msk_t``.
        mpk['g2_tau_powers'][i - 1] = ĝ^{τ^i} for i ∈ [B].

    Raises
    ------
    RandomnessError
        If any of the five secret scalars or the generators cannot be
        sampled. Nothing is returned in that case.

    Notes
    -----
    τ^i is obtained by repeated multiplication in Z_q, and each power costs
    one fixed-base exponentiation of ĝ. The SRS is never derived from the
    previous group element.
    """
    B = setup(params['B'])['B']

    # τ, w, v, h, α <- Z_q
    tau, w, v, h, alpha = random_scalars(group, 5)
    g, g_hat = get_generators(group)

    g1_tau = g ** tau
    g1_w = g ** w
    g1_w_tau = g ** (w * tau)
    g1_v = g ** v
    g1_h = g ** h
    gt_alpha = pair(g, g_hat) ** alpha

    # ĝ^{τ}, ĝ^{τ^2}, ..., ĝ^{τ^B}
    g2_tau_powers = []
    tau_power = tau
    for _ in range(B):
        g2_tau_powers.append(g_hat ** tau_power)
        tau_power = tau_power * tau

    logger.debug("generated SRS with capacity B=%d", B)

    mpk = {
        'B': B,
        'g': g,
        'g_hat': g_hat,
        'g2_tau_powers': g2_tau_powers,
        'g1_tau': g1_tau,
        'g1_w': g1_w,
        'g1_w_tau': g1_w_tau,
        'g1_v': g1_v,
        'g1_h': g1_h,
        'gt_alpha': gt_alpha,
    }
    msk = {'tau': tau, 'w': w, 'v': v, 'h': h, 'alpha': alpha}
    return mpk, msk


def validate_srs(mpk: dict) -> bool:
    """
    Validate that the master public key is well-formed.

    Checks:
    - every key of ``mpk_t`` is present
    - g2_tau_powers has exactly B elements
    """
    if any(key not in mpk for key in mpk_t):
        return False
    B = mpk['B']
    if not isinstance(B, int) or B < 1:
        return False
    return len(mpk['g2_tau_powers']) == B


def verify_srs(mpk: dict) -> bool:
    """
    Check that g2_tau_powers really are successive powers of the same τ.

    Equations:
    ----------
    e(g, ĝ_1)     = e(g^τ, ĝ)
    e(g, ĝ_{i+1}) = e(g^τ, ĝ_i)    for i ∈ [B − 1]
    """
    if not validate_srs(mpk):
        return False

    g, g_hat, g1_tau = mpk['g'], mpk['g_hat'], mpk['g1_tau']
    previous = g_hat
    for current in mpk['g2_tau_powers']:
        if pair(g, current) != pair(g1_tau, previous):
            return False
        previous = current
    return True
