"""
Batched Identity-Based Encryption (encryption side)
===================================================

Encrypt of the GWWW25 batched IBE, and the builder that compresses a batch
of identities into the coefficients of its vanishing polynomial.

Ciphertext:
-----------
ct1 = g^s
ct2 = (g^{wτ})^s / (g^w)^{s·id}       = g^{s·w(τ − id)}
ct3 = (g^v · (g^h)^{tg})^s             = g^{s(v + tg·h)}
ct4 = (e(g, ĝ)^α)^s · M

where s is a fresh uniform scalar, id the recipient identity and tg the
batch label.

Decryption, key derivation and the batch digest (committing the vanishing
polynomial coefficients against g2_tau_powers) are not provided here;
compute_vanishing_coefficients() is the hook a digest would start from.
"""

from typing import Sequence, Union

import numpy as np
from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, GT

from .errors import InvalidParameterError
from .groups import random_element, random_scalar, to_zr
from .poly import build_vanishing_polynomial, ensure_distinct

# type annotations
ct_t = {'ct1': G1, 'ct2': G1, 'ct3': G1, 'ct4': GT}


def encrypt(mpk: dict, message: GT, identity: Union[ZR, int], batch_label: Union[ZR, int],
            group: PairingGroup) -> dict:
    """
    Encrypt ``message`` to ``identity`` within the batch ``batch_label``.

    Parameters
    ----------
    mpk : dict
        The master public key from srs.keygen()
    message : GT
        The message, an element of the target group
    identity : ZR or int
        The recipient identity
    batch_label : ZR or int
        The batch (epoch) label tg
    group : PairingGroup
        The pairing group

    Returns
    -------
    dict
        The ciphertext {'ct1', 'ct2', 'ct3', 'ct4'}

    Raises
    ------
    RandomnessError
        If s cannot be sampled.
    """
    s = random_scalar(group)
    id_zr = to_zr(identity, group)
    tg = to_zr(batch_label, group)

    ct1 = mpk['g'] ** s
    ct2 = (mpk['g1_w_tau'] ** s) / (mpk['g1_w'] ** (s * id_zr))
    ct3 = (mpk['g1_v'] * (mpk['g1_h'] ** tg)) ** s
    ct4 = (mpk['gt_alpha'] ** s) * message

    return {'ct1': ct1, 'ct2': ct2, 'ct3': ct3, 'ct4': ct4}


def compute_vanishing_coefficients(identities: Sequence[Union[ZR, int]], group: PairingGroup,
                                   capacity: int = None) -> np.ndarray:
    """
    Coefficients of ∏_k (X − id_k) over a batch of identities.

    Parameters
    ----------
    identities : Sequence
        The batch, as ZR elements or ints. Must be pairwise distinct.
    group : PairingGroup
        The pairing group
    capacity : int, optional
        The batch capacity B of the SRS; when given, larger batches are
        rejected.

    Raises
    ------
    DegenerateInputError
        If two identities coincide modulo q.
    InvalidParameterError
        If the batch exceeds ``capacity``.
    """
    if capacity is not None and len(identities) > capacity:
        raise InvalidParameterError(
            f"batch of {len(identities)} identities exceeds capacity B={capacity}")
    ensure_distinct(identities, group, what="identity")
    return build_vanishing_polynomial(identities, group)


def random_message(group: PairingGroup) -> GT:
    """Sample a uniform message from GT."""
    return random_element(group, GT)
