"""
Group Initialization and Setup
===============================

This module handles the initialization of the bilinear pairing groups used
by every scheme in the toolkit, and the small helpers that move values
between Python integers and the scalar field Z_q.

According to charm-crypto documentation (https://jhuisi.github.io/charm/tutorial.html):
- PairingGroup('BN254') provides asymmetric Type-3 pairings over a 254-bit field
- Alternative curves: 'MNT224', 'SS512' (symmetric, but can be used)
- G1, G2 are the source groups; GT is the target group
- Pairing operation: pair(g1_elem, g2_elem) -> GT element
"""

import logging
from typing import List, Union

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .config import config
from .errors import RandomnessError

logger = logging.getLogger(__name__)


def setup(group_name: str = None) -> dict:
    """
    Initialize the pairing group.

    Parameters
    ----------
    group_name : str, optional
        The pairing curve identifier. Defaults to ``config.pairing_curve``
        ('BN254' unless PAIRING_CURVE is set). If the local PBC build does
        not provide the curve, every other curve of
        ``config.fallback_curves`` is tried in order.

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'group_name': The name of the curve used
        - 'order': The prime order q of the scalar field
        - 'G1', 'G2', 'GT', 'ZR': The charm group type constants
        - 'pair': The pairing function

    Examples
    --------
    >>> params = setup('BN254')
    >>> group = params['group']
    >>> e = pair(group.random(G1), group.random(G2))  # e is in GT
    """
    if group_name is None:
        group_name = config.pairing_curve

    candidates = [group_name] + [c for c in config.fallback_curves if c != group_name]
    last_error = None
    for name in candidates:
        try:
            group = PairingGroup(name)
        except Exception as e:
            logger.warning("%s not available (%s), trying next curve", name, e)
            last_error = e
            continue
        return {
            'group': group,
            'group_name': name,
            'order': int(group.order()),
            'G1': G1,
            'G2': G2,
            'GT': GT,
            'ZR': ZR,
            'pair': pair,
        }
    raise RuntimeError(f"No pairing curve available (tried {candidates})") from last_error


def get_generators(group: PairingGroup) -> tuple:
    """
    Sample generators g of G1 and ĝ of G2 and enable fixed-base pre-processing.

    Returns
    -------
    tuple
        (g, g_hat)
    """
    g = random_element(group, G1)
    g_hat = random_element(group, G2)
    g.initPP()
    g_hat.initPP()
    return g, g_hat


def random_element(group: PairingGroup, kind):
    try:
        elem = group.random(kind)
    except Exception as e:
        raise RandomnessError(f"failed to sample a random element of type {kind}") from e
    if elem is None:
        raise RandomnessError(f"random source returned no element of type {kind}")
    return elem


def random_scalars(group: PairingGroup, count: int) -> List[ZR]:
    """
    Draw ``count`` independent uniform scalars from Z_q.

    Either all scalars are returned or RandomnessError is raised; callers
    never observe a partial list. Every call draws fresh values.
    """
    return [random_element(group, ZR) for _ in range(count)]


def random_scalar(group: PairingGroup) -> ZR:
    return random_element(group, ZR)


def field_order(group: PairingGroup) -> int:
    return int(group.order())


def to_int(value: Union[ZR, int], group: PairingGroup) -> int:
    """Reduce a ZR element or a Python int into [0, q)."""
    return int(value) % field_order(group)


def to_zr(value: Union[ZR, int], group: PairingGroup) -> ZR:
    """Embed a ZR element or a Python int into Z_q."""
    return group.init(ZR, to_int(value, group))
