"""
Test Suite for Multi-Exponentiation Helpers
===========================================
"""

import pytest
from charm.toolbox.pairinggroup import ZR, G1, G2, pair

from pairing_toolkit.groups import setup
from pairing_toolkit.errors import InvalidParameterError
from pairing_toolkit.poly import build_vanishing_polynomial, evaluate
from pairing_toolkit.utils import multiexp_g2, eval_in_exponent_g2, gt_div


@pytest.fixture(scope="module")
def group():
    return setup('BN254')['group']


def test_multiexp_g2(group):
    bases = [group.random(G2) for _ in range(3)]
    exps = [group.random(ZR) for _ in range(3)]
    expected = bases[0] ** exps[0] * bases[1] ** exps[1] * bases[2] ** exps[2]
    assert multiexp_g2(bases, exps, group) == expected


def test_multiexp_empty_is_identity(group):
    assert multiexp_g2([], [], group) == group.init(G2, 1)


def test_multiexp_length_mismatch(group):
    with pytest.raises(ValueError):
        multiexp_g2([group.random(G2)], [], group)


def test_eval_in_exponent_matches_direct(group):
    gamma = group.random(ZR)
    h = group.random(G2)
    powers = []
    gamma_power = gamma
    for _ in range(4):
        powers.append(h ** gamma_power)
        gamma_power *= gamma

    coeffs = build_vanishing_polynomial([3, 8, 21], group)
    assert eval_in_exponent_g2(coeffs, h, powers, group) == h ** evaluate(coeffs, gamma, group)


def test_eval_in_exponent_degree_bound(group):
    h = group.random(G2)
    with pytest.raises(InvalidParameterError):
        eval_in_exponent_g2([1, 2, 3], h, [h], group)
    assert eval_in_exponent_g2([], h, [h], group) == group.init(G2, 1)


def test_gt_div(group):
    a = pair(group.random(G1), group.random(G2))
    b = pair(group.random(G1), group.random(G2))
    assert gt_div(a * b, b) == a
