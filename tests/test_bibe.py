"""
Test Suite for Batched IBE Encryption
=====================================

Decryption is not part of the toolkit, so ciphertexts are checked against
the master secret: every component must satisfy its defining equation
relative to ct1 = g^s.
"""

import pytest
from charm.toolbox.pairinggroup import ZR, pair

from pairing_toolkit.groups import setup as setup_group
from pairing_toolkit.errors import DegenerateInputError, InvalidParameterError, RandomnessError
from pairing_toolkit.srs import setup, keygen
from pairing_toolkit.bibe import encrypt, compute_vanishing_coefficients, random_message
from pairing_toolkit.poly import evaluate, degree
from pairing_toolkit.utils import gt_div


@pytest.fixture(scope="module")
def group():
    """Initialize pairing group."""
    return setup_group('BN254')['group']


@pytest.fixture(scope="module")
def keys(group):
    return keygen(setup(10), group)


def test_ciphertext_equations(group, keys):
    mpk, msk = keys
    M = random_message(group)
    identity, label = 42, 7

    ct = encrypt(mpk, M, identity, label, group)
    ct1 = ct['ct1']
    id_zr = group.init(ZR, identity)
    tg = group.init(ZR, label)

    # ct2 = ct1^{w(τ − id)}
    assert ct['ct2'] == ct1 ** (msk['w'] * (msk['tau'] - id_zr))
    # ct3 = ct1^{v + tg·h}
    assert ct['ct3'] == ct1 ** (msk['v'] + tg * msk['h'])
    # ct4 / M = e(ct1, ĝ)^α
    assert gt_div(ct['ct4'], M) == pair(ct1, mpk['g_hat']) ** msk['alpha']


def test_encrypt_accepts_zr_inputs(group, keys):
    mpk, msk = keys
    M = random_message(group)
    identity = group.random(ZR)
    label = group.random(ZR)

    ct = encrypt(mpk, M, identity, label, group)
    assert ct['ct2'] == ct['ct1'] ** (msk['w'] * (msk['tau'] - identity))


def test_encrypt_is_randomized(group, keys):
    mpk, _ = keys
    M = random_message(group)

    ct_a = encrypt(mpk, M, 42, 7, group)
    ct_b = encrypt(mpk, M, 42, 7, group)

    for key in ('ct1', 'ct2', 'ct3', 'ct4'):
        assert ct_a[key] != ct_b[key]


def test_encrypt_binds_batch_label(group, keys):
    mpk, msk = keys
    ct = encrypt(mpk, random_message(group), 42, 7, group)
    wrong_tg = group.init(ZR, 13)
    assert ct['ct3'] != ct['ct1'] ** (msk['v'] + wrong_tg * msk['h'])


def test_encrypt_randomness_failure(group, keys):
    mpk, _ = keys

    class BrokenGroup:
        def __getattr__(self, name):
            return getattr(group, name)

        def random(self, *args, **kwargs):
            raise OSError("entropy source unavailable")

    with pytest.raises(RandomnessError):
        encrypt(mpk, random_message(group), 1, 1, BrokenGroup())


# ============================================================================
# Batch vanishing coefficients
# ============================================================================

def test_vanishing_coefficients_for_batch(group):
    identities = [1, 2, 3, 4, 5]
    coeffs = compute_vanishing_coefficients(identities, group, capacity=10)

    assert degree(coeffs) == len(identities)
    for identity in identities:
        assert evaluate(coeffs, identity, group) == group.init(ZR, 0)
    assert evaluate(coeffs, 99, group) != group.init(ZR, 0)


def test_vanishing_coefficients_two_identities(group):
    q = int(group.order())
    # (X − 1)(X − 2) = 2 − 3X + X²
    assert list(compute_vanishing_coefficients([1, 2], group)) == [2, q - 3, 1]


def test_vanishing_coefficients_empty_batch(group):
    assert list(compute_vanishing_coefficients([], group)) == [1]


def test_vanishing_coefficients_rejects_duplicates(group):
    with pytest.raises(DegenerateInputError):
        compute_vanishing_coefficients([1, 2, 1], group)


def test_vanishing_coefficients_rejects_oversized_batch(group):
    with pytest.raises(InvalidParameterError):
        compute_vanishing_coefficients(list(range(1, 6)), group, capacity=4)
