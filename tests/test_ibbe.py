"""
Test Suite for Identity-Based Broadcast Encryption
==================================================
"""

import pytest

from pairing_toolkit.groups import setup as setup_group
from pairing_toolkit.errors import DegenerateInputError, InvalidParameterError
from pairing_toolkit import ibbe


@pytest.fixture(scope="module")
def group():
    """Initialize pairing group."""
    return setup_group('BN254')['group']


@pytest.fixture(scope="module")
def keys(group):
    """Broadcast keys for at most 5 recipients."""
    return ibbe.setup(group, 5)


def test_basic_flow(group, keys):
    pk, msk = keys
    S = ["Alice", "Bob", "Charlie"]
    alice_sk = ibbe.extract(msk, "Alice", group)

    hdr, K = ibbe.encrypt(S, pk, group)
    assert ibbe.decrypt(S, "Alice", alice_sk, hdr, pk, group) == K


def test_every_recipient_decrypts(group, keys):
    pk, msk = keys
    S = ["UserA", "UserB", "UserC", "UserD", "UserE"]
    sks = {name: ibbe.extract(msk, name, group) for name in S}

    hdr, K = ibbe.encrypt(S, pk, group)
    for name in S:
        assert ibbe.decrypt(S, name, sks[name], hdr, pk, group) == K


def test_single_recipient(group, keys):
    pk, msk = keys
    sk = ibbe.extract(msk, b"solo", group)

    hdr, K = ibbe.encrypt([b"solo"], pk, group)
    assert ibbe.decrypt([b"solo"], b"solo", sk, hdr, pk, group) == K


def test_outsider_key_does_not_decrypt(group, keys):
    pk, msk = keys
    S = ["Alice", "Bob"]
    eve_sk = ibbe.extract(msk, "Eve", group)

    hdr, K = ibbe.encrypt(S, pk, group)
    assert ibbe.decrypt(S, "Alice", eve_sk, hdr, pk, group) != K


def test_identity_not_in_set(group, keys):
    pk, msk = keys
    S = ["Alice", "Bob"]
    hdr, _ = ibbe.encrypt(S, pk, group)
    with pytest.raises(DegenerateInputError):
        ibbe.decrypt(S, "Eve", ibbe.extract(msk, "Eve", group), hdr, pk, group)


def test_encapsulation_is_randomized(group, keys):
    pk, _ = keys
    S = ["Alice", "Bob"]
    hdr_a, K_a = ibbe.encrypt(S, pk, group)
    hdr_b, K_b = ibbe.encrypt(S, pk, group)
    assert K_a != K_b
    assert hdr_a['c1'] != hdr_b['c1']


def test_recipient_bounds(group, keys):
    pk, _ = keys
    with pytest.raises(InvalidParameterError):
        ibbe.encrypt([], pk, group)
    with pytest.raises(InvalidParameterError):
        ibbe.encrypt([f"user{i}" for i in range(6)], pk, group)
    with pytest.raises(DegenerateInputError):
        ibbe.encrypt(["Alice", "Alice"], pk, group)


@pytest.mark.parametrize("m", [0, -3])
def test_setup_invalid_bound(group, m):
    with pytest.raises(InvalidParameterError):
        ibbe.setup(group, m)


def test_setup_powers_length(keys):
    pk, _ = keys
    assert len(pk['h_gamma_powers']) == pk['m'] == 5
