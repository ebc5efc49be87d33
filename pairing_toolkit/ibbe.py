"""
Identity-Based Broadcast Encryption (Delerablée 2007)
=====================================================

A key encapsulation for a recipient set S with constant-size header and
private keys.

Keys:
-----
pk  = (w = g^γ, v = e(g, h), h, h^γ, h^{γ^2}, ..., h^{γ^m})
msk = (g, γ)
sk_ID = g^{1/(γ + H(ID))}

Encapsulation for S (|S| <= m):
-------------------------------
C1 = w^{-k}
C2 = h^{k · ∏_{ID ∈ S} (γ + H(ID))}
K  = v^k

Decapsulation by ID_i ∈ S:
--------------------------
p_i(γ) = (1/γ) · (∏_{j≠i} (γ + H(ID_j)) − ∏_{j≠i} H(ID_j))
K = (e(C1, h^{p_i(γ)}) · e(sk_i, C2))^{1 / ∏_{j≠i} H(ID_j)}

The product ∏(γ + H(ID)) is never evaluated at γ: its coefficients are
computed in Z_q and raised against the powers h^{γ^i}.
"""

from typing import List, Sequence, Union

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .config import config
from .errors import DegenerateInputError, InvalidParameterError
from .groups import field_order, get_generators, random_scalar
from .poly import build_product_polynomial, ensure_distinct
from .utils import eval_in_exponent_g2

# type annotations
pk_t = {'m': int, 'w': G1, 'v': GT, 'h': G2, 'h_gamma_powers': [G2]}
msk_t = {'g': G1, 'gamma': ZR}
hdr_t = {'c1': G1, 'c2': G2}

Identity = Union[str, bytes]


def _identity_bytes(identity: Identity) -> bytes:
    if isinstance(identity, str):
        return identity.encode('utf-8')
    return bytes(identity)


def hash_identity(identity: Identity, group: PairingGroup) -> ZR:
    """
    Hash an identity to a non-zero element of Z_q.

    If the hash is zero, a null byte is appended and the input rehashed.
    """
    data = _identity_bytes(identity)
    h = group.hash(data, ZR)
    while h == 0:
        data += b'\x00'
        h = group.hash(data, ZR)
    return h


def setup(group: PairingGroup, m: int = None) -> tuple:
    """
    Generate (pk, msk) for at most ``m`` recipients per broadcast.

    Parameters
    ----------
    group : PairingGroup
        The pairing group
    m : int, optional
        Maximal recipient set size. Defaults to ``config.ibbe_max_recipients``.

    Raises
    ------
    InvalidParameterError
        If m < 1.
    """
    if m is None:
        m = config.ibbe_max_recipients
    if isinstance(m, bool) or not isinstance(m, int) or m < 1:
        raise InvalidParameterError(f"invalid recipient bound m={m!r}, must be an integer >= 1")

    gamma = random_scalar(group)
    g, h = get_generators(group)

    w = g ** gamma
    v = pair(g, h)

    # h^γ, h^{γ^2}, ..., h^{γ^m}
    h_gamma_powers = []
    gamma_power = gamma
    for _ in range(m):
        h_gamma_powers.append(h ** gamma_power)
        gamma_power = gamma_power * gamma

    pk = {'m': m, 'w': w, 'v': v, 'h': h, 'h_gamma_powers': h_gamma_powers}
    msk = {'g': g, 'gamma': gamma}
    return pk, msk


def extract(msk: dict, identity: Identity, group: PairingGroup) -> G1:
    """Derive sk_ID = g^{1/(γ + H(ID))}."""
    hid = hash_identity(identity, group)
    return msk['g'] ** (1 / (msk['gamma'] + hid))


def _hashed_set(recipients: Sequence[Identity], group: PairingGroup) -> List[ZR]:
    hashed = [hash_identity(r, group) for r in recipients]
    ensure_distinct(hashed, group, what="recipient")
    return hashed


def encrypt(recipients: Sequence[Identity], pk: dict, group: PairingGroup) -> tuple:
    """
    Encapsulate a fresh key K for the recipient set.

    Returns
    -------
    tuple
        (header, K) with header = {'c1': G1, 'c2': G2} and K ∈ GT.

    Raises
    ------
    InvalidParameterError
        If the set is empty or larger than pk['m'].
    DegenerateInputError
        If an identity appears twice.
    """
    if len(recipients) == 0:
        raise InvalidParameterError("recipient set is empty")
    if len(recipients) > pk['m']:
        raise InvalidParameterError(
            f"{len(recipients)} recipients exceed the bound m={pk['m']}")

    hashed = _hashed_set(recipients, group)
    k = random_scalar(group)

    c1 = (pk['w'] ** k) ** -1
    coeffs = build_product_polynomial(hashed, group)
    c2 = eval_in_exponent_g2(coeffs, pk['h'], pk['h_gamma_powers'], group) ** k
    K = pk['v'] ** k

    return {'c1': c1, 'c2': c2}, K


def decrypt(recipients: Sequence[Identity], identity: Identity, sk: G1, header: dict,
            pk: dict, group: PairingGroup) -> GT:
    """
    Recover K for ``identity`` from a broadcast header.

    Raises
    ------
    DegenerateInputError
        If ``identity`` is not in ``recipients``.
    """
    target = _identity_bytes(identity)
    names = [_identity_bytes(r) for r in recipients]
    if target not in names:
        raise DegenerateInputError("identity is not in the recipient set")

    others = [r for r in names if r != target]
    hashed_others = _hashed_set(others, group)

    # ∏_{j≠i}(x + H(ID_j)); dropping c_0 = ∏ H(ID_j) and shifting divides by γ
    coeffs = build_product_polynomial(hashed_others, group)
    p = field_order(group)
    prod_others = int(coeffs[0]) % p

    K = pair(sk, header['c2'])
    if len(coeffs) > 1:
        h_p = eval_in_exponent_g2(coeffs[1:], pk['h'], pk['h_gamma_powers'], group)
        K = pair(header['c1'], h_p) * K

    return K ** group.init(ZR, pow(prod_others, -1, p))
