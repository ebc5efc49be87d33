"""
Pairing Toolkit: Batched IBE over Bilinear Groups
=================================================

Pairing-based constructions built on charm-crypto Type-3 pairing groups:
the finite-field polynomial engine, Lagrange/threshold utilities, the
powers-of-τ structured reference string and the encryption side of the
GWWW25 batched identity-based encryption scheme, plus the Delerablée
identity-based broadcast encryption that shares the same polynomial
machinery, and the Sahai-Waters fuzzy IBE built on the Lagrange
utilities.

Modules:
--------
- groups: Group initialization, sampling and Z_q conversions
- poly: Vanishing/product polynomials, Horner evaluation, random polynomials
- lagrange: Lagrange basis coefficients, secret sharing, attribute sets
- srs: Setup and KeyGen (powers of τ in G2, G1/GT encodings of the secret)
- bibe: Encrypt and the batch vanishing-coefficient builder
- ibbe: Identity-based broadcast encryption (Delerablée 2007)
- fibe: Fuzzy identity-based encryption (Sahai-Waters 2005)
- utils: Multi-exponentiation and evaluation in the exponent
- serialization: base64/JSON forms of keys and ciphertexts

Usage:
------
    from pairing_toolkit import groups, srs, bibe

    group = groups.setup('BN254')['group']
    params = srs.setup(B=4)
    mpk, msk = srs.keygen(params, group)
    ct = bibe.encrypt(mpk, bibe.random_message(group), 42, 7, group)
"""

__version__ = "0.1.0"

from .groups import setup as setup_group
from .srs import setup, keygen
from .bibe import encrypt, compute_vanishing_coefficients
from .errors import InvalidParameterError, RandomnessError, DegenerateInputError

__all__ = [
    'setup_group', 'setup', 'keygen', 'encrypt', 'compute_vanishing_coefficients',
    'InvalidParameterError', 'RandomnessError', 'DegenerateInputError',
]
