"""
Key and ciphertext serialization
================================

Charm group elements <-> base64 strings, and JSON-friendly dict forms of
the batch-scheme keys and ciphertexts.
"""

import base64
import json

from charm.toolbox.pairinggroup import PairingGroup, G1, G2
from charm.core.engine.util import objectToBytes, bytesToObject

from .config import config

_IDENTITY_MARKERS = {G1: "__IDENTITY_G1__", G2: "__IDENTITY_G2__"}


def serialize_element(elem, group: PairingGroup) -> str:
    """Serialize a G1/G2/GT/ZR element to a base64 string."""
    return base64.b64encode(objectToBytes(elem, group)).decode('utf-8')


def deserialize_element(data: str, group: PairingGroup):
    """Deserialize a base64 string produced by serialize_element()."""
    return bytesToObject(base64.b64decode(data), group)


def serialize_g1(elem: G1, group: PairingGroup) -> str:
    """Serialize a G1 element, with a marker for the identity element."""
    if elem == group.init(G1, 1):
        return _IDENTITY_MARKERS[G1]
    return serialize_element(elem, group)


def deserialize_g1(data: str, group: PairingGroup) -> G1:
    if data == _IDENTITY_MARKERS[G1]:
        return group.init(G1, 1)
    return deserialize_element(data, group)


def serialize_g2(elem: G2, group: PairingGroup) -> str:
    """Serialize a G2 element, with a marker for the identity element."""
    if elem == group.init(G2, 1):
        return _IDENTITY_MARKERS[G2]
    return serialize_element(elem, group)


def deserialize_g2(data: str, group: PairingGroup) -> G2:
    if data == _IDENTITY_MARKERS[G2]:
        return group.init(G2, 1)
    return deserialize_element(data, group)


_MPK_G1_KEYS = ('g', 'g1_tau', 'g1_w', 'g1_w_tau', 'g1_v', 'g1_h')


def serialize_mpk(mpk: dict, group: PairingGroup) -> dict:
    """Serialize the batch-scheme master public key."""
    result = {
        'B': mpk['B'],
        'g_hat': serialize_g2(mpk['g_hat'], group),
        'g2_tau_powers': [serialize_g2(e, group) for e in mpk['g2_tau_powers']],
        'gt_alpha': serialize_element(mpk['gt_alpha'], group),
    }
    for key in _MPK_G1_KEYS:
        result[key] = serialize_g1(mpk[key], group)
    return result


def deserialize_mpk(data: dict, group: PairingGroup) -> dict:
    result = {
        'B': int(data['B']),
        'g_hat': deserialize_g2(data['g_hat'], group),
        'g2_tau_powers': [deserialize_g2(e, group) for e in data['g2_tau_powers']],
        'gt_alpha': deserialize_element(data['gt_alpha'], group),
    }
    for key in _MPK_G1_KEYS:
        result[key] = deserialize_g1(data[key], group)
    return result


def serialize_msk(msk: dict, group: PairingGroup) -> dict:
    """
    Serialize the master secret key.

    Only allowed in development mode: the master secret never leaves the
    setup authority in a real deployment.
    """
    if not config.dev_mode:
        raise PermissionError("refusing to serialize the master secret key outside DEV_MODE")
    result = {key: serialize_element(value, group) for key, value in msk.items()}
    result['_dev_mode_warning'] = 'DEVELOPMENT MODE: master secret included (INSECURE!)'
    return result


def deserialize_msk(data: dict, group: PairingGroup) -> dict:
    return {key: deserialize_element(value, group)
            for key, value in data.items() if not key.startswith('_')}


def serialize_ciphertext(ct: dict, group: PairingGroup) -> dict:
    """Serialize a batch-scheme ciphertext."""
    return {
        'ct1': serialize_g1(ct['ct1'], group),
        'ct2': serialize_g1(ct['ct2'], group),
        'ct3': serialize_g1(ct['ct3'], group),
        'ct4': serialize_element(ct['ct4'], group),
    }


def deserialize_ciphertext(data: dict, group: PairingGroup) -> dict:
    return {
        'ct1': deserialize_g1(data['ct1'], group),
        'ct2': deserialize_g1(data['ct2'], group),
        'ct3': deserialize_g1(data['ct3'], group),
        'ct4': deserialize_element(data['ct4'], group),
    }


def ciphertext_to_json(ct: dict, group: PairingGroup) -> str:
    return json.dumps(serialize_ciphertext(ct, group))


def ciphertext_from_json(text: str, group: PairingGroup) -> dict:
    return deserialize_ciphertext(json.loads(text), group)
