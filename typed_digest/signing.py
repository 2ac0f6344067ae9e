"""
Sign EIP-712 digests with secp256k1 keys and recover the signer.
"""

import logging
from typing import Dict, Any

from eth_keys import keys
from eth_keys.exceptions import BadSignature, ValidationError
from hexbytes import HexBytes

from .errors import SigningError
from .hexutil import bytes_to_hex

logger = logging.getLogger(__name__)


def sign_digest(secret_key_hex: str, digest: bytes) -> Dict[str, Any]:
    """
    Sign a 32-byte digest.
    
    Returns:
        {"r": 0x-hex, "s": 0x-hex, "v": 27|28, "signer": lowercase address}
    """
    if not secret_key_hex:
        raise SigningError("No private key configured")
    if len(digest) != 32:
        raise SigningError("Digest must be 32 bytes", {"length": len(digest)})

    try:
        sk = keys.PrivateKey(HexBytes(secret_key_hex))
    except (ValueError, ValidationError) as e:
        raise SigningError("Invalid private key") from e

    sig = sk.sign_msg_hash(bytes(digest))
    v = 27 if sig.v in (0, 27) else 28
    signer = sk.public_key.to_checksum_address().lower()
    logger.debug("[SIGN] digest=%s signer=%s", bytes_to_hex(digest), signer)

    return {
        "r": "0x" + sig.r.to_bytes(32, "big").hex(),
        "s": "0x" + sig.s.to_bytes(32, "big").hex(),
        "v": v,
        "signer": signer,
    }


def recover_signer(digest: bytes, r_hex: str, s_hex: str, v_val: int) -> str:
    # Convert v from {27,28} to {0,1} for eth_keys.Signature
    v = 0 if v_val in (0, 27) else 1
    try:
        sig = keys.Signature(vrs=(v, int(r_hex, 16), int(s_hex, 16)))
        pub = sig.recover_public_key_from_msg_hash(bytes(digest))
    except (ValueError, BadSignature, ValidationError) as e:
        raise SigningError("Cannot recover signer", {"reason": str(e)}) from e
    return pub.to_checksum_address().lower()
