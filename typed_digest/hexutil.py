"""
Byte helpers shared by the encoders: keccak, hex and big-endian conversions.
"""

from eth_utils import keccak, decode_hex, encode_hex, int_to_big_endian
from hexbytes import HexBytes

WORD_SIZE = 32


def keccak256(data: bytes) -> HexBytes:
    """Keccak-256 digest of raw bytes."""
    return HexBytes(keccak(primitive=bytes(data)))


def hex_decode(value: str) -> bytes:
    """Decode a hex string with optional 0x prefix. Raises ValueError on bad input."""
    if not isinstance(value, str):
        raise ValueError(f"expected hex string, got {type(value).__name__}")
    return decode_hex(value)


def bytes_to_hex(data: bytes) -> str:
    """0x-prefixed lowercase hex."""
    return encode_hex(bytes(data))


def big_endian_bytes(n: int) -> bytes:
    """Minimal big-endian representation of a non-negative integer."""
    return int_to_big_endian(n)


def left_pad(data: bytes, size: int = WORD_SIZE) -> bytes:
    return data.rjust(size, b"\x00")
