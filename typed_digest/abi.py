"""
Restricted ABI encoding for EIP-712 primitive fields.

Every supported primitive encodes to exactly one 32-byte word:
- uint256/uint: big-endian integer, left-padded with zero bytes
- bool: 31 zero bytes followed by 0x01 or 0x00
- address: hex digits left-padded with '0' to 64 chars, then decoded
- string: keccak256 of the UTF-8 bytes
- bytes: keccak256 of the hex-decoded bytes
"""

import re
import logging
from enum import Enum
from typing import Any, Callable, Dict, Union

from .errors import MalformedValue, UnsupportedType
from .hexutil import WORD_SIZE, big_endian_bytes, hex_decode, keccak256, left_pad

logger = logging.getLogger(__name__)

UINT256_MAX = 2 ** 256 - 1

_DECIMAL_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"[0-9a-fA-F]*")

# Solidity elementary type names, used to tell an unsupported primitive
# apart from a misspelled struct name.
_ELEMENTARY_RE = re.compile(
    r"^(u?int(8|16|24|32|40|48|56|64|72|80|88|96|104|112|120|128|136|144|152|160|"
    r"168|176|184|192|200|208|216|224|232|240|248|256)?|bytes([1-9]|[12][0-9]|3[0-2])?|"
    r"address|bool|string|fixed|ufixed|function)$"
)

Value = Union[str, int, bool]


class PrimitiveKind(str, Enum):
    """Primitive field kinds this codec can encode."""
    UINT256 = "uint256"
    BOOL = "bool"
    ADDRESS = "address"
    STRING = "string"
    BYTES = "bytes"

    @classmethod
    def from_type(cls, type_name: str) -> "PrimitiveKind":
        """Resolve a declared type string, raising UnsupportedType for anything else."""
        if type_name == "uint":
            return cls.UINT256
        try:
            return cls(type_name)
        except ValueError:
            raise UnsupportedType(type_name) from None


def is_elementary_type(type_name: str) -> bool:
    """True for Solidity elementary types and arrays of any type, supported or not."""
    if type_name.endswith("]"):
        return True
    return bool(_ELEMENTARY_RE.fullmatch(type_name))


def encode_uint256(value: Value) -> bytes:
    if isinstance(value, bool):
        raise MalformedValue("uint256", value, "boolean is not an integer")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _DECIMAL_RE.fullmatch(value):
        number = int(value, 10)
    else:
        raise MalformedValue("uint256", value, "expected non-negative decimal integer")

    if number < 0:
        raise MalformedValue("uint256", value, "negative")
    if number > UINT256_MAX:
        raise MalformedValue("uint256", value, "exceeds 256 bits")
    return left_pad(big_endian_bytes(number))


def encode_bool(value: Value) -> bytes:
    flag = value is True or value == "true"
    return b"\x00" * (WORD_SIZE - 1) + (b"\x01" if flag else b"\x00")


def encode_address(value: Value) -> bytes:
    """Zero-pad the literal address hex to one word. No checksum or hashing."""
    if not isinstance(value, str):
        raise MalformedValue("address", value, "expected hex string")
    if value[:2] in ("0x", "0X"):
        digits = value[2:]
    elif value[:1] == "x":
        digits = value[1:]
    else:
        digits = value

    if not digits or not _HEX_RE.fullmatch(digits):
        raise MalformedValue("address", value, "invalid hex")
    if len(digits) > WORD_SIZE * 2:
        raise MalformedValue("address", value, "longer than 32 bytes")
    return hex_decode(digits.rjust(WORD_SIZE * 2, "0"))


def encode_string(value: Value) -> bytes:
    if not isinstance(value, str):
        raise MalformedValue("string", value, "expected text")
    return bytes(keccak256(value.encode("utf-8")))


def encode_bytes(value: Value) -> bytes:
    try:
        raw = hex_decode(value)
    except (ValueError, TypeError) as e:
        raise MalformedValue("bytes", value, f"invalid hex ({e})") from e
    return bytes(keccak256(raw))


_ENCODERS: Dict[PrimitiveKind, Callable[[Any], bytes]] = {
    PrimitiveKind.UINT256: encode_uint256,
    PrimitiveKind.BOOL: encode_bool,
    PrimitiveKind.ADDRESS: encode_address,
    PrimitiveKind.STRING: encode_string,
    PrimitiveKind.BYTES: encode_bytes,
}


def encode_field(type_name: str, value: Value) -> bytes:
    """
    Encode one primitive value into its 32-byte ABI slot.
    
    Args:
        type_name: Declared field type (uint256, uint, bool, address, string, bytes)
        value: String representation of the value (native int/bool also accepted)
        
    Returns:
        Exactly 32 bytes
    
    Raises:
        UnsupportedType: type_name is not in the supported primitive set
        MalformedValue: value cannot be parsed as type_name
    """
    kind = PrimitiveKind.from_type(type_name)
    encoded = _ENCODERS[kind](value)
    logger.debug("[ABI] %s %r -> %s", kind.value, value, encoded.hex())
    return encoded
