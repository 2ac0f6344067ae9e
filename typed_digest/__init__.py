"""
typed_digest - EIP-712 typed structured data hashing.
Canonical type signatures, struct encoding and the final signable digest.
"""

__version__ = "0.1.0"

from .abi import (
    PrimitiveKind,
    encode_field,
    encode_uint256,
    encode_bool,
    encode_address,
    encode_string,
    encode_bytes,
)
from .eip712 import (
    dependencies,
    encode_type,
    type_hash,
    encode_data,
    hash_struct,
    domain_separator,
    eip712_hash,
    hash_typed_message,
)
from .errors import (
    TypedDataError,
    UnknownType,
    MissingField,
    UnsupportedType,
    MalformedValue,
    DepthLimitExceeded,
    SigningError,
)
from .schemas import FieldDefinition, TypedMessage
from .signing import sign_digest, recover_signer

__all__ = [
    "PrimitiveKind",
    "encode_field",
    "encode_uint256",
    "encode_bool",
    "encode_address",
    "encode_string",
    "encode_bytes",
    "dependencies",
    "encode_type",
    "type_hash",
    "encode_data",
    "hash_struct",
    "domain_separator",
    "eip712_hash",
    "hash_typed_message",
    "TypedDataError",
    "UnknownType",
    "MissingField",
    "UnsupportedType",
    "MalformedValue",
    "DepthLimitExceeded",
    "SigningError",
    "FieldDefinition",
    "TypedMessage",
    "sign_digest",
    "recover_signer",
]
