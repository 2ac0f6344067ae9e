"""
EIP-712 typed structured data hashing.

Pipeline, leaves first:
- dependencies: struct types reachable from a primary type, discovery order
- encode_type / type_hash: canonical type signature and its keccak
- encode_data / hash_struct: type hash followed by one 32-byte word per field
- eip712_hash: keccak(0x19 0x01 || domainSeparator || hashStruct(message))
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterator, List, Set, Tuple, Union

from .abi import encode_field, is_elementary_type
from .config import settings
from .errors import DepthLimitExceeded, MalformedValue, MissingField, UnknownType
from .hexutil import bytes_to_hex, keccak256
from .schemas import TypedMessage

logger = logging.getLogger(__name__)

DOMAIN_TYPE = "EIP712Domain"
EIP191_PREFIX = b"\x19\x01"

TypeSet = Mapping


def _field_pair(type_name: str, field: Any) -> Tuple[str, str]:
    if isinstance(field, Mapping):
        name, field_type = field.get("name"), field.get("type")
    else:
        name, field_type = getattr(field, "name", None), getattr(field, "type", None)
    if not isinstance(name, str) or not isinstance(field_type, str):
        raise MalformedValue(type_name, field, "field definition needs string name and type")
    return name, field_type


def _fields(type_name: str, types: TypeSet) -> Iterator[Tuple[str, str]]:
    """(name, type) pairs of a struct in declaration order."""
    for field in types[type_name]:
        yield _field_pair(type_name, field)


def dependencies(primary_type: str, types: TypeSet) -> List[str]:
    """
    Find every struct type reachable from primary_type.
    
    Depth-first, in first-discovery order, primary_type first. Primitive names
    are never included; cyclic references are visited once.
    """
    seen: Set[str] = set()
    order: List[str] = []

    def visit(type_name: str) -> None:
        if type_name in seen or type_name not in types:
            return
        seen.add(type_name)
        order.append(type_name)
        for _, field_type in _fields(type_name, types):
            visit(field_type)

    visit(primary_type)
    return order


def encode_type(primary_type: str, types: TypeSet) -> bytes:
    """
    Canonical type signature, e.g. b"Mail(Person from,Person to,string contents)Person(string name,address wallet)".
    
    Primary type first, remaining dependencies sorted by name, fields in
    declaration order.
    """
    if primary_type not in types:
        raise UnknownType(primary_type)

    deps = dependencies(primary_type, types)
    ordered = [primary_type] + sorted(deps[1:])

    result = ""
    for type_name in ordered:
        members = []
        for name, field_type in _fields(type_name, types):
            if field_type not in types and not is_elementary_type(field_type):
                raise UnknownType(field_type, {"referenced_by": type_name})
            members.append(f"{field_type} {name}")
        result += f"{type_name}({','.join(members)})"

    logger.debug("[EIP712] encodeType(%s) = %s", primary_type, result)
    return result.encode("utf-8")


def type_hash(primary_type: str, types: TypeSet) -> bytes:
    """keccak256 of the canonical type signature."""
    return keccak256(encode_type(primary_type, types))


def _encode_data(primary_type: str, data: Any, types: TypeSet, depth: int) -> bytes:
    if depth > settings.MAX_STRUCT_DEPTH:
        raise DepthLimitExceeded(primary_type, settings.MAX_STRUCT_DEPTH)
    if primary_type not in types:
        raise UnknownType(primary_type)
    if not isinstance(data, Mapping):
        raise MalformedValue(primary_type, data, "expected an object")

    encoded = bytes(type_hash(primary_type, types))
    for name, field_type in _fields(primary_type, types):
        if name not in data:
            raise MissingField(primary_type, name)
        value = data[name]

        if field_type in types:
            encoded += bytes(keccak256(_encode_data(field_type, value, types, depth + 1)))
        elif is_elementary_type(field_type):
            encoded += encode_field(field_type, value)
        else:
            raise UnknownType(field_type, {"referenced_by": primary_type})

    return encoded


def encode_data(primary_type: str, data: Mapping, types: TypeSet) -> bytes:
    """
    Encode a struct value as typeHash || word(field_1) || ... || word(field_n).
    
    Nested structs contribute keccak256 of their own encoding; primitives
    contribute their ABI word. Output is always 32 * (1 + field count) bytes.
    
    Raises:
        UnknownType: a field type is neither a defined struct nor a primitive
        MissingField: data lacks a declared field
        UnsupportedType: a primitive outside the supported set
        MalformedValue: a value does not parse as its declared type
        DepthLimitExceeded: nesting deeper than MAX_STRUCT_DEPTH
    """
    return _encode_data(primary_type, data, types, 1)


def hash_struct(primary_type: str, data: Mapping, types: TypeSet) -> bytes:
    """keccak256(encode_data(...))."""
    digest = keccak256(encode_data(primary_type, data, types))
    logger.debug("[EIP712] hashStruct(%s) = %s", primary_type, bytes_to_hex(digest))
    return digest


def domain_separator(domain: Mapping, types: TypeSet) -> bytes:
    """hashStruct of the EIP712Domain value."""
    if DOMAIN_TYPE not in types:
        raise UnknownType(DOMAIN_TYPE)
    return hash_struct(DOMAIN_TYPE, domain, types)


def eip712_hash(primary_type: str, message: Mapping, types: TypeSet, domain: Mapping) -> bytes:
    """
    Final signable digest (EIP-191 version 0x01 envelope).
    
    Args:
        primary_type: Struct type of message
        message: Message value
        types: Type definitions, must include EIP712Domain
        domain: Domain value
        
    Returns:
        32-byte digest
    """
    parts = EIP191_PREFIX
    parts += bytes(domain_separator(domain, types))
    parts += bytes(hash_struct(primary_type, message, types))
    digest = keccak256(parts)
    logger.debug("[EIP712] digest(%s) = %s", primary_type, bytes_to_hex(digest))
    return digest


def hash_typed_message(typed: Union[TypedMessage, Mapping]) -> bytes:
    """eip712_hash over a full signing request document."""
    if not isinstance(typed, TypedMessage):
        typed = TypedMessage.parse(typed)
    return eip712_hash(typed.primary_type, typed.message, typed.types, typed.domain)
