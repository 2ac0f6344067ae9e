"""
Unit tests for primitive field encoding.
Tests word layout per kind, type dispatch and malformed values.
"""

import pytest

from typed_digest.abi import (
    PrimitiveKind,
    UINT256_MAX,
    encode_field,
    encode_uint256,
    encode_bool,
    encode_address,
    encode_string,
    encode_bytes,
    is_elementary_type,
)
from typed_digest.errors import MalformedValue, UnsupportedType

KECCAK_EMPTY = bytes.fromhex("c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470")


class TestPrimitiveKind:
    """Test type string resolution."""

    @pytest.mark.parametrize("type_name,kind", [
        ("uint256", PrimitiveKind.UINT256),
        ("uint", PrimitiveKind.UINT256),
        ("bool", PrimitiveKind.BOOL),
        ("address", PrimitiveKind.ADDRESS),
        ("string", PrimitiveKind.STRING),
        ("bytes", PrimitiveKind.BYTES),
    ])
    def test_supported(self, type_name, kind):
        assert PrimitiveKind.from_type(type_name) is kind

    @pytest.mark.parametrize("type_name", ["uint8", "int256", "bytes32", "address[]", "tuple", "Uint256"])
    def test_unsupported(self, type_name):
        with pytest.raises(UnsupportedType) as exc:
            PrimitiveKind.from_type(type_name)
        assert exc.value.error_code == "UNSUPPORTED_TYPE"
        assert exc.value.type_name == type_name

    @pytest.mark.parametrize("type_name,expected", [
        ("uint8", True),
        ("int", True),
        ("bytes32", True),
        ("bytes33", False),
        ("Person[]", True),
        ("Person", False),
        ("uint7", False),
        ("uint8\n", False),
    ])
    def test_is_elementary_type(self, type_name, expected):
        assert is_elementary_type(type_name) is expected


class TestUint256:
    """Test integer words."""

    @pytest.mark.parametrize("value,expected_hex", [
        ("0", "00" * 32),
        ("1", "00" * 31 + "01"),
        ("255", "00" * 31 + "ff"),
        ("256", "00" * 30 + "0100"),
        (1, "00" * 31 + "01"),
    ])
    def test_small_values(self, value, expected_hex):
        assert encode_uint256(value).hex() == expected_hex

    def test_beyond_32_bits(self):
        """Values past 2**32 keep every byte."""
        word = encode_uint256(str(2 ** 40 + 5))
        assert word == (2 ** 40 + 5).to_bytes(32, "big")

    def test_max_value(self):
        assert encode_uint256(str(UINT256_MAX)) == b"\xff" * 32

    @pytest.mark.parametrize("value", ["-1", "abc", "", "1.5", "0x10", " 1", "5\n", str(2 ** 256), -3, True, None])
    def test_malformed(self, value):
        with pytest.raises(MalformedValue) as exc:
            encode_uint256(value)
        assert exc.value.error_code == "MALFORMED_VALUE"


class TestBool:
    """Test boolean words."""

    def test_true(self):
        word = encode_field("bool", "true")
        assert len(word) == 32
        assert word[-1] == 1
        assert word[:-1] == b"\x00" * 31

    def test_false(self):
        assert encode_field("bool", "false") == b"\x00" * 32

    def test_same_length_both_branches(self):
        assert len(encode_bool("true")) == len(encode_bool("false")) == 32

    @pytest.mark.parametrize("value,last", [(True, 1), (False, 0), ("TRUE", 0), ("1", 0)])
    def test_only_true_sets_flag(self, value, last):
        assert encode_bool(value)[-1] == last


class TestAddress:
    """Test address padding."""

    def test_short_address_is_zero_padded(self):
        assert encode_field("address", "0x1").hex() == "0" * 63 + "1"

    @pytest.mark.parametrize("value", ["x1", "1", "0X1"])
    def test_prefix_variants(self, value):
        assert encode_address(value).hex() == "0" * 63 + "1"

    def test_full_address(self):
        word = encode_address("0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826")
        assert word.hex() == "00" * 12 + "cd2a3d9f938e13cd947ec05abc7fe734df8dd826"

    def test_no_hashing(self):
        """Address words are the literal hex, never a digest."""
        word = encode_address("0x0000000000000000000000000000000000000001")
        assert word == (1).to_bytes(32, "big")

    @pytest.mark.parametrize("value", ["0xzz", "", "0x", "0x1\n", "0x" + "1" * 65, 12])
    def test_malformed(self, value):
        with pytest.raises(MalformedValue):
            encode_address(value)


class TestStringAndBytes:
    """Test dynamic values hashed into one word."""

    def test_empty_string_hash(self):
        assert encode_string("") == KECCAK_EMPTY

    def test_empty_bytes_hash(self):
        assert encode_bytes("0x") == KECCAK_EMPTY

    def test_string_is_utf8_hash(self):
        from typed_digest.hexutil import keccak256

        assert encode_field("string", "héllo") == keccak256("héllo".encode("utf-8"))

    def test_bytes_hashes_decoded_not_text(self):
        from typed_digest.hexutil import keccak256

        assert encode_field("bytes", "0xdeadbeef") == keccak256(b"\xde\xad\xbe\xef")
        assert encode_field("bytes", "deadbeef") == keccak256(b"\xde\xad\xbe\xef")
        assert encode_field("bytes", "0xdeadbeef") != encode_field("string", "0xdeadbeef")

    @pytest.mark.parametrize("value", ["zz", "0xzz", "0x123", 5])
    def test_malformed_bytes(self, value):
        with pytest.raises(MalformedValue):
            encode_field("bytes", value)

    def test_string_requires_text(self):
        with pytest.raises(MalformedValue):
            encode_string(42)


class TestEncodeField:
    """Test dispatch entry point."""

    @pytest.mark.parametrize("type_name,value", [
        ("uint256", "42"),
        ("uint", "42"),
        ("bool", "true"),
        ("address", "0xabc"),
        ("string", "text"),
        ("bytes", "0x00"),
    ])
    def test_always_one_word(self, type_name, value):
        assert len(encode_field(type_name, value)) == 32

    def test_uint_alias(self):
        assert encode_field("uint", "7") == encode_field("uint256", "7")

    def test_unsupported(self):
        with pytest.raises(UnsupportedType):
            encode_field("int256", "1")
