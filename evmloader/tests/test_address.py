import pytest

from evmloader.address import Address, chain_id_bytes, treasury_index_bytes
from evmloader.errors import MalformedInputError, PdaError


class TestAddress:
    def test_from_hex_mixed_case(self):
        a = Address.from_hex("0x5f0155d08eF4aaE2B500AefB64A3419dA8bB611a")
        assert len(a) == 20
        assert str(a) == "0x5f0155d08ef4aae2b500aefb64a3419da8bb611a"

    def test_from_hex_without_prefix(self):
        a = Address.from_hex("5f0155d08eF4aaE2B500AefB64A3419dA8bB611a")
        assert a == Address.from_hex("0X5F0155D08EF4AAE2B500AEFB64A3419DA8BB611A")

    def test_wrong_width(self):
        with pytest.raises(MalformedInputError, match="20 bytes, got 19"):
            Address(bytes(19))

    def test_bad_hex(self):
        with pytest.raises(MalformedInputError):
            Address.from_hex("0xzz")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Address(b"")
        assert issubclass(MalformedInputError, PdaError)

    def test_repr(self):
        assert repr(Address(bytes(20))) == "Address(0x" + "00" * 20 + ")"


def test_chain_id_bytes():
    assert chain_id_bytes(245022934) == (245022934).to_bytes(32, "big")
    assert chain_id_bytes(1)[-1] == 1
    with pytest.raises(MalformedInputError):
        chain_id_bytes(-1)


def test_treasury_index_bytes():
    assert treasury_index_bytes(0) == b"\x00\x00\x00\x00"
    assert treasury_index_bytes(0x01020304) == b"\x04\x03\x02\x01"
    with pytest.raises(MalformedInputError):
        treasury_index_bytes(1 << 32)
