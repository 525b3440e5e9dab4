"""Unit tests for public key validation."""

import pytest
from solders.pubkey import Pubkey

from solana_token_info.constants import SYSTEM_PROGRAM_ID, USDC_MINT
from solana_token_info.utils.errors import ErrorCode, InvalidPublicKeyError
from solana_token_info.utils.validation import parse_public_key, validate_public_key


@pytest.mark.parametrize("address", [USDC_MINT, SYSTEM_PROGRAM_ID])
def test_valid_addresses(address):
    assert validate_public_key(address)
    assert parse_public_key(address) == Pubkey.from_string(address)


@pytest.mark.parametrize("address", [
    "",
    "not-a-valid-solana-public-key",
    "0OIl" * 10,  # characters outside the base58 alphabet
    "abc",
    USDC_MINT + "1",
    "1" * 33,  # well-formed base58 but decodes to 33 bytes
])
def test_invalid_addresses(address):
    assert not validate_public_key(address)
    with pytest.raises(InvalidPublicKeyError):
        parse_public_key(address)


def test_non_string_rejected():
    assert not validate_public_key(None)


def test_error_carries_code_and_pubkey():
    with pytest.raises(InvalidPublicKeyError) as exc_info:
        parse_public_key("abc")

    error = exc_info.value
    assert error.code == ErrorCode.VALIDATION_ERROR
    assert error.pubkey == "abc"
    assert error.to_dict()["details"] == {"pubkey": "abc"}
