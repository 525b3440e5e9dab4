"""Validation utilities for Solana addresses.

An address is valid when it base58-decodes to exactly 32 bytes.
"""

import re

from solders.pubkey import Pubkey

from solana_token_info.utils.errors import InvalidPublicKeyError

# Solana public key validation pattern (base58 format)
PUBKEY_PATTERN = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")


def parse_public_key(pubkey: str) -> Pubkey:
    """Decode a base58 public key.

    Args:
        pubkey: The public key string

    Returns:
        The decoded Pubkey

    Raises:
        InvalidPublicKeyError: If the string is not a valid public key
    """
    if not pubkey or not isinstance(pubkey, str) or not PUBKEY_PATTERN.match(pubkey):
        raise InvalidPublicKeyError(str(pubkey))
    try:
        return Pubkey.from_string(pubkey)
    except ValueError:
        raise InvalidPublicKeyError(pubkey)


def validate_public_key(pubkey: str) -> bool:
    """Validate a Solana public key.

    Args:
        pubkey: The public key to validate

    Returns:
        True if the public key is valid, False otherwise
    """
    try:
        parse_public_key(pubkey)
    except InvalidPublicKeyError:
        return False
    return True
