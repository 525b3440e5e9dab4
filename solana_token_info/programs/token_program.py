"""
Decoder for SPL Token mint accounts.

Layout (82 bytes, little endian):
    mint_authority   COption<Pubkey>  4 + 32
    supply           u64              8
    decimals         u8               1
    is_initialized   bool             1
    freeze_authority COption<Pubkey>  4 + 32

Token-2022 mints share this prefix and append extensions after it.
"""

import struct
from typing import Optional

from solders.pubkey import Pubkey

from solana_token_info.constants import (
    MINT_ACCOUNT_SIZE, TOKEN_PROGRAM_ID, TOKEN_PROGRAM_IDS
)
from solana_token_info.models.token import MintInfo
from solana_token_info.utils.errors import (
    InvalidAccountDataError, InvalidAccountOwnerError
)

_COPTION_PUBKEY = struct.Struct("<I32s")
_SUPPLY_DECIMALS_INIT = struct.Struct("<QB?")


def _read_coption_pubkey(data: bytes, offset: int) -> Optional[str]:
    tag, key = _COPTION_PUBKEY.unpack_from(data, offset)
    if tag == 0:
        return None
    if tag != 1:
        raise InvalidAccountDataError(
            f"Invalid option tag {tag} at offset {offset}",
            details={"offset": offset}
        )
    return str(Pubkey.from_bytes(key))


def decode_mint(address: str, data: bytes, owner: str = TOKEN_PROGRAM_ID) -> MintInfo:
    """Decode raw mint account data.

    Args:
        address: Address of the mint account
        data: Raw account data
        owner: Program that owns the account

    Returns:
        MintInfo for the account

    Raises:
        InvalidAccountOwnerError: If the owner is not a token program
        InvalidAccountDataError: If the data is not a valid, initialized mint
    """
    if owner not in TOKEN_PROGRAM_IDS:
        raise InvalidAccountOwnerError(address, owner)

    if len(data) < MINT_ACCOUNT_SIZE:
        raise InvalidAccountDataError(
            f"Account {address} is {len(data)} bytes, too small for a mint",
            details={"address": address, "size": len(data)}
        )
    if owner == TOKEN_PROGRAM_ID and len(data) != MINT_ACCOUNT_SIZE:
        raise InvalidAccountDataError(
            f"Account {address} is {len(data)} bytes, not a mint account",
            details={"address": address, "size": len(data)}
        )

    offset = 0
    mint_authority = _read_coption_pubkey(data, offset)
    offset += _COPTION_PUBKEY.size

    supply, decimals, is_initialized = _SUPPLY_DECIMALS_INIT.unpack_from(data, offset)
    offset += _SUPPLY_DECIMALS_INIT.size

    freeze_authority = _read_coption_pubkey(data, offset)

    if not is_initialized:
        raise InvalidAccountDataError(
            f"Mint {address} is not initialized",
            details={"address": address}
        )

    return MintInfo(
        address=address,
        decimals=decimals,
        supply=supply,
        mint_authority=mint_authority,
        freeze_authority=freeze_authority,
        is_initialized=is_initialized,
        program_id=owner,
    )
