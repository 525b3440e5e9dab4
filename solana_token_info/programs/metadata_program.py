"""
Decoder for Metaplex Token Metadata accounts.

The metadata account for a mint lives at the program derived address
seeded with ``[b"metadata", program_id, mint]``. Its data is Borsh encoded:

    key                       u8 (4 = MetadataV1)
    update_authority          Pubkey
    mint                      Pubkey
    name                      String (u32 length + utf-8, NUL padded)
    symbol                    String
    uri                       String
    seller_fee_basis_points   u16
    creators                  Option<Vec<Creator>>
    primary_sale_happened     bool
    is_mutable                bool

Fields after ``is_mutable`` (edition nonce, collection, uses, ...) are not
needed for display and are ignored.
"""

import struct
from typing import List, Optional, Tuple

from solders.pubkey import Pubkey

from solana_token_info.constants import METADATA_PROGRAM_ID, PUBKEY_LENGTH
from solana_token_info.logging_config import get_logger
from solana_token_info.models.token import Creator, TokenMetadata
from solana_token_info.utils.errors import MetadataDecodeError

logger = get_logger(__name__)

METADATA_V1_KEY = 4
METADATA_SEED = b"metadata"


def find_metadata_address(mint: str) -> str:
    """Derive the metadata PDA for a mint.

    Args:
        mint: The mint address

    Returns:
        Base58 address of the metadata account
    """
    program_id = Pubkey.from_string(METADATA_PROGRAM_ID)
    seeds = [METADATA_SEED, bytes(program_id), bytes(Pubkey.from_string(mint))]
    metadata_pda, _ = Pubkey.find_program_address(seeds, program_id)
    return str(metadata_pda)


class _BorshReader:
    """Sequential reader over Borsh encoded bytes."""

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def _take(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            raise MetadataDecodeError(
                f"Unexpected end of metadata at offset {self.offset} "
                f"(need {size} bytes, have {len(self.data) - self.offset})",
                details={"offset": self.offset}
            )
        chunk = self.data[self.offset:end]
        self.offset = end
        return chunk

    def remaining(self) -> int:
        return len(self.data) - self.offset

    def u8(self) -> int:
        return self._take(1)[0]

    def u16(self) -> int:
        return struct.unpack("<H", self._take(2))[0]

    def u32(self) -> int:
        return struct.unpack("<I", self._take(4))[0]

    def bool(self) -> bool:
        return self.u8() != 0

    def pubkey(self) -> str:
        return str(Pubkey.from_bytes(self._take(PUBKEY_LENGTH)))

    def string(self) -> str:
        length = self.u32()
        raw = self._take(length)
        try:
            return raw.decode("utf-8").rstrip("\x00")
        except UnicodeDecodeError as e:
            raise MetadataDecodeError(f"Metadata string is not valid utf-8: {e}")


def _read_creators(reader: _BorshReader) -> Optional[List[Creator]]:
    if reader.u8() == 0:
        return None
    count = reader.u32()
    creators = []
    for _ in range(count):
        address = reader.pubkey()
        verified = reader.bool()
        share = reader.u8()
        creators.append(Creator(address=address, verified=verified, share=share))
    return creators


def _read_trailing_flags(reader: _BorshReader) -> Tuple[bool, bool]:
    # Older accounts may be truncated right after the creators
    if reader.remaining() < 2:
        return False, True
    return reader.bool(), reader.bool()


def decode_metadata(data: bytes) -> TokenMetadata:
    """Decode raw metadata account data.

    Args:
        data: Raw account data

    Returns:
        TokenMetadata decoded from the account

    Raises:
        MetadataDecodeError: If the data is not a MetadataV1 account
    """
    reader = _BorshReader(data)

    key = reader.u8()
    if key != METADATA_V1_KEY:
        raise MetadataDecodeError(
            f"Unexpected metadata account key {key}",
            details={"key": key}
        )

    update_authority = reader.pubkey()
    mint = reader.pubkey()
    name = reader.string()
    symbol = reader.string()
    uri = reader.string()
    seller_fee_basis_points = reader.u16()
    creators = _read_creators(reader)
    primary_sale_happened, is_mutable = _read_trailing_flags(reader)

    metadata = TokenMetadata(
        mint=mint,
        update_authority=update_authority,
        name=name,
        symbol=symbol,
        uri=uri or None,
        seller_fee_basis_points=seller_fee_basis_points,
        creators=creators,
        primary_sale_happened=primary_sale_happened,
        is_mutable=is_mutable,
    )
    logger.debug(f"Decoded metadata for {mint}: {name} ({symbol})")
    return metadata
