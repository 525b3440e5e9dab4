"""
Token data models for the token info tool.

This module defines Pydantic models for the mint account, its Metaplex
metadata and the combined record that gets printed.
"""

from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from solana_token_info.utils.formatting import format_token_amount, scale_amount


class Creator(BaseModel):
    """
    A creator entry from token metadata.
    """
    address: str
    verified: bool = False
    share: int = Field(ge=0, le=100)


class TokenMetadata(BaseModel):
    """
    Model for Metaplex token metadata.

    Strings are stored without the NUL padding used on chain; an empty
    URI is represented as None.
    """
    mint: str
    update_authority: str
    name: str
    symbol: str
    uri: Optional[str] = None
    seller_fee_basis_points: int = 0
    creators: Optional[List[Creator]] = None
    primary_sale_happened: bool = False
    is_mutable: bool = True

    @property
    def has_creators(self) -> bool:
        """Whether the creator list is present and non-empty."""
        return bool(self.creators)


class MintInfo(BaseModel):
    """
    Model for an SPL token mint account.
    """
    address: str
    decimals: int = Field(ge=0, le=255)
    supply: int = Field(ge=0, description="Raw, unscaled supply")
    mint_authority: Optional[str] = None
    freeze_authority: Optional[str] = None
    is_initialized: bool = True
    program_id: Optional[str] = None

    @property
    def ui_supply(self) -> Decimal:
        """Get the supply in token units."""
        return scale_amount(self.supply, self.decimals)

    @property
    def formatted_supply(self) -> str:
        """Get the supply formatted for display."""
        return format_token_amount(self.supply, self.decimals)

    @property
    def has_fixed_supply(self) -> bool:
        """A mint without a mint authority can never grow its supply."""
        return self.mint_authority is None


class MetadataStatus(str, Enum):
    """Outcome of a best-effort metadata lookup."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class MetadataLookup(BaseModel):
    """
    Result of looking up metadata for a mint.

    NOT_FOUND means the metadata account does not exist. ERROR means the
    lookup itself failed and ``reason`` says why.
    """
    status: MetadataStatus
    metadata: Optional[TokenMetadata] = None
    reason: Optional[str] = None

    @classmethod
    def found(cls, metadata: TokenMetadata) -> "MetadataLookup":
        return cls(status=MetadataStatus.FOUND, metadata=metadata)

    @classmethod
    def not_found(cls, reason: Optional[str] = None) -> "MetadataLookup":
        return cls(status=MetadataStatus.NOT_FOUND, reason=reason)

    @classmethod
    def error(cls, reason: str) -> "MetadataLookup":
        return cls(status=MetadataStatus.ERROR, reason=reason)

    @property
    def is_found(self) -> bool:
        return self.status == MetadataStatus.FOUND and self.metadata is not None


class TokenInfo(BaseModel):
    """
    Everything gathered about a token in one invocation.
    """
    address: str
    network: str
    mint: MintInfo
    metadata_lookup: MetadataLookup

    @property
    def metadata(self) -> Optional[TokenMetadata]:
        """Get the metadata if the lookup found any."""
        return self.metadata_lookup.metadata if self.metadata_lookup.is_found else None
