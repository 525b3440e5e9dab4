"""Data models for the token info tool."""

from solana_token_info.models.token import (
    Creator,
    MetadataLookup,
    MetadataStatus,
    MintInfo,
    TokenInfo,
    TokenMetadata,
)

__all__ = [
    "Creator",
    "MetadataLookup",
    "MetadataStatus",
    "MintInfo",
    "TokenInfo",
    "TokenMetadata",
]
