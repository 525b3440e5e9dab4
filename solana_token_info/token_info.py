"""
Token information retrieval.

Combines the mint account with its optional Metaplex metadata. A failed
mint lookup ends the procedure; a failed metadata lookup only means the
token is shown without metadata.
"""

import asyncio
from typing import Optional

from solana_token_info.logging_config import get_logger
from solana_token_info.models.token import MetadataLookup, TokenInfo
from solana_token_info.solana_client import SolanaClient

logger = get_logger(__name__)


class TokenInfoRetriever:
    """Fetches everything needed to describe a token mint."""

    def __init__(self, client: SolanaClient, network: Optional[str] = None):
        """
        Initialize the retriever.

        Args:
            client: Solana client used for RPC calls
            network: Label of the network being queried
        """
        self.client = client
        self.network = network or client.config.network_label

    async def lookup_metadata(self, address: str) -> MetadataLookup:
        """Look up metadata without letting failures escape.

        Args:
            address: The mint address

        Returns:
            MetadataLookup with status found, not_found or error
        """
        try:
            metadata = await self.client.get_token_metadata(address)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(f"Metadata lookup failed for {address}: {str(e)}")
            return MetadataLookup.error(str(e))

        if metadata is None:
            logger.debug(f"No metadata account for {address}")
            return MetadataLookup.not_found("metadata account does not exist")
        return MetadataLookup.found(metadata)

    async def fetch(self, address: str) -> TokenInfo:
        """Fetch mint and metadata for a token.

        Args:
            address: A validated mint address

        Returns:
            The combined token information

        Raises:
            TokenInfoError: If the mint account cannot be fetched or decoded
        """
        mint = await self.client.get_mint_info(address)
        logger.info(f"Fetched mint {address}: decimals={mint.decimals}, supply={mint.supply}")

        metadata_lookup = await self.lookup_metadata(address)

        return TokenInfo(
            address=address,
            network=self.network,
            mint=mint,
            metadata_lookup=metadata_lookup,
        )
