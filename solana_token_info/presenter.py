"""
Terminal rendering of token information.

Every render method returns a list of lines; printing is left to the
caller. Colors come from colorama and can be switched off.
"""

from typing import List

from colorama import Fore, Style

from solana_token_info.models.token import (
    MetadataLookup, MetadataStatus, MintInfo, TokenInfo, TokenMetadata
)
from solana_token_info.utils.formatting import format_basis_points, format_share

TROUBLESHOOTING_TIPS = (
    "- Check if the token address is correct",
    "- Make sure you are connected to the internet",
    "- The token might not exist on {network}",
)


class TokenInfoPresenter:
    """Formats token information and failures for the terminal."""

    def __init__(self, color: bool = True):
        self.color = color

    def paint(self, text: str, *styles: str) -> str:
        """Wrap text in ANSI styles when color is enabled."""
        if not self.color or not styles:
            return text
        return f"{''.join(styles)}{text}{Style.RESET_ALL}"

    def header(self, title: str, style: str = Fore.GREEN) -> List[str]:
        return ["", self.paint(f"=== {title} ===", style)]

    def render_header(self, address: str, network: str) -> List[str]:
        return [
            self.paint(f"Checking token: {address}", Fore.CYAN),
            self.paint(f"Network: {network}", Fore.CYAN),
        ]

    def render(self, info: TokenInfo, include_header: bool = True) -> List[str]:
        """Render a successful lookup.

        Args:
            info: The combined token information
            include_header: Start with the queried address and network

        Returns:
            Output lines in display order
        """
        lines = self.render_header(info.address, info.network) if include_header else []
        lines.extend(self.header("Token Information"))

        metadata = info.metadata
        if metadata is not None:
            lines.append(f"Token: {self.paint(f'{metadata.name} ({metadata.symbol})', Style.BRIGHT)}")
        else:
            lines.append(
                f"Token: {self.paint(info.address, Fore.YELLOW)} "
                f"{self.paint('(no metadata)', Style.DIM)}"
            )

        lines.extend(self.render_mint(info.mint))

        if metadata is not None:
            lines.extend(self.render_metadata(metadata))
        else:
            lines.extend(self.render_missing_metadata(info.metadata_lookup))
        return lines

    def render_mint(self, mint: MintInfo) -> List[str]:
        lines = [
            f"Mint Address: {self.paint(mint.address, Fore.YELLOW)}",
            f"Decimals: {self.paint(str(mint.decimals), Fore.YELLOW)}",
            f"Supply: {self.paint(mint.formatted_supply, Fore.YELLOW)}",
        ]

        if mint.mint_authority is not None:
            lines.append(f"Mint Authority: {self.paint(mint.mint_authority, Fore.YELLOW)}")
        else:
            lines.append(f"Mint Authority: {self.paint('None (fixed supply)', Fore.GREEN)}")

        if mint.freeze_authority is not None:
            lines.append(f"Freeze Authority: {self.paint(mint.freeze_authority, Fore.YELLOW)}")
        else:
            lines.append(f"Freeze Authority: {self.paint('None', Fore.GREEN)}")
        return lines

    def render_metadata(self, metadata: TokenMetadata) -> List[str]:
        lines = self.header("Token Metadata")
        lines.append(f"Name: {self.paint(metadata.name, Style.BRIGHT)}")
        lines.append(f"Symbol: {self.paint(metadata.symbol, Style.BRIGHT)}")
        if metadata.uri:
            lines.append(f"Metadata URI: {self.paint(metadata.uri, Fore.BLUE)}")
        lines.append(f"Seller Fee: {format_basis_points(metadata.seller_fee_basis_points)}")

        if metadata.has_creators:
            lines.extend(self.header("Creators"))
            for index, creator in enumerate(metadata.creators, 1):
                line = (
                    f"Creator {index}: {self.paint(creator.address, Fore.YELLOW)} "
                    f"(Share: {format_share(creator.share)})"
                )
                if creator.verified:
                    line += f" {self.paint('[verified]', Fore.GREEN)}"
                lines.append(line)
        return lines

    def render_missing_metadata(self, lookup: MetadataLookup) -> List[str]:
        lines = self.header("Token Metadata", Fore.YELLOW)
        lines.append(self.paint("No metadata found for this token.", Style.DIM))
        if lookup.status == MetadataStatus.ERROR:
            lines.append(self.paint(f"Metadata lookup failed: {lookup.reason}", Style.DIM))
        lines.append(self.paint(
            "To add metadata, you need to create a token with Metaplex metadata support.",
            Style.DIM
        ))
        return lines

    def render_invalid_address(self, default_address: str) -> List[str]:
        """Render the usage message for a malformed address."""
        return [
            self.paint("Invalid token address format", Fore.RED),
            self.paint("Usage: token-info [TOKEN_ADDRESS]", Fore.YELLOW),
            self.paint(f"Example: token-info {default_address}", Fore.YELLOW),
        ]

    def render_retrieval_error(self, message: str, network: str) -> List[str]:
        """Render a failed mint lookup with troubleshooting hints."""
        lines = [f"{self.paint('Error getting token information:', Fore.RED)} {message}"]
        lines.extend(["", self.paint("Tips:", Fore.YELLOW)])
        lines.extend(tip.format(network=network) for tip in TROUBLESHOOTING_TIPS)
        return lines
