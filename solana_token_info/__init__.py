"""Solana Token Info Package.

This package looks up a Solana token mint and its Metaplex metadata and
prints a human-readable summary.
"""

__version__ = "0.1.0"
__author__ = "Solana Token Info Contributors"
__email__ = "dev@solana-token-info.invalid"
