"""Constants used throughout the token info tool.

Program IDs and well-known mints are kept as base58 strings so they can be
compared directly against RPC responses.
"""

# Solana program IDs
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
TOKEN_2022_PROGRAM_ID = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"

# Programs whose accounts use the SPL mint layout
TOKEN_PROGRAM_IDS = (TOKEN_PROGRAM_ID, TOKEN_2022_PROGRAM_ID)

# Common token mint addresses
USDC_DEVNET_MINT = "4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"

DEFAULT_RPC_URL = "https://api.devnet.solana.com"
DEFAULT_TOKEN_ADDRESS = USDC_DEVNET_MINT

# Account sizes in bytes
MINT_ACCOUNT_SIZE = 82
PUBKEY_LENGTH = 32

# Display label for each public cluster, keyed by a fragment of the RPC URL
NETWORK_LABELS = {
    "devnet": "Devnet",
    "testnet": "Testnet",
    "mainnet": "Mainnet",
    "localhost": "Localnet",
    "127.0.0.1": "Localnet",
}

# Supply display never shows more fraction digits than this
MAX_SUPPLY_FRACTION_DIGITS = 6
