"""Command-line entry point for the token info tool."""

from solana_token_info.cli import main

if __name__ == "__main__":
    main()
