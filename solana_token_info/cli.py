"""
Command-line entry point for the token info tool.

Usage:
    token-info [TOKEN_ADDRESS]
    python -m solana_token_info [TOKEN_ADDRESS]
"""

import asyncio
import sys
from dataclasses import replace
from typing import Optional

import click
from colorama import just_fix_windows_console

from solana_token_info.config import SolanaConfig, get_app_config
from solana_token_info.logging_config import configure_logging, get_logger
from solana_token_info.presenter import TokenInfoPresenter
from solana_token_info.solana_client import SolanaClient
from solana_token_info.token_info import TokenInfoRetriever
from solana_token_info.utils.errors import InvalidPublicKeyError, TokenInfoError
from solana_token_info.utils.validation import parse_public_key

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def echo_lines(lines, err: bool = False) -> None:
    for line in lines:
        click.echo(line, err=err)


async def run_token_info(
    token_address: str,
    config: SolanaConfig,
    presenter: TokenInfoPresenter,
    default_address: str,
    as_json: bool = False
) -> int:
    """Validate the address, fetch the token and print it.

    Args:
        token_address: Address given on the command line or the default
        config: Solana configuration
        presenter: Output formatter
        default_address: Address shown in the usage example
        as_json: Print the token as JSON instead of the text report

    Returns:
        Process exit code
    """
    try:
        parse_public_key(token_address)
    except InvalidPublicKeyError:
        logger.debug(f"Rejected token address {token_address!r}")
        echo_lines(presenter.render_invalid_address(default_address), err=True)
        return EXIT_FAILURE

    async with SolanaClient(config) as client:
        retriever = TokenInfoRetriever(client, config.network_label)
        if not as_json:
            echo_lines(presenter.render_header(token_address, retriever.network))
        try:
            info = await retriever.fetch(token_address)
        except TokenInfoError as e:
            logger.info(f"Mint lookup failed for {token_address}: {e.code.value}")
            echo_lines(presenter.render_retrieval_error(e.message, retriever.network), err=True)
            return EXIT_FAILURE
        except Exception as e:
            logger.error(f"Unexpected error fetching {token_address}: {str(e)}", exc_info=True)
            echo_lines(presenter.render_retrieval_error(str(e), retriever.network), err=True)
            return EXIT_FAILURE

    if as_json:
        click.echo(info.model_dump_json(indent=2))
    else:
        echo_lines(presenter.render(info, include_header=False))
    return EXIT_OK


@click.command(name="token-info")
@click.argument("token_address", required=False)
@click.option("--rpc-url", type=str, help="Solana RPC endpoint. Defaults to RPC_URL.")
@click.option("--network", type=str, help="Network label to display. Inferred from the RPC URL by default.")
@click.option("--json", "as_json", is_flag=True, help="Print the token information as JSON.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Log level. Defaults to LOG_LEVEL or WARNING.",
)
def main(
    token_address: Optional[str] = None,
    rpc_url: Optional[str] = None,
    network: Optional[str] = None,
    as_json: bool = False,
    no_color: bool = False,
    log_level: Optional[str] = None,
) -> None:
    """Show supply, authorities and metadata of a token mint."""
    try:
        app_config = get_app_config()
    except ValueError as e:
        raise click.UsageError(str(e))

    configure_logging(log_level or app_config.log_level)
    just_fix_windows_console()

    # Override with CLI options if provided
    solana_config = app_config.solana
    if rpc_url:
        solana_config = replace(solana_config, rpc_url=rpc_url)
    if network:
        solana_config = replace(solana_config, network=network)

    address = (token_address or app_config.token_address).strip()
    presenter = TokenInfoPresenter(color=not no_color)

    exit_code = asyncio.run(run_token_info(
        address,
        solana_config,
        presenter,
        default_address=app_config.token_address,
        as_json=as_json,
    ))
    sys.exit(exit_code)
