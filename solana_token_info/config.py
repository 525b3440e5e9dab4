"""Configuration module for the token info tool."""

# Standard library imports
import os
import re
from typing import Any, Optional
from dataclasses import dataclass, field
from functools import lru_cache

# Third-party library imports
from dotenv import load_dotenv

# Internal imports
from solana_token_info.constants import (
    DEFAULT_RPC_URL, DEFAULT_TOKEN_ADDRESS, NETWORK_LABELS
)

# Load environment variables from .env file
load_dotenv()


def get_env_var(key: str, default: Any = None, required: bool = False,
               validator: Optional[callable] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ValueError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ValueError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None:
        if required:
            raise ValueError(f"Required environment variable '{key}' not found")
        return default

    if validator:
        try:
            return validator(value)
        except Exception as e:
            raise ValueError(f"Invalid value for environment variable '{key}': {str(e)}")

    return value


def int_validator(value: str) -> int:
    """Validate and convert string to integer.

    Args:
        value: String value to convert

    Returns:
        Integer value

    Raises:
        ValueError: If not a valid integer
    """
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer")


def url_validator(value: str) -> str:
    """Validate URL format.

    Args:
        value: URL to validate

    Returns:
        The validated URL

    Raises:
        ValueError: If not a valid URL format
    """
    url_pattern = re.compile(
        r'^(https?):\/\/'  # http:// or https://
        r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}\.?|[A-Z0-9-]{2,}\.?)|'  # domain
        r'localhost|'  # localhost
        r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # or IPv4
        r'(?::\d+)?'  # optional port
        r'(?:/?|[/?]\S+)$', re.IGNORECASE)

    if not url_pattern.match(value):
        raise ValueError(f"'{value}' is not a valid URL")
    return value


def commitment_validator(value: str) -> str:
    """Validate Solana commitment level.

    Args:
        value: Commitment level to validate

    Returns:
        The validated commitment level

    Raises:
        ValueError: If not a valid commitment level
    """
    valid_commitments = ("processed", "confirmed", "finalized")
    if value.lower() not in valid_commitments:
        raise ValueError(f"Commitment must be one of: {', '.join(valid_commitments)}")
    return value.lower()


def log_level_validator(value: str) -> str:
    """Validate log level.

    Args:
        value: Log level to validate

    Returns:
        The validated log level

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


def infer_network_label(rpc_url: str) -> str:
    """Guess a display label for the cluster behind an RPC URL.

    Args:
        rpc_url: The RPC endpoint URL

    Returns:
        Label such as "Devnet", or "Custom" for unrecognised hosts
    """
    lowered = rpc_url.lower()
    for fragment, label in NETWORK_LABELS.items():
        if fragment in lowered:
            return label
    return "Custom"


@dataclass
class SolanaConfig:
    """Configuration for Solana RPC connection."""

    rpc_url: str = DEFAULT_RPC_URL
    commitment: str = "confirmed"
    timeout: int = 30  # seconds
    network: Optional[str] = None

    @property
    def network_label(self) -> str:
        """Get the label shown next to the queried address.

        Returns:
            The configured network name, or one inferred from the RPC URL
        """
        return self.network or infer_network_label(self.rpc_url)


@lru_cache()
def get_solana_config() -> SolanaConfig:
    """Get Solana configuration from environment variables.

    Uses cached values for efficiency.

    Returns:
        SolanaConfig instance

    Raises:
        ValueError: If environment variables fail validation
    """
    rpc_url = get_env_var("RPC_URL", validator=url_validator)
    if rpc_url is None:
        rpc_url = get_env_var("SOLANA_RPC_URL", DEFAULT_RPC_URL, validator=url_validator)

    return SolanaConfig(
        rpc_url=rpc_url,
        commitment=get_env_var("SOLANA_COMMITMENT", "confirmed",
                              validator=commitment_validator),
        timeout=get_env_var("SOLANA_TIMEOUT", 30, validator=int_validator),
        network=get_env_var("SOLANA_NETWORK")
    )


@dataclass
class AppConfig:
    """Application configuration for the token info CLI."""

    solana: SolanaConfig = field(default_factory=get_solana_config)
    token_address: str = DEFAULT_TOKEN_ADDRESS
    log_level: str = "WARNING"


@lru_cache()
def get_app_config() -> AppConfig:
    """Get the application configuration from environment variables.

    Returns:
        AppConfig instance
    """
    return AppConfig(
        solana=get_solana_config(),
        token_address=get_env_var("TOKEN_ADDRESS", DEFAULT_TOKEN_ADDRESS),
        log_level=get_env_var("LOG_LEVEL", "WARNING", validator=log_level_validator)
    )
