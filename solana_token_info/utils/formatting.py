"""Number formatting helpers for token amounts.

Raw on-chain amounts are integers scaled by 10**decimals. Everything here
works on Decimal so that scaling and rounding are exact.
"""

from decimal import Decimal, ROUND_HALF_UP

from solana_token_info.constants import MAX_SUPPLY_FRACTION_DIGITS


def scale_amount(raw_amount: int, decimals: int) -> Decimal:
    """Convert a raw integer amount into token units.

    Args:
        raw_amount: Unscaled amount as stored on chain
        decimals: Number of decimals of the mint

    Returns:
        The exact scaled amount
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return Decimal(raw_amount).scaleb(-decimals)


def format_token_amount(
    raw_amount: int,
    decimals: int,
    max_fraction_digits: int = MAX_SUPPLY_FRACTION_DIGITS
) -> str:
    """Format a raw amount the way an en-US locale would display it.

    Fraction digits are capped at min(decimals, max_fraction_digits),
    rounded half-up, and trailing zeros are dropped.

    Args:
        raw_amount: Unscaled amount as stored on chain
        decimals: Number of decimals of the mint
        max_fraction_digits: Upper bound on displayed fraction digits

    Returns:
        Formatted amount, e.g. "1,234.5"
    """
    fraction_digits = min(decimals, max_fraction_digits)
    amount = scale_amount(raw_amount, decimals).quantize(
        Decimal(1).scaleb(-fraction_digits), rounding=ROUND_HALF_UP
    )

    text = f"{amount:,.{fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_share(share: int) -> str:
    """Format a creator share as a percentage."""
    return f"{share}%"


def format_basis_points(basis_points: int) -> str:
    """Format basis points as a percentage, e.g. 250 -> "2.5%"."""
    percent = Decimal(basis_points).scaleb(-2)
    text = f"{percent:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text}%"
