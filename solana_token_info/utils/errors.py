"""
Error types for the token info tool.

Every failure that can end a lookup is a TokenInfoError carrying an
ErrorCode, so the CLI can report it without knowing where it came from.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes for token lookups."""

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Solana RPC errors
    RPC_ERROR = "RPC_ERROR"
    RPC_TIMEOUT = "RPC_TIMEOUT"
    RPC_CONNECTION_ERROR = "RPC_CONNECTION_ERROR"

    # Data errors
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    INVALID_ACCOUNT_OWNER = "INVALID_ACCOUNT_OWNER"
    DATA_PARSING_ERROR = "DATA_PARSING_ERROR"
    DATA_NOT_FOUND = "DATA_NOT_FOUND"


class TokenInfoError(Exception):
    """Base exception for all token info errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize a new token info error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the error to a dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details
        }


class InvalidPublicKeyError(TokenInfoError):
    """Exception raised when an invalid public key is provided."""

    def __init__(self, pubkey: str):
        super().__init__(
            message=f"Invalid public key: {pubkey}",
            code=ErrorCode.VALIDATION_ERROR,
            details={"pubkey": pubkey}
        )
        self.pubkey = pubkey


class AccountNotFoundError(TokenInfoError):
    """Exception raised when an account does not exist on chain."""

    def __init__(self, address: str, account_type: str = "account"):
        super().__init__(
            message=f"{account_type.capitalize()} not found: {address}",
            code=ErrorCode.DATA_NOT_FOUND,
            details={"address": address, "account_type": account_type}
        )
        self.address = address


class InvalidAccountOwnerError(TokenInfoError):
    """Exception raised when an account is owned by an unexpected program."""

    def __init__(self, address: str, owner: str):
        super().__init__(
            message=f"Account {address} is owned by {owner}, not a token program",
            code=ErrorCode.INVALID_ACCOUNT_OWNER,
            details={"address": address, "owner": owner}
        )


class InvalidAccountDataError(TokenInfoError):
    """Exception raised when account data cannot be decoded as a mint."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_ACCOUNT,
            details=details
        )


class MetadataDecodeError(TokenInfoError):
    """Exception for malformed metadata accounts."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code=ErrorCode.DATA_PARSING_ERROR,
            details=details
        )
