"""Async Solana JSON-RPC client for token lookups."""

# Standard library imports
import base64
import binascii
import json
from typing import Any, Dict, List, Optional

# Third-party library imports
import httpx

# Internal imports
from solana_token_info.config import SolanaConfig, get_solana_config
from solana_token_info.logging_config import get_logger
from solana_token_info.models.token import MintInfo, TokenMetadata
from solana_token_info.programs.metadata_program import decode_metadata, find_metadata_address
from solana_token_info.programs.token_program import decode_mint
from solana_token_info.utils.errors import (
    AccountNotFoundError, ErrorCode, InvalidAccountDataError,
    InvalidPublicKeyError, TokenInfoError
)
from solana_token_info.utils.validation import validate_public_key

# Get logger
logger = get_logger(__name__)


class SolanaRpcError(TokenInfoError):
    """Exception raised when a Solana RPC request fails."""

    def __init__(
        self,
        message: str,
        error_data: Optional[Dict[str, Any]] = None,
        code: ErrorCode = ErrorCode.RPC_ERROR
    ):
        """Initialize the exception.

        Args:
            message: Error message
            error_data: Optional error data from the RPC response
            code: Error code describing the failure
        """
        super().__init__(message, code=code, details=error_data)
        self.error_data = error_data or {}


class SolanaClient:
    """Client for reading token accounts from a Solana RPC node."""

    def __init__(
        self,
        config: SolanaConfig = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the Solana client.

        Args:
            config: Solana configuration. Defaults to environment-based config.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config or get_solana_config()
        self.headers = {"Content-Type": "application/json"}
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None
        self._request_id = 0

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.config.timeout,
                transport=self._transport
            )
        return self._http_client

    async def _make_request(self, method: str, params: List[Any] = None) -> Any:
        """Make a JSON-RPC request to the Solana node.

        Requests are sent once; failures are not retried.

        Args:
            method: The RPC method to call
            params: The parameters to pass to the method

        Returns:
            The ``result`` member of the JSON-RPC response

        Raises:
            SolanaRpcError: If the request fails or the node returns an error
        """
        if params is None:
            params = []

        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params
        }
        logger.debug(f"RPC request: method={method}, params={json.dumps(params)}")

        try:
            response = await self._get_http_client().post(
                self.config.rpc_url,
                headers=self.headers,
                json=payload
            )
            response.raise_for_status()
            result = response.json()
        except httpx.TimeoutException as e:
            raise SolanaRpcError(
                f"Request to {self.config.rpc_url} timed out",
                {"method": method}, code=ErrorCode.RPC_TIMEOUT
            ) from e
        except httpx.HTTPStatusError as e:
            raise SolanaRpcError(
                f"HTTP {e.response.status_code} from {self.config.rpc_url}",
                {"method": method, "status_code": e.response.status_code}
            ) from e
        except httpx.RequestError as e:
            raise SolanaRpcError(
                f"Could not reach {self.config.rpc_url}: {str(e) or type(e).__name__}",
                {"method": method}, code=ErrorCode.RPC_CONNECTION_ERROR
            ) from e
        except json.JSONDecodeError as e:
            raise SolanaRpcError(
                f"Invalid JSON in response to {method}: {e}",
                {"method": method}
            ) from e

        if "error" in result:
            error = result["error"]
            message = f"Solana RPC error: {error.get('message', 'Unknown error')}"
            if "data" in error:
                message += f" - {json.dumps(error['data'])}"
            raise SolanaRpcError(message, error)

        if "result" not in result:
            raise SolanaRpcError(f"Malformed RPC response to {method}", {"response": result})

        return result["result"]

    async def get_account_info(self, account: str, encoding: str = "base64") -> Optional[Dict[str, Any]]:
        """Get account information.

        Args:
            account: The account public key
            encoding: The encoding for the account data

        Returns:
            The account ``value`` object, or None if the account does not exist

        Raises:
            InvalidPublicKeyError: If the account is not a valid Solana public key
            SolanaRpcError: If the RPC call fails
        """
        if not validate_public_key(account):
            raise InvalidPublicKeyError(account)

        result = await self._make_request(
            "getAccountInfo",
            [account, {"encoding": encoding, "commitment": self.config.commitment}]
        )
        if not isinstance(result, dict):
            raise SolanaRpcError(f"Unexpected getAccountInfo result for {account}", {"result": result})
        return result.get("value")

    async def _get_account_data(self, account: str) -> Optional[Dict[str, Any]]:
        value = await self.get_account_info(account, encoding="base64")
        if value is None:
            return None

        try:
            data_base64 = value["data"][0]
            data = base64.b64decode(data_base64)
        except (KeyError, IndexError, TypeError, binascii.Error) as e:
            raise InvalidAccountDataError(
                f"Could not decode data of account {account}: {e}",
                details={"address": account}
            ) from e

        return {"owner": value.get("owner"), "data": data}

    async def get_mint_info(self, mint: str) -> MintInfo:
        """Get and decode a token mint account.

        Args:
            mint: The mint address

        Returns:
            The decoded mint

        Raises:
            InvalidPublicKeyError: If the mint address is invalid
            AccountNotFoundError: If no account exists at the address
            InvalidAccountOwnerError: If the account is not owned by a token program
            InvalidAccountDataError: If the account is not a mint
            SolanaRpcError: If the RPC call fails
        """
        logger.debug(f"Fetching mint account {mint}")
        account = await self._get_account_data(mint)
        if account is None:
            raise AccountNotFoundError(mint, account_type="mint account")
        return decode_mint(mint, account["data"], owner=account["owner"])

    async def get_token_metadata(self, mint: str) -> Optional[TokenMetadata]:
        """Get the Metaplex metadata for a mint.

        Args:
            mint: The mint address

        Returns:
            The decoded metadata, or None if the mint has no metadata account

        Raises:
            InvalidPublicKeyError: If the mint address is invalid
            MetadataDecodeError: If the metadata account is malformed
            SolanaRpcError: If the RPC call fails
        """
        if not validate_public_key(mint):
            raise InvalidPublicKeyError(mint)

        metadata_pda = find_metadata_address(mint)
        logger.debug(f"Calculated metadata PDA for {mint}: {metadata_pda}")

        account = await self._get_account_data(metadata_pda)
        if account is None:
            logger.debug(f"Metaplex metadata account not found for PDA {metadata_pda}")
            return None
        return decode_metadata(account["data"])

    async def __aenter__(self):
        """Async context manager entry.

        Returns:
            Self
        """
        self._get_http_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit.

        Args:
            exc_type: Exception type if an exception was raised
            exc_val: Exception value if an exception was raised
            exc_tb: Exception traceback if an exception was raised
        """
        await self.close()

    async def close(self):
        """Close the client and release resources."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
