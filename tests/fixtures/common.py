"""Common test fixtures for token info tests.

This module provides account data builders and an in-memory RPC node that
can be plugged into SolanaClient through an httpx MockTransport.
"""

import base64
import json
import struct
from typing import Dict, List, Optional, Sequence, Tuple

import httpx
import pytest
from solders.pubkey import Pubkey

from solana_token_info.config import SolanaConfig
from solana_token_info.constants import TOKEN_PROGRAM_ID, METADATA_PROGRAM_ID
from solana_token_info.programs.metadata_program import find_metadata_address


def make_address(seed: int) -> str:
    """Deterministic, valid public key for tests."""
    return str(Pubkey.from_bytes(bytes([seed]) * 32))


MINT_ADDRESS = make_address(1)
MINT_AUTHORITY = make_address(2)
FREEZE_AUTHORITY = make_address(3)
UPDATE_AUTHORITY = make_address(4)
CREATOR_A = make_address(5)
CREATOR_B = make_address(6)


def build_mint_data(
    supply: int,
    decimals: int,
    mint_authority: Optional[str] = None,
    freeze_authority: Optional[str] = None,
    is_initialized: bool = True,
) -> bytes:
    """Build raw SPL mint account data."""
    def coption(key: Optional[str]) -> bytes:
        if key is None:
            return struct.pack("<I", 0) + bytes(32)
        return struct.pack("<I", 1) + bytes(Pubkey.from_string(key))

    return (
        coption(mint_authority)
        + struct.pack("<QB?", supply, decimals, is_initialized)
        + coption(freeze_authority)
    )


def _borsh_string(value: str, padded_length: int = 0) -> bytes:
    raw = value.encode("utf-8").ljust(padded_length, b"\x00")
    return struct.pack("<I", len(raw)) + raw


def build_metadata_data(
    mint: str,
    name: str,
    symbol: str,
    uri: str = "",
    seller_fee_basis_points: int = 0,
    creators: Optional[Sequence[Tuple[str, bool, int]]] = None,
    primary_sale_happened: bool = False,
    is_mutable: bool = True,
    key: int = 4,
    pad_strings: bool = True,
) -> bytes:
    """Build raw Metaplex MetadataV1 account data.

    Strings are NUL padded to the on-chain maximums by default, the way the
    metadata program stores them.
    """
    data = struct.pack("<B", key)
    data += bytes(Pubkey.from_string(UPDATE_AUTHORITY))
    data += bytes(Pubkey.from_string(mint))
    data += _borsh_string(name, 32 if pad_strings else 0)
    data += _borsh_string(symbol, 10 if pad_strings else 0)
    data += _borsh_string(uri, 200 if pad_strings else 0)
    data += struct.pack("<H", seller_fee_basis_points)
    if creators is None:
        data += b"\x00"
    else:
        data += b"\x01" + struct.pack("<I", len(creators))
        for address, verified, share in creators:
            data += bytes(Pubkey.from_string(address)) + struct.pack("<?B", verified, share)
    data += struct.pack("<??", primary_sale_happened, is_mutable)
    return data


class FakeSolanaRpc:
    """In-memory JSON-RPC node answering getAccountInfo."""

    def __init__(self):
        self.accounts: Dict[str, Tuple[str, bytes]] = {}
        self.rpc_errors: Dict[str, Dict] = {}
        self.unreachable = False
        self.requests: List[Dict] = []

    def add_account(self, address: str, data: bytes, owner: str = TOKEN_PROGRAM_ID) -> None:
        self.accounts[address] = (owner, data)

    def add_mint(self, address: str = MINT_ADDRESS, **kwargs) -> None:
        self.add_account(address, build_mint_data(**kwargs))

    def add_metadata(self, mint: str = MINT_ADDRESS, **kwargs) -> str:
        metadata_address = find_metadata_address(mint)
        self.add_account(
            metadata_address,
            build_metadata_data(mint, **kwargs),
            owner=METADATA_PROGRAM_ID,
        )
        return metadata_address

    def add_rpc_error(self, address: str, message: str, code: int = -32602) -> None:
        self.rpc_errors[address] = {"code": code, "message": message}

    def requested_addresses(self) -> List[str]:
        return [request["params"][0] for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append(payload)

        if self.unreachable:
            raise httpx.ConnectError("Connection refused", request=request)

        assert payload["method"] == "getAccountInfo"
        address = payload["params"][0]

        if address in self.rpc_errors:
            body = {"jsonrpc": "2.0", "id": payload["id"], "error": self.rpc_errors[address]}
            return httpx.Response(200, json=body)

        value = None
        if address in self.accounts:
            owner, data = self.accounts[address]
            value = {
                "data": [base64.b64encode(data).decode("ascii"), "base64"],
                "executable": False,
                "lamports": 1461600,
                "owner": owner,
                "rentEpoch": 0,
            }

        body = {
            "jsonrpc": "2.0",
            "id": payload["id"],
            "result": {"context": {"slot": 1}, "value": value},
        }
        return httpx.Response(200, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_rpc():
    """Create an empty fake RPC node."""
    return FakeSolanaRpc()


@pytest.fixture
def solana_config():
    """Create a Solana configuration pointing at devnet."""
    return SolanaConfig(rpc_url="https://api.devnet.solana.com", timeout=5)
