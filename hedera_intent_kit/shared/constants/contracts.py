"""EVM factory contract ids and the ABI fragments the EVM tools encode against."""

from typing import Any, Dict, List

from hedera_intent_kit.shared.utils.ledger_id import LedgerId

ERC20_FACTORY_ADDRESSES: Dict[str, str] = {
    LedgerId.TESTNET.value: "0.0.6471814",
}

ERC721_FACTORY_ADDRESSES: Dict[str, str] = {
    LedgerId.TESTNET.value: "0.0.6510666",
}

ERC20_FACTORY_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": "deployToken",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "name_", "type": "string"},
            {"name": "symbol_", "type": "string"},
            {"name": "decimals_", "type": "uint8"},
            {"name": "initialSupply", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "address"}],
    }
]

ERC721_FACTORY_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": "deployToken",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "name_", "type": "string"},
            {"name": "symbol_", "type": "string"},
            {"name": "baseURI_", "type": "string"},
        ],
        "outputs": [{"name": "", "type": "address"}],
    }
]

ERC20_TRANSFER_FUNCTION_NAME = "transfer"
ERC20_TRANSFER_FUNCTION_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": ERC20_TRANSFER_FUNCTION_NAME,
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    }
]

ERC721_TRANSFER_FUNCTION_NAME = "transferFrom"
ERC721_TRANSFER_FUNCTION_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": ERC721_TRANSFER_FUNCTION_NAME,
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
        ],
        "outputs": [],
    }
]

ERC721_MINT_FUNCTION_NAME = "safeMint"
ERC721_MINT_FUNCTION_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": ERC721_MINT_FUNCTION_NAME,
        "stateMutability": "nonpayable",
        "inputs": [{"name": "to", "type": "address"}],
        "outputs": [],
    }
]

FACTORY_FUNCTION_NAME = "deployToken"


def _lookup(addresses: Dict[str, str], ledger_id: LedgerId, kind: str) -> str:
    address = addresses.get(ledger_id.value)
    if address is None:
        raise ValueError(f"Network type {ledger_id.value} not supported for {kind} factory")
    return address


def get_erc20_factory_address(ledger_id: LedgerId) -> str:
    return _lookup(ERC20_FACTORY_ADDRESSES, ledger_id, "ERC20")


def get_erc721_factory_address(ledger_id: LedgerId) -> str:
    return _lookup(ERC721_FACTORY_ADDRESSES, ledger_id, "ERC721")
