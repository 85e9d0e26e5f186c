from hedera_intent_kit.shared.plugin import Plugin
from .create_erc20 import CREATE_ERC20_TOOL, CreateERC20Tool
from .create_erc721 import CREATE_ERC721_TOOL, CreateERC721Tool
from .mint_erc721 import MINT_ERC721_TOOL, MintERC721Tool
from .transfer_erc20 import TRANSFER_ERC20_TOOL, TransferERC20Tool
from .transfer_erc721 import TRANSFER_ERC721_TOOL, TransferERC721Tool

core_evm_plugin = Plugin(
    name="core-evm-plugin",
    version="1.0.0",
    description="A plugin for ERC20 and ERC721 contracts on Hedera",
    tools=lambda context: [
        CreateERC20Tool(context),
        TransferERC20Tool(context),
        CreateERC721Tool(context),
        TransferERC721Tool(context),
        MintERC721Tool(context),
    ],
)

core_evm_plugin_tool_names = {
    "CREATE_ERC20_TOOL": CREATE_ERC20_TOOL,
    "TRANSFER_ERC20_TOOL": TRANSFER_ERC20_TOOL,
    "CREATE_ERC721_TOOL": CREATE_ERC721_TOOL,
    "TRANSFER_ERC721_TOOL": TRANSFER_ERC721_TOOL,
    "MINT_ERC721_TOOL": MINT_ERC721_TOOL,
}

__all__ = [
    "core_evm_plugin",
    "core_evm_plugin_tool_names",
    "CreateERC20Tool",
    "CreateERC721Tool",
    "MintERC721Tool",
    "TransferERC20Tool",
    "TransferERC721Tool",
]
