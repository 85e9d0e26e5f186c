from hedera_intent_kit.shared.plugin import Plugin
from .airdrop_fungible_token import (
    AIRDROP_FUNGIBLE_TOKEN_TOOL,
    AirdropFungibleTokenTool,
)
from .associate_token import ASSOCIATE_TOKEN_TOOL, AssociateTokenTool
from .create_fungible_token import CREATE_FUNGIBLE_TOKEN_TOOL, CreateFungibleTokenTool
from .create_non_fungible_token import (
    CREATE_NON_FUNGIBLE_TOKEN_TOOL,
    CreateNonFungibleTokenTool,
)
from .delete_token import DELETE_TOKEN_TOOL, DeleteTokenTool
from .dissociate_token import DISSOCIATE_TOKEN_TOOL, DissociateTokenTool
from .mint_fungible_token import MINT_FUNGIBLE_TOKEN_TOOL, MintFungibleTokenTool
from .mint_non_fungible_token import (
    MINT_NON_FUNGIBLE_TOKEN_TOOL,
    MintNonFungibleTokenTool,
)
from .update_token import UPDATE_TOKEN_TOOL, UpdateTokenTool

core_token_plugin = Plugin(
    name="core-token-plugin",
    version="1.0.0",
    description="A plugin for the Hedera Token Service",
    tools=lambda context: [
        CreateFungibleTokenTool(context),
        CreateNonFungibleTokenTool(context),
        MintFungibleTokenTool(context),
        MintNonFungibleTokenTool(context),
        AirdropFungibleTokenTool(context),
        AssociateTokenTool(context),
        DissociateTokenTool(context),
        UpdateTokenTool(context),
        DeleteTokenTool(context),
    ],
)

core_token_plugin_tool_names = {
    "CREATE_FUNGIBLE_TOKEN_TOOL": CREATE_FUNGIBLE_TOKEN_TOOL,
    "CREATE_NON_FUNGIBLE_TOKEN_TOOL": CREATE_NON_FUNGIBLE_TOKEN_TOOL,
    "MINT_FUNGIBLE_TOKEN_TOOL": MINT_FUNGIBLE_TOKEN_TOOL,
    "MINT_NON_FUNGIBLE_TOKEN_TOOL": MINT_NON_FUNGIBLE_TOKEN_TOOL,
    "AIRDROP_FUNGIBLE_TOKEN_TOOL": AIRDROP_FUNGIBLE_TOKEN_TOOL,
    "ASSOCIATE_TOKEN_TOOL": ASSOCIATE_TOKEN_TOOL,
    "DISSOCIATE_TOKEN_TOOL": DISSOCIATE_TOKEN_TOOL,
    "UPDATE_TOKEN_TOOL": UPDATE_TOKEN_TOOL,
    "DELETE_TOKEN_TOOL": DELETE_TOKEN_TOOL,
}

__all__ = [
    "core_token_plugin",
    "core_token_plugin_tool_names",
    "AirdropFungibleTokenTool",
    "AssociateTokenTool",
    "CreateFungibleTokenTool",
    "CreateNonFungibleTokenTool",
    "DeleteTokenTool",
    "DissociateTokenTool",
    "MintFungibleTokenTool",
    "MintNonFungibleTokenTool",
    "UpdateTokenTool",
]
