from hedera_intent_kit.shared.plugin import Plugin
from .approve_hbar_allowance import (
    APPROVE_HBAR_ALLOWANCE_TOOL,
    ApproveHbarAllowanceTool,
)
from .create_account import CREATE_ACCOUNT_TOOL, CreateAccountTool
from .delete_account import DELETE_ACCOUNT_TOOL, DeleteAccountTool
from .schedule_delete import SCHEDULE_DELETE_TOOL, ScheduleDeleteTool
from .sign_schedule_transaction import (
    SIGN_SCHEDULE_TRANSACTION_TOOL,
    SignScheduleTransactionTool,
)
from .transfer_hbar import TRANSFER_HBAR_TOOL, TransferHbarTool
from .transfer_hbar_with_allowance import (
    TRANSFER_HBAR_WITH_ALLOWANCE_TOOL,
    TransferHbarWithAllowanceTool,
)
from .update_account import UPDATE_ACCOUNT_TOOL, UpdateAccountTool

core_account_plugin = Plugin(
    name="core-account-plugin",
    version="1.0.0",
    description="A plugin for the Hedera Account Service",
    tools=lambda context: [
        TransferHbarTool(context),
        TransferHbarWithAllowanceTool(context),
        CreateAccountTool(context),
        UpdateAccountTool(context),
        DeleteAccountTool(context),
        ApproveHbarAllowanceTool(context),
        SignScheduleTransactionTool(context),
        ScheduleDeleteTool(context),
    ],
)

core_account_plugin_tool_names = {
    "TRANSFER_HBAR_TOOL": TRANSFER_HBAR_TOOL,
    "TRANSFER_HBAR_WITH_ALLOWANCE_TOOL": TRANSFER_HBAR_WITH_ALLOWANCE_TOOL,
    "CREATE_ACCOUNT_TOOL": CREATE_ACCOUNT_TOOL,
    "UPDATE_ACCOUNT_TOOL": UPDATE_ACCOUNT_TOOL,
    "DELETE_ACCOUNT_TOOL": DELETE_ACCOUNT_TOOL,
    "APPROVE_HBAR_ALLOWANCE_TOOL": APPROVE_HBAR_ALLOWANCE_TOOL,
    "SIGN_SCHEDULE_TRANSACTION_TOOL": SIGN_SCHEDULE_TRANSACTION_TOOL,
    "SCHEDULE_DELETE_TOOL": SCHEDULE_DELETE_TOOL,
}

__all__ = [
    "core_account_plugin",
    "core_account_plugin_tool_names",
    "ApproveHbarAllowanceTool",
    "CreateAccountTool",
    "DeleteAccountTool",
    "ScheduleDeleteTool",
    "SignScheduleTransactionTool",
    "TransferHbarTool",
    "TransferHbarWithAllowanceTool",
    "UpdateAccountTool",
]
