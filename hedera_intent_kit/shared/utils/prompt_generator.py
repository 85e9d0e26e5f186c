from .account_resolver import AccountResolver
from ..configuration import AgentMode, Context


class PromptGenerator:
    """
    Builds the shared pieces of tool descriptions: execution context, default
    account wording and the scheduling parameter summary.
    """

    @staticmethod
    def get_context_snippet(context: Context) -> str:
        lines = ["Context:"]
        if context.mode == AgentMode.RETURN_BYTES:
            lines.append("- Mode: Return Bytes (transactions are returned unsigned)")
        else:
            lines.append("- Mode: Autonomous (transactions are signed and submitted)")
        if context.account_id:
            lines.append(f"- User Account: {context.account_id}")
        lines.append(
            f"- Default account: {AccountResolver.get_default_account_description(context)}"
        )
        return "\n".join(lines)

    @staticmethod
    def get_account_parameter_description(
        param_name: str, context: Context, is_required: bool = False
    ) -> str:
        if is_required:
            return f"{param_name} (str, required): The Hedera account ID"

        default_desc = AccountResolver.get_default_account_description(context)
        return f"{param_name} (str, optional): The Hedera account ID. Defaults to the {default_desc}"

    @staticmethod
    def get_any_address_parameter_description(
        param_name: str, context: Context, is_required: bool = False
    ) -> str:
        if is_required:
            return f"{param_name} (str, required): A Hedera account ID or an EVM address"

        default_desc = AccountResolver.get_default_account_description(context)
        return f"{param_name} (str, optional): A Hedera account ID or an EVM address. Defaults to the {default_desc}"

    @staticmethod
    def get_scheduled_transaction_params_description(context: Context) -> str:
        default_desc = AccountResolver.get_default_account_description(context)
        return (
            "scheduling_params (object, optional): create a scheduled transaction instead "
            "of executing immediately. Fields: is_scheduled (bool), admin_key "
            "(true for your key, or a public key string), payer_account_id "
            f"(defaults to the {default_desc}), expiration_time (ISO 8601), "
            "wait_for_expiry (bool), schedule_memo (str)."
        )
