from .tx_mode_strategy import (
    ExecuteStrategy,
    ReturnBytesStrategy,
    TxModeStrategy,
    get_strategy_from_context,
    handle_transaction,
)

__all__ = [
    "ExecuteStrategy",
    "ReturnBytesStrategy",
    "TxModeStrategy",
    "get_strategy_from_context",
    "handle_transaction",
]
