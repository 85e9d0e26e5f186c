from .ledger_id import LedgerId, ledger_id_from_network

__all__ = ["LedgerId", "ledger_id_from_network"]
