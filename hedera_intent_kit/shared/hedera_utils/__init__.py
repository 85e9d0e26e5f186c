from .decimals_utils import to_base_unit, to_display_unit, to_hbar, to_tinybars

__all__ = ["to_base_unit", "to_display_unit", "to_hbar", "to_tinybars"]
