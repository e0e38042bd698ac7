"""
Inventory module - items and slot inventories.

Provides:
- Item model with integer tags
- Kernel interface and shared secondary operations
- Dense and sparse backends
"""

from slotkit.inventory.item import Item, COUNT, EMPTY_NAME
from slotkit.inventory.kernel import InventoryKernel, NOT_FOUND
from slotkit.inventory.secondary import InventorySecondary
from slotkit.inventory.backends import SlotInventory, SparseInventory

# Default backend
Inventory = SlotInventory

__all__ = [
    "Item",
    "COUNT",
    "EMPTY_NAME",
    "InventoryKernel",
    "InventorySecondary",
    "NOT_FOUND",
    "Inventory",
    "SlotInventory",
    "SparseInventory",
]
