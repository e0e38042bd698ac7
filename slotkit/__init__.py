"""
slotkit

Fixed-size slot inventories holding stackable, taggable items.

Quick Start:
    from slotkit import Inventory, Item

    bag = Inventory(10)
    bag.add_item(1, Item(name="Foo", count=2))
    bag.add_item(1, Item(name="Foo"))
    bag.get_item(1).count  # 3
"""

__version__ = "0.1.0"
__author__ = "Developer"

from slotkit.core import (
    Model,
    InventoryConfig,
    create_inventory,
    register_backend,
    get_backend_type,
)
from slotkit.inventory import (
    Item,
    COUNT,
    EMPTY_NAME,
    NOT_FOUND,
    Inventory,
    InventoryKernel,
    InventorySecondary,
    SlotInventory,
    SparseInventory,
)

__all__ = [
    # Core
    "Model",
    "InventoryConfig",
    "create_inventory",
    "register_backend",
    "get_backend_type",
    # Items
    "Item",
    "COUNT",
    "EMPTY_NAME",
    # Inventories
    "NOT_FOUND",
    "Inventory",
    "InventoryKernel",
    "InventorySecondary",
    "SlotInventory",
    "SparseInventory",
]
