"""
Model base class and backend registry.

Items are plain data carried in Pydantic models. Inventories are not
models: they are kernel backends, registered here by name so they can be
built from configuration.

Usage:
    class Item(Model):
        name: str = ""
        tags: dict[str, int] = Field(default_factory=dict)

    @register_backend
    class SlotInventory(InventorySecondary):
        backend_name = "slots"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from slotkit.inventory.kernel import InventoryKernel


class Model(BaseModel):
    """
    Base for values stored in inventory slots.

    Field types are checked on construction and on every attribute
    assignment. Unknown keywords are rejected. clone() shares no
    mutable state with the original.
    """

    model_config = ConfigDict(
        # Item.put_tag reassigns tags to get checked here
        validate_assignment=True,
        extra='forbid',
    )

    def clone(self) -> Model:
        """Copy this value with no shared mutable state."""
        return self.model_copy(deep=True)


# Registry of kernel backends by name
_backend_registry: dict[str, type[InventoryKernel]] = {}


def register_backend(cls: type[InventoryKernel]) -> type[InventoryKernel]:
    """
    Make a backend buildable from InventoryConfig.backend.

    The class is stored under its backend_name (or class name); a later
    registration under the same name replaces the earlier one.
    """
    name = cls.get_backend_name()
    _backend_registry[name] = cls
    return cls


def get_backend_type(name: str) -> type[InventoryKernel] | None:
    """Look up a backend by name, None if nothing is registered under it."""
    return _backend_registry.get(name)


def get_all_backend_types() -> dict[str, type[InventoryKernel]]:
    """Snapshot of the registry; changing it leaves the registry alone."""
    return _backend_registry.copy()
