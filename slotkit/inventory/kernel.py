"""
Inventory kernel - the primitive slot operations.

A backend only has to implement the kernel. Every other inventory
operation lives in InventorySecondary and is written purely in terms
of these primitives, so any backend gets them for free.

Usage:
    @register_backend
    class ListInventory(InventorySecondary):
        backend_name = "list"

        def size(self) -> int: ...
        def add_item(self, slot: int, item: Item) -> bool: ...
        def remove_item(self, slot: int) -> Item: ...
        def next_index_of(self, name: str, pos: int) -> int: ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Optional

from slotkit.inventory.item import Item


# Returned by searches that find nothing
NOT_FOUND = -1


class InventoryKernel(ABC):
    """
    Base class for inventory backends.

    An inventory is a fixed number of slots. Each slot always holds
    exactly one Item; empty slots hold the empty item.
    """

    # Registry name of this backend
    backend_name: ClassVar[str] = ""

    def __init__(self, allowed_names: Optional[Iterable[str]] = None):
        # None = every item is allowed
        self._allowed_names = (
            frozenset(allowed_names) if allowed_names is not None else None
        )

    @classmethod
    def get_backend_name(cls) -> str:
        """Get the backend name used by the registry."""
        return cls.backend_name or cls.__name__

    @abstractmethod
    def size(self) -> int:
        """Get the number of slots."""
        pass

    @abstractmethod
    def add_item(self, slot: int, item: Item) -> bool:
        """
        Place an item into a slot.

        An empty slot takes the item as-is. A slot holding the same kind
        of item absorbs the new item's count. Anything else is refused
        and the caller keeps the item.

        Args:
            slot: Slot index
            item: Item to place

        Returns:
            True if the item was placed or stacked
        """
        pass

    @abstractmethod
    def remove_item(self, slot: int) -> Item:
        """
        Take the item out of a slot, leaving it empty.

        Returns:
            The removed item (the empty item if the slot was empty)
        """
        pass

    @abstractmethod
    def next_index_of(self, name: str, pos: int) -> int:
        """
        Find the first slot at or after pos holding an item called name.

        Returns:
            Slot index, or NOT_FOUND
        """
        pass

    def is_allowed(self, item: Item) -> bool:
        """Check if this inventory accepts this kind of item."""
        if item.is_empty() or self._allowed_names is None:
            return True
        return item.name in self._allowed_names

    def _check_slot(self, slot: int) -> None:
        """Raise if slot is not a valid index."""
        if not 0 <= slot < self.size():
            raise IndexError(
                f"Slot {slot} out of range for {self.__class__.__name__} "
                f"of size {self.size()}"
            )
