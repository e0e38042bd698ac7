"""
Kernel backends.

SlotInventory keeps one Item per slot in a list. SparseInventory only
stores slots that hold something and hands out fresh empty items for
the rest. Both get every secondary operation from InventorySecondary.
"""

from __future__ import annotations

from typing import Iterable, Optional

from slotkit.core.model import register_backend
from slotkit.inventory.item import COUNT, EMPTY_NAME, Item
from slotkit.inventory.kernel import NOT_FOUND
from slotkit.inventory.secondary import InventorySecondary


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"Inventory size must be at least 1, got {size}")


@register_backend
class SlotInventory(InventorySecondary):
    """
    Dense inventory.

    Attributes:
        slots: One Item per slot (empty item = free slot)
    """

    backend_name = "slots"

    def __init__(self, size: int = 1, allowed_names: Optional[Iterable[str]] = None):
        super().__init__(allowed_names)
        _check_size(size)
        self.slots: list[Item] = [Item() for _ in range(size)]

    def size(self) -> int:
        return len(self.slots)

    def add_item(self, slot: int, item: Item) -> bool:
        self._check_slot(slot)
        if not self.is_allowed(item):
            return False

        dest = self.slots[slot]
        if dest.is_empty():
            self.slots[slot] = item
        elif dest == item:
            dest.put_tag(COUNT, dest.count + item.count)
        else:
            return False

        return True

    def remove_item(self, slot: int) -> Item:
        self._check_slot(slot)
        removed = self.slots[slot]
        self.slots[slot] = Item()
        return removed

    def next_index_of(self, name: str, pos: int) -> int:
        if pos < 0:
            raise IndexError(f"Search position {pos} is negative")

        for i in range(pos, len(self.slots)):
            if self.slots[i].name == name:
                return i
        return NOT_FOUND


@register_backend
class SparseInventory(InventorySecondary):
    """
    Inventory that only stores occupied slots.

    Suited to large inventories that are mostly empty. Empty slots are
    not stored, so removing or peeking at one yields a new empty item
    each time.
    """

    backend_name = "sparse"

    def __init__(self, size: int = 1, allowed_names: Optional[Iterable[str]] = None):
        super().__init__(allowed_names)
        _check_size(size)
        self._size = size
        self._occupied: dict[int, Item] = {}

    @property
    def occupied_count(self) -> int:
        """Number of slots actually stored."""
        return len(self._occupied)

    def size(self) -> int:
        return self._size

    def add_item(self, slot: int, item: Item) -> bool:
        self._check_slot(slot)
        if not self.is_allowed(item):
            return False

        dest = self._occupied.get(slot)
        if dest is None or dest.is_empty():
            if _is_blank(item):
                self._occupied.pop(slot, None)
            else:
                self._occupied[slot] = item
        elif dest == item:
            dest.put_tag(COUNT, dest.count + item.count)
        else:
            return False

        return True

    def remove_item(self, slot: int) -> Item:
        self._check_slot(slot)
        removed = self._occupied.pop(slot, None)
        return removed if removed is not None else Item()

    def next_index_of(self, name: str, pos: int) -> int:
        if pos < 0:
            raise IndexError(f"Search position {pos} is negative")

        for i in range(pos, self._size):
            occupant = self._occupied.get(i)
            if (occupant.name if occupant is not None else EMPTY_NAME) == name:
                return i
        return NOT_FOUND


def _is_blank(item: Item) -> bool:
    """Check if item is indistinguishable from a fresh empty item."""
    return item.is_empty() and item.tags == {COUNT: 0}
