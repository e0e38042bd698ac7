"""
Secondary inventory operations.

Everything here is built from the kernel primitives only (size,
add_item, remove_item, next_index_of, is_allowed). Reads go through
get_item, which removes and re-adds, so no operation needs to know how
a backend stores its slots.
"""

from __future__ import annotations

import logging

from slotkit.inventory.item import COUNT, EMPTY_NAME, Item
from slotkit.inventory.kernel import NOT_FOUND, InventoryKernel


logger = logging.getLogger(__name__)


class InventorySecondary(InventoryKernel):
    """
    Derived operations shared by all backends.

    Subclass this (not InventoryKernel) and implement the kernel
    methods to get a complete inventory.
    """

    # Inventories are mutable aggregates, never dict keys
    __hash__ = None

    def get_item(self, slot: int) -> Item:
        """
        Look at the item in a slot without taking it out.

        An occupied slot hands back the stored stack itself, so tag
        changes on it stay in the slot. For an empty slot, backends may
        hand back a throwaway empty item (SparseInventory does), so put
        items into empty slots with add_item rather than by editing the
        returned item.

        Returns:
            The item occupying the slot
        """
        self._check_slot(slot)
        removed = self.remove_item(slot)
        self.add_item(slot, removed)
        return removed

    def is_at(self, slot: int, name: str) -> bool:
        """Check if the item in a slot is called name."""
        return self.get_item(slot).name == name

    def swap_items(self, slot1: int, slot2: int) -> None:
        """Exchange the contents of two slots."""
        self._check_slot(slot1)
        self._check_slot(slot2)

        # Both slots are emptied first so matching items don't merge
        removed1 = self.remove_item(slot1)
        removed2 = self.remove_item(slot2)

        self.add_item(slot1, removed2)
        self.add_item(slot2, removed1)

    def swap_items_with(
        self,
        src: InventoryKernel,
        src_slot: int,
        dest_slot: int,
    ) -> bool:
        """
        Exchange a slot of another inventory with a slot of this one.

        Args:
            src: Other inventory
            src_slot: Slot in src
            dest_slot: Slot in this inventory

        Returns:
            False if either inventory does not allow the incoming item,
            in which case nothing moves
        """
        src._check_slot(src_slot)
        self._check_slot(dest_slot)

        src_removed = src.remove_item(src_slot)
        dest_removed = self.remove_item(dest_slot)

        if not (src.is_allowed(dest_removed) and self.is_allowed(src_removed)):
            src.add_item(src_slot, src_removed)
            self.add_item(dest_slot, dest_removed)
            logger.debug(
                f"Swap refused: '{src_removed.name}' <-> '{dest_removed.name}'"
            )
            return False

        src.add_item(src_slot, dest_removed)
        self.add_item(dest_slot, src_removed)
        return True

    def transfer_item(
        self,
        src: InventoryKernel,
        src_slot: int,
        dest_slot: int,
    ) -> bool:
        """
        Move the item in a slot of src into a slot of this inventory.

        If the destination refuses the item it goes back to src_slot.

        Returns:
            True if the item was placed or stacked
        """
        src._check_slot(src_slot)
        self._check_slot(dest_slot)

        removed = src.remove_item(src_slot)
        placed = self.add_item(dest_slot, removed)

        if not placed:
            src.add_item(src_slot, removed)
            logger.debug(
                f"Transfer of '{removed.name}' into slot {dest_slot} refused"
            )

        return placed

    def split_item(
        self,
        src: InventorySecondary,
        src_slot: int,
        dest_slot: int,
        count: int,
    ) -> None:
        """
        Move part of a stack in src into an empty slot of this inventory.

        Args:
            src: Inventory holding the stack
            src_slot: Slot of the stack
            dest_slot: Empty slot to receive the new stack
            count: Units to move, 0 to the full stack size

        Raises:
            ValueError: If count is out of range, the destination is not
                empty or does not allow the item
        """
        self._check_slot(dest_slot)
        source = src.get_item(src_slot)

        if not 0 <= count <= source.count:
            raise ValueError(
                f"Cannot split {count} from a stack of {source.count}"
            )
        if not self.get_item(dest_slot).is_empty():
            raise ValueError(f"Split destination slot {dest_slot} is not empty")

        if count == 0:
            return

        if not self.is_allowed(source):
            raise ValueError(f"'{source.name}' is not allowed in this inventory")

        old_stack = src.remove_item(src_slot)
        new_stack = old_stack.clone()
        new_stack.put_tag(COUNT, count)

        remaining = old_stack.count - count
        if remaining > 0:
            old_stack.put_tag(COUNT, remaining)
            src.add_item(src_slot, old_stack)

        self.add_item(dest_slot, new_stack)
        logger.debug(
            f"Split {count} '{new_stack.name}' off slot {src_slot}, "
            f"{remaining} left"
        )

    def copy_item(
        self,
        src: InventorySecondary,
        name: str,
        dest_slot: int,
    ) -> bool:
        """
        Duplicate the first item called name in src into a slot.

        The copy goes through add_item, so it stacks with a matching item
        already in dest_slot.

        Returns:
            True if the copy was placed or stacked

        Raises:
            KeyError: If src has no item called name
        """
        self._check_slot(dest_slot)

        pos = src.next_index_of(name, 0)
        if pos == NOT_FOUND:
            raise KeyError(f"No item named '{name}' to copy")

        return self.add_item(dest_slot, src.get_item(pos).clone())

    def next_placement(self, item: Item, max_stack: int = 0) -> int:
        """
        Find where an item could be added.

        Existing stacks of the same kind are tried first, in slot order.
        Same kind means equal to item: the name and every tag except
        count must match, since add_item refuses to stack anything else.
        A same-name stack with different tags is skipped like a full one.
        A stack takes the item if max_stack <= 0 (unbounded) or the
        combined count stays within max_stack. Otherwise the first empty
        slot is used.

        Args:
            item: Item to place
            max_stack: Largest allowed stack, 0 or less = unbounded

        Returns:
            Slot index, or NOT_FOUND if there is no room
        """
        if not self.is_allowed(item):
            return NOT_FOUND

        pos = self.next_index_of(item.name, 0)
        while pos != NOT_FOUND:
            stack = self.get_item(pos)
            if stack == item and (
                max_stack <= 0 or stack.count + item.count <= max_stack
            ):
                return pos
            pos = self.next_index_of(item.name, pos + 1)

        return self.next_index_of(EMPTY_NAME, 0)

    def use_item(self, slot: int) -> str:
        """
        Consume one unit of the stack in a slot.

        Returns:
            Name of the consumed item

        Raises:
            ValueError: If the slot is empty or its stack holds no units
        """
        stack = self.get_item(slot)
        if stack.is_empty():
            raise ValueError(f"Cannot use empty slot {slot}")
        if stack.count < 1:
            raise ValueError(
                f"Cannot use '{stack.name}' in slot {slot}: count is {stack.count}"
            )

        removed = self.remove_item(slot)
        remaining = removed.count - 1

        if remaining > 0:
            removed.put_tag(COUNT, remaining)
            self.add_item(slot, removed)
        else:
            logger.debug(f"Used up '{removed.name}' in slot {slot}")

        return removed.name

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InventorySecondary):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(
            self.get_item(i) == other.get_item(i) for i in range(self.size())
        )

    def __str__(self) -> str:
        items = "; ".join(str(self.get_item(i)) for i in range(self.size()))
        return f"{{ {items} }}"
