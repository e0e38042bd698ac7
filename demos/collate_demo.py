"""
Collate Demo: moving matching items between inventories

Demonstrates:
- Building inventories from configuration
- Filling slots with randomly sized stacks
- Transferring every "Gravel" stack into a single slot
- Placement search with a stack limit

Run: python -m demos.collate_demo
"""

import logging
import random

from slotkit import InventoryConfig, Item, NOT_FOUND, create_inventory


def show(title: str, inventory) -> None:
    """Print each slot as name : count."""
    print(title)
    for i in range(inventory.size()):
        item = inventory.get_item(i)
        print(f"  {i}: {item.name or '-'} : {item.count}")
    print()


def main():
    """Run the collate demo."""
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("CollateDemo")

    config = InventoryConfig(size=10, max_stack=20)
    source = create_inventory(config)
    sink = create_inventory(InventoryConfig(size=1, backend="sparse"))

    # Alternate names, random counts
    for i in range(source.size()):
        name = "Food" if i % 2 == 0 else "Gravel"
        source.add_item(i, Item(name=name, count=random.randint(1, 10)))

    show("Items in Inventory 1:", source)

    # Send only Gravel to the second inventory
    moved = 0
    for i in range(source.size()):
        if source.is_at(i, "Gravel") and sink.transfer_item(source, i, 0):
            moved += 1
    logger.info(f"Moved {moved} Gravel stacks")

    show("Gravel sent to Inventory 2:", sink)
    show("Items in Inventory 1:", source)

    # Where would another stack of food go?
    food = Item(name="Food", count=5)
    slot = source.next_placement(food, config.max_stack)
    if slot == NOT_FOUND:
        logger.info("No room for more Food")
    else:
        source.add_item(slot, food)
        logger.info(f"Placed {food.count} Food in slot {slot}")
        show("After placing Food:", source)


if __name__ == "__main__":
    main()
