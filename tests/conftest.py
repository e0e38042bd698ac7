import os
import sys
import pytest

# Ensure slotkit can be imported
sys.path.append(os.getcwd())

from slotkit.inventory import Item, SlotInventory, SparseInventory


@pytest.fixture(params=[SlotInventory, SparseInventory], ids=["slots", "sparse"])
def backend(request):
    """Every kernel backend in turn."""
    return request.param


@pytest.fixture
def make_inventory(backend):
    """
    Factory for inventories of the backend under test.

    make_inventory(10)             -> 10 empty slots
    make_inventory("Foo", "Bar")   -> one named item per slot
    """
    def _make(*args, **kwargs):
        if len(args) == 1 and isinstance(args[0], int):
            return backend(args[0], **kwargs)

        inventory = backend(max(len(args), 1), **kwargs)
        for i, name in enumerate(args):
            inventory.add_item(i, Item(name=name))
        return inventory

    return _make
