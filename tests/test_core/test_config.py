import logging
import pytest
from slotkit.core import InventoryConfig, create_inventory, get_backend_type, get_all_backend_types
from slotkit.inventory import Item, SlotInventory, SparseInventory

def test_config_defaults():
    config = InventoryConfig()
    assert config.size == 1
    assert config.backend == "slots"
    assert config.allowed_names is None
    assert config.max_stack == 0

def test_create_default_inventory():
    inv = create_inventory(InventoryConfig(size=10))
    assert isinstance(inv, SlotInventory)
    assert inv.size() == 10

def test_create_sparse_inventory():
    inv = create_inventory(InventoryConfig(size=50, backend="sparse"))
    assert isinstance(inv, SparseInventory)
    assert inv.size() == 50
    assert inv.occupied_count == 0

def test_create_with_allowed_names():
    inv = create_inventory(InventoryConfig(size=2, allowed_names=["Food"]))
    assert inv.add_item(0, Item(name="Food"))
    assert not inv.add_item(1, Item(name="Gravel"))

def test_create_unknown_backend():
    with pytest.raises(KeyError):
        create_inventory(InventoryConfig(backend="zzyzx"))

def test_create_logs(caplog):
    with caplog.at_level(logging.INFO, logger="slotkit.core.config"):
        create_inventory(InventoryConfig(size=3))
    assert "SlotInventory with 3 slots" in caplog.text

def test_backend_registry():
    assert get_backend_type("slots") is SlotInventory
    assert get_backend_type("sparse") is SparseInventory
    assert get_backend_type("zzyzx") is None

    backends = get_all_backend_types()
    backends.pop("slots")
    # Registry hands out a copy
    assert get_backend_type("slots") is SlotInventory
