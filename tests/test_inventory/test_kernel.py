import pytest
from slotkit.inventory import Item, NOT_FOUND

# Constructor / size

def test_default_size(backend):
    inv = backend()
    assert inv.size() == 1
    assert len(inv) == 1
    assert inv.is_allowed(Item())

def test_size_ten(make_inventory):
    inv = make_inventory(10)
    assert inv.size() == 10
    assert inv == make_inventory(10)

def test_size_filled(make_inventory):
    inv = make_inventory("Foo", "Bar", "Lorem")
    assert inv.size() == 3
    assert inv == make_inventory("Foo", "Bar", "Lorem")

def test_size_must_be_positive(backend):
    with pytest.raises(ValueError):
        backend(0)

# add_item

def test_add_empty_item(make_inventory):
    inv = make_inventory(10)
    assert inv.add_item(1, Item())

    for i in range(10):
        assert inv.remove_item(i) == Item()

def test_add_named_item(make_inventory):
    inv = make_inventory(10)
    assert inv.add_item(1, Item(name="Foo"))

    for i in range(10):
        expected = Item(name="Foo") if i == 1 else Item()
        assert inv.remove_item(i) == expected

def test_add_item_keeps_tags(make_inventory):
    inv = make_inventory(10)
    inv.add_item(1, Item(name="Foo", count=2, tags={"TEST": 0}))

    removed = inv.remove_item(1)
    assert removed == Item(name="Foo", tags={"TEST": 0})
    assert removed.count == 2

def test_add_multiple(make_inventory):
    inv = make_inventory(10)
    inv.add_item(1, Item(name="Foo"))
    inv.add_item(8, Item(name="Bar"))

    assert inv.get_item(1).name == "Foo"
    assert inv.get_item(8).name == "Bar"
    assert inv.next_index_of("", 0) == 0

def test_add_stacks_matching_items(make_inventory):
    inv = make_inventory(10)
    inv.add_item(1, Item(name="Foo", count=2, tags={"TEST": 0}))
    assert inv.add_item(1, Item(name="Foo", count=1, tags={"TEST": 0}))

    stacked = inv.get_item(1)
    assert stacked.count == 3
    assert stacked.tag_value("TEST") == 0

    for i in range(10):
        if i != 1:
            assert inv.get_item(i).is_empty()

def test_add_refuses_other_item(make_inventory):
    inv = make_inventory("Foo")
    bar = Item(name="Bar", count=4)

    assert not inv.add_item(0, bar)
    assert inv.get_item(0).name == "Foo"
    assert inv.get_item(0).count == 1
    # Caller still owns the refused item
    assert bar.count == 4

def test_add_refuses_same_name_other_tags(make_inventory):
    inv = make_inventory(1)
    inv.add_item(0, Item(name="Foo", tags={"TEST": 0}))
    assert not inv.add_item(0, Item(name="Foo", tags={"TEST": 1}))
    assert inv.get_item(0).count == 1

def test_add_empty_onto_occupied_is_refused(make_inventory):
    inv = make_inventory("Foo")
    assert not inv.add_item(0, Item())
    assert inv.is_at(0, "Foo")

def test_add_has_no_stack_bound(make_inventory):
    inv = make_inventory(1)
    inv.add_item(0, Item(name="Foo", count=1000))
    inv.add_item(0, Item(name="Foo", count=1000))
    assert inv.get_item(0).count == 2000

def test_add_out_of_range(make_inventory):
    inv = make_inventory(3)
    with pytest.raises(IndexError):
        inv.add_item(3, Item(name="Foo"))
    with pytest.raises(IndexError):
        inv.add_item(-1, Item(name="Foo"))

# remove_item

def test_remove_empty(make_inventory):
    inv = make_inventory()
    removed = inv.remove_item(0)
    assert removed == Item()
    assert inv == make_inventory()

def test_remove_named(make_inventory):
    inv = make_inventory("Foo", "Bar")
    removed = inv.remove_item(1)
    assert removed == Item(name="Bar")
    assert inv == make_inventory("Foo", "")

def test_remove_with_tags(make_inventory):
    inv = make_inventory()
    inv.add_item(0, Item(name="Foo", count=2, tags={"TEST": 0}))

    removed = inv.remove_item(0)
    assert removed == Item(name="Foo", tags={"TEST": 0})
    assert removed.count == 2
    assert inv == make_inventory()

def test_remove_then_add_round_trip(make_inventory):
    inv = make_inventory("Foo", "", "Bar")
    inv.add_item(0, Item(name="Foo", count=4))
    before = str(inv)

    for i in range(inv.size()):
        inv.add_item(i, inv.remove_item(i))

    assert str(inv) == before

def test_remove_out_of_range(make_inventory):
    with pytest.raises(IndexError):
        make_inventory(2).remove_item(2)

# next_index_of

def test_next_index_of_at_zero(make_inventory):
    inv = make_inventory("Foo")
    assert inv.next_index_of("Foo", 0) == 0
    assert inv == make_inventory("Foo")

def test_next_index_of_found(make_inventory):
    inv = make_inventory("Foo", "Bar", "Lorem")
    assert inv.next_index_of("Bar", 0) == 1

def test_next_index_of_not_found(make_inventory):
    inv = make_inventory("Foo", "Bar", "Lorem")
    assert inv.next_index_of("Zzyzx", 0) == NOT_FOUND

def test_next_index_of_from_middle(make_inventory):
    inv = make_inventory("Foo", "Bar", "Lorem", "Bar")
    half = inv.size() // 2

    assert inv.next_index_of("Bar", half) == 3
    assert inv.next_index_of("Foo", half) == NOT_FOUND
    assert inv.next_index_of("Zzyzx", half) == NOT_FOUND

def test_next_index_of_never_before_pos(make_inventory):
    inv = make_inventory("Foo", "Foo", "Bar", "Foo")
    for pos in range(inv.size() + 1):
        found = inv.next_index_of("Foo", pos)
        assert found == NOT_FOUND or found >= pos

    assert inv.next_index_of("Foo", inv.size()) == NOT_FOUND

def test_next_index_of_empty_slots(make_inventory):
    inv = make_inventory("Foo", "", "Bar")
    assert inv.next_index_of("", 0) == 1

# is_allowed

def test_allowed_names_restrict_items(backend):
    inv = backend(2, allowed_names=["Food"])

    assert inv.is_allowed(Item(name="Food"))
    assert inv.is_allowed(Item())
    assert not inv.is_allowed(Item(name="Gravel"))

    assert not inv.add_item(0, Item(name="Gravel"))
    assert inv.get_item(0).is_empty()
    assert inv.add_item(0, Item(name="Food"))
