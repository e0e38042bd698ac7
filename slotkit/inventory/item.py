"""
Item model - a named stack with integer tags.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from slotkit.core.model import Model


# Mandatory tag holding the stack size
COUNT = "count"

# Name of the item occupying an empty slot
EMPTY_NAME = ""


class Item(Model):
    """
    A stack of items in a slot.

    Two items are the same kind of item when their names and all tags
    other than count match. Count is the stack size and never takes part
    in equality.

    Attributes:
        name: Item identifier (EMPTY_NAME = no item)
        tags: Integer properties, always including count

    Usage:
        empty = Item()
        foo = Item(name="Foo")                 # count 1
        rocks = Item(name="Gravel", count=7)
        sword = Item(name="Sword", tags={"damage": 4})
    """
    name: str = EMPTY_NAME
    tags: dict[str, int] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _fill_count(cls, data: Any) -> Any:
        """Fold the count keyword into tags and default it if missing."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        tags = dict(data.get("tags") or {})
        if COUNT in data:
            tags[COUNT] = data.pop(COUNT)
        elif COUNT not in tags:
            # Named items start as a single unit, the empty item holds none
            tags[COUNT] = 0 if data.get("name", EMPTY_NAME) == EMPTY_NAME else 1
        data["tags"] = tags
        return data

    @property
    def count(self) -> int:
        """Stack size."""
        return self.tags[COUNT]

    def is_empty(self) -> bool:
        """Check if this is the empty item."""
        return self.name == EMPTY_NAME

    def has_tag(self, tag: str) -> bool:
        """Check if a tag is present."""
        return tag in self.tags

    def put_tag(self, tag: str, value: int) -> None:
        """
        Insert or overwrite a tag.

        Raises:
            ValidationError: If value is not an integer
        """
        # Reassigned so validate_assignment checks the value
        self.tags = {**self.tags, tag: value}

    def remove_tag(self, tag: str) -> None:
        """
        Remove a tag.

        Raises:
            ValueError: If tag is count
        """
        if tag == COUNT:
            raise ValueError(f"Tag '{COUNT}' cannot be removed from an item")
        self.tags = {k: v for k, v in self.tags.items() if k != tag}

    def tag_value(self, tag: str) -> int:
        """
        Get the value of a tag.

        Raises:
            KeyError: If the item does not have the tag
        """
        if tag not in self.tags:
            raise KeyError(f"Item '{self.name}' has no tag '{tag}'")
        return self.tags[tag]

    def clone(self) -> Item:
        """Create an independent copy, tags included."""
        return self.model_copy(deep=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        if self.name != other.name:
            return False

        mine = {k: v for k, v in self.tags.items() if k != COUNT}
        theirs = {k: v for k, v in other.tags.items() if k != COUNT}
        return mine == theirs

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        pairs = ", ".join(f"({tag}, {self.tags[tag]})" for tag in sorted(self.tags))
        return f"{self.name}:{{{pairs}}}"
