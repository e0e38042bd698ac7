"""
Inventory configuration.

Usage:
    config = InventoryConfig(size=10, backend="sparse", max_stack=20)
    inventory = create_inventory(config)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from slotkit.core.model import get_backend_type, get_all_backend_types

if TYPE_CHECKING:
    from slotkit.inventory.kernel import InventoryKernel


logger = logging.getLogger(__name__)


class InventoryConfig:
    """Configuration for building an inventory."""

    def __init__(
        self,
        size: int = 1,
        backend: str = "slots",
        allowed_names: Optional[Iterable[str]] = None,
        max_stack: int = 0,
    ):
        self.size = size
        self.backend = backend
        self.allowed_names = (
            frozenset(allowed_names) if allowed_names is not None else None
        )
        # Stack bound for placement searches, 0 = unbounded
        self.max_stack = max_stack


def create_inventory(config: InventoryConfig) -> InventoryKernel:
    """
    Build an inventory from a configuration.

    Raises:
        KeyError: If the backend name is not registered
    """
    # Registers the built-in backends
    import slotkit.inventory.backends  # noqa: F401

    backend_type = get_backend_type(config.backend)
    if backend_type is None:
        raise KeyError(
            f"Unknown inventory backend '{config.backend}' "
            f"(known: {sorted(get_all_backend_types())})"
        )

    inventory = backend_type(config.size, allowed_names=config.allowed_names)
    logger.info(
        f"Created {backend_type.__name__} with {inventory.size()} slots"
    )
    return inventory
