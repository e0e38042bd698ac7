"""
Core module.

Exports:
- Model: Pydantic base for data models
- register_backend, get_backend_type: Kernel backend registry
- InventoryConfig, create_inventory: Configuration
"""

from slotkit.core.model import (
    Model,
    register_backend,
    get_backend_type,
    get_all_backend_types,
)
from slotkit.core.config import InventoryConfig, create_inventory

__all__ = [
    # Models
    "Model",
    # Backends
    "register_backend",
    "get_backend_type",
    "get_all_backend_types",
    # Config
    "InventoryConfig",
    "create_inventory",
]
