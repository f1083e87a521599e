from .instance_registry import InstanceRegistry
from .tracked import RegistryMeta, Remembered

__all__ = [
    "InstanceRegistry",
    "RegistryMeta",
    "Remembered",
]
