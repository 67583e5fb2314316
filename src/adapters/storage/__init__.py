"""Almacenes clave-valor (implementaciones de `core.interfaces.storage.KeyValueStore`)."""

from adapters.storage.json_file import JsonFileKeyValueStore
from adapters.storage.memory import MemoryKeyValueStore

__all__ = [
    "JsonFileKeyValueStore",
    "MemoryKeyValueStore",
]
