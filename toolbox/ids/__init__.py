"""
Identifier package for sharded UUIDs and random numeric ids.
"""

from .id_factory import is_valid_uuid, random_id, random_uuid
from .uuids import DEFAULT_SIZE, MAX_SIZE, Uuid, UuidFactory, clear_cache, generate, is_valid, shard

__all__ = [
    "is_valid_uuid",
    "random_id",
    "random_uuid",
    "DEFAULT_SIZE",
    "MAX_SIZE",
    "Uuid",
    "UuidFactory",
    "clear_cache",
    "generate",
    "is_valid",
    "shard",
]
