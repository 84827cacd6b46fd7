"""Store enumerations."""

from __future__ import annotations

from enum import Enum


class ConsistencyLevel(Enum):
    """Requested replication guarantee for a store operation."""

    ANY = "any"
    ONE = "one"
    TWO = "two"
    THREE = "three"
    QUORUM = "quorum"
    LOCAL_QUORUM = "local_quorum"
    EACH_QUORUM = "each_quorum"
    ALL = "all"


class StoreBackend(Enum):
    """Bundled store backends."""

    MEMORY = "memory"
    SQLITE = "sqlite"
