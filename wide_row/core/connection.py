"""Store configuration and connection management.

StoreConfig is a Pydantic model for type-safe store config.
ConnectionManager loads the adapter for the configured driver and owns
the adapter's connection handle.
"""

from __future__ import annotations

import importlib
import logging
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel

from wide_row.core.enums import ConsistencyLevel, StoreBackend
from wide_row.core.exceptions import AdapterError

logger = logging.getLogger(__name__)


class StoreConfig(BaseModel):
    """Configuration for a wide-column store."""

    driver: str = "memory"
    keyspace: str | None = None
    database: str = ":memory:"
    consistency: ConsistencyLevel = ConsistencyLevel.ONE
    auto_create: bool = True
    extra: dict[str, Any] = {}


# Adapter module mapping: driver name → (module_path, class_name)
_ADAPTER_MAP: dict[str, tuple[str, str]] = {
    StoreBackend.MEMORY.value: ("wide_row.adapters.memory", "MemoryStoreAdapter"),
    StoreBackend.SQLITE.value: ("wide_row.adapters.sqlite", "SqliteStoreAdapter"),
}


def _load_adapter(driver: str) -> Any:
    """Load a store adapter by driver name."""
    driver_lower = driver.lower()
    if driver_lower not in _ADAPTER_MAP:
        raise AdapterError(f"Unsupported store driver: {driver}")

    module_path, cls_name = _ADAPTER_MAP[driver_lower]
    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load adapter for '{driver}': {e}") from e


class ConnectionManager:
    """Owns a single adapter handle, opened lazily."""

    def __init__(self, config: StoreConfig) -> None:
        self.config = config
        self._adapter = _load_adapter(config.driver)
        self._handle: Any = None

    @property
    def adapter(self) -> Any:
        return self._adapter

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self) -> Any:
        """Open the adapter handle."""
        if self._handle is None:
            logger.debug("Opening %s store at %s", self.config.driver, self.config.database)
            self._handle = self._adapter.connect(self.config)
        return self._handle

    @contextmanager
    def get_connection(self):  # type: ignore[no-untyped-def]
        """Yield the open handle, opening it on first use."""
        if self._handle is None:
            self.open()
        yield self._handle

    def close(self) -> None:
        """Close the adapter handle."""
        if self._handle is not None:
            self._adapter.close(self._handle)
            self._handle = None
