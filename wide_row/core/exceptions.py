"""wide_row exception hierarchy.

Container operations (save, load, populate) never raise these for data or
store problems: they record them on the container's error list and return
False. Only configuration errors are raised.
"""

from __future__ import annotations


class WideRowError(Exception):
    """Base exception for all wide_row errors."""


# --- Containers ---


class ContainerError(WideRowError):
    """Base for errors recorded on a column container."""


class ContainerPathError(ContainerError):
    """Recorded when keyspace, key or column family cannot be resolved."""

    def __init__(self, container: str, missing: list[str]) -> None:
        self.container = container
        self.missing = missing
        super().__init__(f"Cannot resolve path for '{container}': missing {missing}")


class PayloadError(ContainerError):
    """Recorded when populate is given data that is not a usable mapping."""

    def __init__(self, container: str, detail: str) -> None:
        self.container = container
        self.detail = detail
        super().__init__(f"Cannot populate '{container}': {detail}")


class PayloadDecodeError(PayloadError):
    """Recorded when a textual payload is not a JSON object."""


# --- Store ---


class StoreError(WideRowError):
    """A store call failed. Wraps the adapter's exception."""

    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"Store operation '{operation}' failed: {detail}")


# --- Adapter ---


class AdapterError(WideRowError):
    """Raised when a store adapter cannot be loaded."""
