"""Address book persistence."""

from carebook.storage.store import (
    STORE_SCHEMA_VERSION,
    StoreDecodeError,
    StoreError,
    StoreSchemaVersionError,
    load_address_book,
    recover_corrupt_store,
    save_address_book,
)

__all__ = [
    "STORE_SCHEMA_VERSION",
    "StoreDecodeError",
    "StoreError",
    "StoreSchemaVersionError",
    "load_address_book",
    "recover_corrupt_store",
    "save_address_book",
]
