"""JSON file persistence for the address book.

Files are written as ``{"schema_version": 1, "address_book": {"persons": [...]}}``.
Older unversioned files hold the bare address book (``{"persons": [...]}``) and
are upgraded on load. Loading validates every person and rejects books that
contain the same person twice.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from carebook.model import AddressBook

STORE_SCHEMA_VERSION = 1
UNVERSIONED_SCHEMA = 0

_LOGGER = logging.getLogger(__name__)

Payload = dict[str, Any]


class StoreError(RuntimeError):
    """Base persistence error for address book files."""


class StoreSchemaVersionError(StoreError):
    """Raised when a file was written by an unknown schema version."""


class StoreDecodeError(StoreError):
    """Raised when a file is not JSON or does not describe a valid address book."""


class PersistedAddressBookV1(BaseModel):
    """On-disk envelope for schema version 1."""

    model_config = ConfigDict(extra="forbid")

    schema_version: int = STORE_SCHEMA_VERSION
    address_book: AddressBook


def _upgrade_unversioned(payload: Payload) -> Payload:
    return {"schema_version": 1, "address_book": payload}


_UPGRADES: dict[int, Callable[[Payload], Payload]] = {
    UNVERSIONED_SCHEMA: _upgrade_unversioned,
}


def save_address_book(address_book: AddressBook, path: Path) -> None:
    """Write ``address_book`` to ``path`` through a temp file and rename.

    Args:
        address_book: Address book to persist.
        path: Target file path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    envelope = PersistedAddressBookV1(address_book=address_book)
    temp_path = path.with_name(f"{path.name}.tmp")
    temp_path.write_text(envelope.model_dump_json(indent=2), encoding="utf-8")
    temp_path.replace(path)
    _LOGGER.debug("Saved %d person(s) to %s", len(address_book.persons), path)


def load_address_book(path: Path) -> AddressBook:
    """Read and validate the address book stored at ``path``.

    Args:
        path: Store file path.

    Returns:
        Loaded address book.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        StoreDecodeError: If the file is not JSON, holds an invalid person,
            or lists the same person more than once.
        StoreSchemaVersionError: If the schema version is unknown.
    """
    try:
        decoded = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise StoreDecodeError(f"Invalid address book JSON: {exc}") from exc

    payload = _upgrade_payload(decoded)
    try:
        envelope = PersistedAddressBookV1.model_validate(payload)
    except ValidationError as exc:
        raise StoreDecodeError(f"Invalid address book payload: {exc}") from exc
    return envelope.address_book


def recover_corrupt_store(path: Path) -> Path | None:
    """Rename an unreadable store to ``<name>.corrupt-<timestamp>``.

    Args:
        path: Store file path.

    Returns:
        Backup path, or ``None`` when there is no file to move.
    """
    if not path.exists():
        return None
    backup = path.with_name(f"{path.name}.corrupt-{int(time.time())}")
    path.replace(backup)
    _LOGGER.warning("Moved unreadable address book to %s", backup)
    return backup


def _schema_version(payload: Payload) -> object:
    if "schema_version" not in payload and "persons" in payload:
        return UNVERSIONED_SCHEMA
    return payload.get("schema_version")


def _upgrade_payload(payload: object) -> Payload:
    """Apply upgrades until ``payload`` matches the current schema.

    Raises:
        StoreDecodeError: If the root is not a JSON object.
        StoreSchemaVersionError: If no upgrade path exists for the version.
    """
    if not isinstance(payload, dict):
        raise StoreDecodeError("Invalid address book payload: expected JSON object.")
    version = _schema_version(payload)
    while version != STORE_SCHEMA_VERSION:
        upgrade = _UPGRADES.get(version) if type(version) is int else None
        if upgrade is None:
            raise StoreSchemaVersionError(
                f"Unsupported address book schema version: {version!r}. "
                f"Expected {STORE_SCHEMA_VERSION}."
            )
        _LOGGER.info("Upgrading address book from schema %s", version)
        payload = upgrade(payload)
        version = payload["schema_version"]
    return payload
