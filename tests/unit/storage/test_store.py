"""Unit tests for address book persistence store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from carebook.model import AddressBook
from carebook.storage import (
    STORE_SCHEMA_VERSION,
    StoreDecodeError,
    StoreSchemaVersionError,
    load_address_book,
    recover_corrupt_store,
    save_address_book,
)
from tests.unit.helpers import make_appointment, make_person


@pytest.mark.unit
def test_save_and_load_roundtrip(tmp_path: Path) -> None:
    """Store should roundtrip persons with tags, roles, and appointments."""
    # Arrange - path and book with one detailed person
    path = tmp_path / "addressbook.json"
    source = AddressBook(
        persons=[
            make_person(
                "Alex Yeoh",
                tags=("diabetic",),
                appointments=(make_appointment(30, 14, 15),),
            )
        ]
    )

    # Act - save then load
    save_address_book(source, path)
    loaded = load_address_book(path)

    # Assert - loaded matches source and file has schema version
    assert loaded == source
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["schema_version"] == STORE_SCHEMA_VERSION
    assert not path.with_name("addressbook.json.tmp").exists()


@pytest.mark.unit
def test_load_unsupported_schema_version_raises(tmp_path: Path) -> None:
    """Unsupported schema should raise explicit version error."""
    path = tmp_path / "addressbook.json"
    path.write_text(
        json.dumps({"schema_version": 999, "address_book": {}}),
        encoding="utf-8",
    )

    with pytest.raises(StoreSchemaVersionError, match="Unsupported"):
        load_address_book(path)


@pytest.mark.unit
@pytest.mark.parametrize(
    "content",
    [
        "{bad json",
        "[]",
        json.dumps(
            {
                "schema_version": STORE_SCHEMA_VERSION,
                "address_book": {"persons": [{"name": "R@chel"}]},
            }
        ),
    ],
    ids=["bad_json", "not_object", "invalid_person"],
)
def test_load_invalid_payload_raises_decode_error(
    tmp_path: Path, content: str
) -> None:
    """Undecodable or invalid payloads should raise decode errors."""
    path = tmp_path / "addressbook.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(StoreDecodeError):
        load_address_book(path)


@pytest.mark.unit
def test_recover_corrupt_store_moves_file_aside(tmp_path: Path) -> None:
    """Recovery should move invalid store to a .corrupt backup path."""
    # Arrange - corrupt store file
    path = tmp_path / "addressbook.json"
    path.write_text("{bad json", encoding="utf-8")

    # Act - recover corrupt store
    backup = recover_corrupt_store(path)

    # Assert - backup path returned, original removed
    assert backup is not None
    assert backup.exists()
    assert ".corrupt-" in backup.name
    assert not path.exists()


@pytest.mark.unit
def test_recover_missing_store_returns_none(tmp_path: Path) -> None:
    """Recovery of a missing file should be a no-op."""
    assert recover_corrupt_store(tmp_path / "missing.json") is None


@pytest.mark.unit
def test_load_rejects_names_differing_only_in_case(tmp_path: Path) -> None:
    """A file listing the same person twice should not load."""
    # Arrange - two records whose names differ only in case
    path = tmp_path / "addressbook.json"
    persons = [
        make_person("Alex Yeoh").model_dump(mode="json"),
        make_person("alex yeoh").model_dump(mode="json"),
    ]
    path.write_text(
        json.dumps(
            {
                "schema_version": STORE_SCHEMA_VERSION,
                "address_book": {"persons": persons},
            }
        ),
        encoding="utf-8",
    )

    # Act / Assert - rejected as an invalid payload
    with pytest.raises(StoreDecodeError, match="more than once"):
        load_address_book(path)


@pytest.mark.unit
def test_load_upgrades_unversioned_file(tmp_path: Path) -> None:
    """A bare `{"persons": [...]}` file should load as the current schema."""
    # Arrange - unversioned address book file
    path = tmp_path / "addressbook.json"
    person = make_person("Bernice Yu", tags=("elderly",))
    path.write_text(
        json.dumps({"persons": [person.model_dump(mode="json")]}),
        encoding="utf-8",
    )

    # Act - load then save back
    loaded = load_address_book(path)
    save_address_book(loaded, path)

    # Assert - same person, file rewritten with a schema version
    assert loaded.persons == [person]
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["schema_version"] == STORE_SCHEMA_VERSION
