"""Unit tests for JsonContactsProvider."""

import json

import pytest

from todomatic.adapters import JsonContactsProvider, PermissionGate


def make_provider(path):
    return JsonContactsProvider(PermissionGate("always"), path)


@pytest.mark.asyncio
async def test_missing_file_is_empty(tmp_path):
    assert await make_provider(tmp_path / "contacts.json").list_contacts() == []


@pytest.mark.asyncio
async def test_reads_both_number_keys(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Alice", "phone_numbers": ["+15550100"]},
                {"id": "b", "name": "Bob", "phoneNumbers": [5550101]},
            ]
        )
    )

    contacts = await make_provider(path).list_contacts()

    assert [(c.id, c.name, c.phone_numbers) for c in contacts] == [
        ("0", "Alice", ["+15550100"]),
        ("b", "Bob", ["5550101"]),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    ["{oops", json.dumps({"name": "Alice"}), json.dumps([{"phone_numbers": []}])],
)
async def test_malformed_directory_is_os_error(tmp_path, content):
    path = tmp_path / "contacts.json"
    path.write_text(content)
    with pytest.raises(OSError):
        await make_provider(path).list_contacts()


@pytest.mark.asyncio
async def test_undecodable_directory_is_os_error(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_bytes(b'[{"name": "\xff"}]')
    with pytest.raises(OSError):
        await make_provider(path).list_contacts()
