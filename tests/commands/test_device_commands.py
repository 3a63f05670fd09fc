"""Unit tests for map, share and contact."""

import pytest
from conftest import make_task, seed
from typer.testing import CliRunner

from todomatic.commands import contact_command, map_command, share_command
from todomatic.models import Contact, Coordinates, SendStatus

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("patch_app_context")

POINT = Coordinates(latitude=51.5007, longitude=-0.1246)


@pytest.fixture()
def seeded(memory_store):
    seed(
        memory_store,
        [
            make_task("task-map1", "Big Ben", location=POINT),
            make_task("task-nol2", "Laundry", description="Darks only"),
        ],
    )


class TestMap:
    def test_opens_native_uri(self, seeded, uri_launcher):
        result = runner.invoke(map_command.app, ["map1"])

        assert result.exit_code == 0, result.output
        assert uri_launcher.opened == ["geo:51.5007,-0.1246?q=51.5007,-0.1246"]

    def test_falls_back_to_web(self, seeded, uri_launcher):
        uri_launcher.supported = False
        result = runner.invoke(map_command.app, ["map1"])

        assert result.exit_code == 0, result.output
        assert "browser" in result.output
        assert uri_launcher.opened == [
            "https://www.google.com/maps/search/?api=1&query=51.5007,-0.1246"
        ]

    def test_launch_failure(self, seeded, uri_launcher):
        uri_launcher.check_error = OSError("broken")
        result = runner.invoke(map_command.app, ["map1"])
        assert result.exit_code == 7

    def test_task_without_location(self, seeded, uri_launcher):
        result = runner.invoke(map_command.app, ["nol2"])

        assert result.exit_code == 2
        assert "has no location" in result.output
        assert uri_launcher.opened == []


class TestShare:
    def test_share_to_number(self, seeded, messaging_provider):
        result = runner.invoke(share_command.app, ["nol2", "--to", "+15550100"])

        assert result.exit_code == 0, result.output
        assert "Shared: Laundry" in result.output
        assert messaging_provider.sent == [
            (["+15550100"], "Task: Laundry\nDescription: Darks only\nStatus: Active")
        ]

    def test_share_to_first_contact(self, seeded, messaging_provider):
        result = runner.invoke(share_command.app, ["nol2", "--contact"])

        assert result.exit_code == 0, result.output
        assert "Alice" in result.output
        assert messaging_provider.sent[0][0] == ["+15550100"]

    def test_share_cancelled_is_silent(self, seeded, messaging_provider):
        messaging_provider.status = SendStatus.CANCELLED
        result = runner.invoke(share_command.app, ["nol2"])

        assert result.exit_code == 0
        assert "Shared" not in result.output
        assert "Error" not in result.output

    def test_share_unavailable(self, seeded, messaging_provider):
        messaging_provider.available = False
        result = runner.invoke(share_command.app, ["nol2"])

        assert result.exit_code == 7
        assert "SMS is not available on this device" in result.output

    def test_share_contact_without_number(self, seeded, contacts_provider):
        contacts_provider.contacts = [Contact(id="1", name="Bob")]
        result = runner.invoke(share_command.app, ["nol2", "--contact"])

        assert result.exit_code == 2
        assert "no phone number" in result.output


class TestContact:
    def test_shows_first_contact(self):
        result = runner.invoke(contact_command.app, [])

        assert result.exit_code == 0, result.output
        assert "Alice" in result.output
        assert "+15550100" in result.output

    def test_empty_directory(self, contacts_provider):
        contacts_provider.contacts = []
        result = runner.invoke(contact_command.app, [])

        assert result.exit_code == 0
        assert "No contacts found" in result.output

    def test_contacts_denied(self, contacts_provider):
        from todomatic.models import PermissionStatus

        contacts_provider.permission = PermissionStatus.DENIED
        result = runner.invoke(contact_command.app, [])

        assert result.exit_code == 6
