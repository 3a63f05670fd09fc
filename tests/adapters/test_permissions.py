"""Unit tests for PermissionGate."""

from unittest.mock import MagicMock

import pytest

from todomatic.adapters import PermissionGate
from todomatic.models import PermissionStatus


@pytest.mark.asyncio
async def test_always_grants_without_prompt():
    prompt = MagicMock()
    gate = PermissionGate("always", prompt=prompt)
    assert await gate.request("location") is PermissionStatus.GRANTED
    prompt.assert_not_called()


@pytest.mark.asyncio
async def test_never_denies_without_prompt():
    prompt = MagicMock()
    gate = PermissionGate("never", prompt=prompt)
    assert await gate.request("camera") is PermissionStatus.DENIED
    prompt.assert_not_called()


@pytest.mark.asyncio
async def test_ask_remembers_grant():
    prompt = MagicMock(return_value=True)
    gate = PermissionGate("ask", prompt=prompt)

    assert await gate.request("contacts") is PermissionStatus.GRANTED
    assert await gate.request("contacts") is PermissionStatus.GRANTED
    prompt.assert_called_once_with("Allow TodoMatic to access your contacts?")


@pytest.mark.asyncio
async def test_ask_denial_asks_again_next_time():
    prompt = MagicMock(side_effect=[False, True])
    gate = PermissionGate("ask", prompt=prompt)

    assert await gate.request("location") is PermissionStatus.DENIED
    assert await gate.request("location") is PermissionStatus.GRANTED
    assert prompt.call_count == 2
