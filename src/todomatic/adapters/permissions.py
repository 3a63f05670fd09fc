"""Permission prompts for device capabilities.

A terminal has no OS permission dialog, so each capability is gated by a
configured policy: ``always`` grants, ``never`` denies and ``ask`` prompts
once per process.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from rich.prompt import Confirm

from todomatic.models import PermissionStatus
from todomatic.models.config_models import PermissionPolicy


def _ask(question: str) -> bool:
    return Confirm.ask(question, default=True)


class PermissionGate:
    """Resolves a permission policy into a grant or denial."""

    def __init__(
        self,
        policy: PermissionPolicy,
        prompt: Callable[[str], bool] | None = None,
    ):
        self.policy = policy
        self._prompt = prompt or _ask
        self._granted = False

    async def request(self, capability: str) -> PermissionStatus:
        if self.policy == "always" or self._granted:
            return PermissionStatus.GRANTED
        if self.policy == "never":
            return PermissionStatus.DENIED

        question = f"Allow TodoMatic to access your {capability}?"
        allowed = await asyncio.to_thread(self._prompt, question)
        self._granted = bool(allowed)
        return PermissionStatus.GRANTED if allowed else PermissionStatus.DENIED
