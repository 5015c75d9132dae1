from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class MainAppContext:
    """Read-only server state captured once at startup.

    ``env`` is a snapshot of the process environment; the Jira
    configuration is resolved from it on every tool call.
    """

    env: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    read_only: bool = False
