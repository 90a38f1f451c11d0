"""Test identity providers used to derive default recording filenames."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from recorder.errors import ConfigError


@runtime_checkable
class IdentityProvider(Protocol):
    """Supplies the current test suite and test case names."""

    def identify(self) -> tuple[str, str]:
        """Return ``(suite, case)`` for the running test."""
        ...


class StaticIdentity:
    """Identity with fixed names, for use outside a test runner."""

    def __init__(self, suite: str, case: str) -> None:
        self.suite = suite
        self.case = case

    def identify(self) -> tuple[str, str]:
        return self.suite, self.case


class PytestIdentity:
    """
    Identity of the running pytest test.

    Uses the node id of ``node`` when given (e.g. ``request.node``),
    otherwise the ``PYTEST_CURRENT_TEST`` environment variable that pytest
    sets while a test runs. The suite is the innermost test class, or the
    module name for plain test functions.
    """

    def __init__(self, node: Any | None = None) -> None:
        self.node = node

    def identify(self) -> tuple[str, str]:
        if self.node is not None:
            nodeid = self.node.nodeid
        else:
            current = os.getenv("PYTEST_CURRENT_TEST")
            if not current:
                raise ConfigError("No pytest test is currently running")
            # "<nodeid> (setup|call|teardown)"
            nodeid = current.rsplit(" ", 1)[0]
        return self.parse_nodeid(nodeid)

    @staticmethod
    def parse_nodeid(nodeid: str) -> tuple[str, str]:
        """Split a pytest node id into ``(suite, case)``."""
        parts = nodeid.split("::")
        if len(parts) < 2:
            raise ConfigError(f"Not a test node id: {nodeid!r}")

        case = parts[-1]
        if len(parts) > 2:
            suite = parts[-2]
        else:
            suite = Path(parts[0]).stem
        return suite, case
