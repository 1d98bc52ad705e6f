"""Fatal errors of a generation run."""

from __future__ import annotations


class FixtureError(RuntimeError):
    """Base class: the run must stop, the fixture set is incomplete."""


class FixtureWriteError(FixtureError):
    """A fixture file could not be created or written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot write {path}: {reason}")
        self.path = path


class KeyDecodeError(FixtureError):
    """A fixed test key does not decode to a curve point."""


__all__: tuple[str, ...] = ("FixtureError", "FixtureWriteError", "KeyDecodeError")
