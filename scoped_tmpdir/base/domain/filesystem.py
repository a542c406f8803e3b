# (c) Nelen & Schuurmans

from abc import ABC
from pathlib import Path

__all__ = ["Filesystem"]


class Filesystem(ABC):
    """The filesystem primitives that a TmpDir relies on.

    Failures are reported as OSError subclasses. ``create_dir`` must raise
    FileExistsError (and nothing else) when the path is already taken, and it
    must be atomic: of two concurrent calls for the same path, at most one
    succeeds. ``getcwd`` returns an absolute path.
    """

    def create_dir(self, path: Path) -> None:
        raise NotImplementedError()

    def remove_tree(self, path: Path) -> None:
        raise NotImplementedError()

    def getcwd(self) -> Path:
        raise NotImplementedError()
