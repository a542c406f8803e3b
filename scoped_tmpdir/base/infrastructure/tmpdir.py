# (c) Nelen & Schuurmans

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional
from typing import Union

from ...names import candidate_names
from ...names import seed as derive_seed
from ..domain import Filesystem
from ..domain import NamespaceExhausted
from ..domain import RETRIES
from ..domain import SUFFIX_LENGTH
from .os_filesystem import OsFilesystem

__all__ = ["TmpDir", "acquire", "acquire_default"]

logger = logging.getLogger(__name__)


class TmpDir:
    """A freshly created, uniquely named directory that removes itself.

    Create one with ``acquire`` or ``acquire_default``. The directory and
    everything in it is removed when the first of these happens:

    - ``remove()`` is called (errors are raised);
    - a ``with`` block around the TmpDir exits, also on an exception;
    - the TmpDir is garbage collected.

    The last two are best-effort: a failed removal is logged and ignored.
    After ``into_path()`` the directory is left alone.

    A TmpDir must not be disposed from multiple threads at the same time.
    """

    def __init__(self, path: Path, filesystem: Filesystem):
        self._path = path
        self._filesystem = filesystem
        self._released = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def released(self) -> bool:
        return self._released

    def into_path(self) -> Path:
        """Keep the directory on disk and hand its removal over to the caller."""
        self._released = True
        return self._path

    def remove(self) -> None:
        self.cleanup()

    def cleanup(self) -> None:
        if self._released:
            return
        # flag first: a failed removal is not attempted again
        self._released = True
        self._filesystem.remove_tree(self._path)
        logger.debug("removed temporary directory %s", self._path)

    def _dispose(self) -> None:
        try:
            self.cleanup()
        except OSError as e:
            logger.warning(
                "could not remove temporary directory %s: %s", self._path, e
            )

    def __enter__(self) -> "TmpDir":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self._dispose()

    def __del__(self):
        self._dispose()

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self._path)!r})"


def acquire(
    parent: Union[str, "os.PathLike[str]"],
    prefix: str = "",
    *,
    seed: Optional[int] = None,
    retries: int = RETRIES,
    suffix_length: int = SUFFIX_LENGTH,
    filesystem: Optional[Filesystem] = None,
) -> TmpDir:
    """Create a new directory inside ``parent`` and return it as a TmpDir.

    The directory is named ``{prefix}.{suffix}``, or just ``{suffix}`` if the
    prefix is empty, where the suffix consists of ``suffix_length`` random
    lowercase letters.

    Args:
        parent: The existing directory to create the new directory in. A
            relative path is taken relative to the current working directory.
        prefix: Start of the directory name.
        seed: Makes the sequence of tried names reproducible. If not supplied,
            fresh random bytes from the OS are used.
        retries: The maximum number of names to try.
        suffix_length: Number of random letters in the name.
        filesystem: Defaults to the local filesystem.

    Returns:
        A TmpDir that owns the new (empty) directory.

    Raises:
        NamespaceExhausted: if all ``retries`` names were already taken.
        OSError: any other error while resolving ``parent`` or creating the
            directory (e.g. PermissionError, FileNotFoundError) is raised as-is
            on the first occurrence.
        ValueError: if ``retries`` or ``suffix_length`` is below 1, or if the
            filesystem reports a relative working directory.
    """
    if retries < 1:
        raise ValueError(f"retries must be at least 1, got {retries}")
    if suffix_length < 1:
        raise ValueError(f"suffix_length must be at least 1, got {suffix_length}")
    if filesystem is None:
        filesystem = OsFilesystem()
    parent = Path(parent)
    if not parent.is_absolute():
        cwd = filesystem.getcwd()
        if not cwd.is_absolute():
            raise ValueError(f"working directory must be absolute, got {cwd}")
        parent = cwd / parent

    if seed is None:
        seed = int.from_bytes(os.urandom(16), "little")
    names = candidate_names(derive_seed(parent, prefix, seed), suffix_length)

    # No existence check up front: create_dir is the only atomic test.
    for attempt in range(1, retries + 1):
        suffix = next(names)
        path = parent / (f"{prefix}.{suffix}" if prefix else suffix)
        try:
            filesystem.create_dir(path)
        except FileExistsError:
            logger.debug("%s already exists, trying another name", path)
            continue
        logger.debug("created temporary directory %s (attempt %d)", path, attempt)
        return TmpDir(path, filesystem)

    raise NamespaceExhausted(parent, prefix, retries)


def acquire_default(
    prefix: str = "",
    *,
    seed: Optional[int] = None,
    retries: int = RETRIES,
    suffix_length: int = SUFFIX_LENGTH,
    filesystem: Optional[Filesystem] = None,
) -> TmpDir:
    """Like ``acquire``, using the system temp directory as parent."""
    return acquire(
        tempfile.gettempdir(),
        prefix,
        seed=seed,
        retries=retries,
        suffix_length=suffix_length,
        filesystem=filesystem,
    )
