# (c) Nelen & Schuurmans

from typing import Optional

from ..domain import Filesystem
from ..domain import SyncProvider
from ..domain import TmpDirOptions
from .tmpdir import acquire
from .tmpdir import acquire_default
from .tmpdir import TmpDir

__all__ = ["TmpDirProvider"]


class TmpDirProvider(SyncProvider):
    """Hands out a new TmpDir on every call.

    Usage:

        provider = TmpDirProvider(TmpDirOptions(prefix="export"))
        with provider() as tmpdir:
            ...
    """

    def __init__(
        self,
        options: Optional[TmpDirOptions] = None,
        filesystem: Optional[Filesystem] = None,
    ):
        self.options = options or TmpDirOptions()
        self.filesystem = filesystem

    def __call__(self) -> TmpDir:
        kwargs = {
            "retries": self.options.retries,
            "suffix_length": self.options.suffix_length,
            "filesystem": self.filesystem,
        }
        if self.options.dir is None:
            return acquire_default(self.options.prefix, **kwargs)
        return acquire(self.options.dir, self.options.prefix, **kwargs)
