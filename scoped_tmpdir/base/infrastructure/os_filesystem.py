# (c) Nelen & Schuurmans

import os
import shutil
from pathlib import Path

from ..domain import Filesystem

__all__ = ["OsFilesystem"]


class OsFilesystem(Filesystem):
    def __init__(self, mode: int = 0o700):
        self.mode = mode

    def create_dir(self, path: Path) -> None:
        # os.mkdir is atomic and raises FileExistsError on an existing entry
        os.mkdir(path, self.mode)

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def getcwd(self) -> Path:
        return Path(os.getcwd())
