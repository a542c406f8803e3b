# (c) Nelen & Schuurmans

from pathlib import Path
from typing import Optional

from pydantic import Field

from .types import Prefix
from .value_object import ValueObject

__all__ = ["TmpDirOptions", "RETRIES", "SUFFIX_LENGTH"]


# Large enough to never be reached in practice, but still finite.
RETRIES = 1 << 31
SUFFIX_LENGTH = 12


class TmpDirOptions(ValueObject):
    dir: Optional[Path] = None
    prefix: Prefix = ""
    suffix_length: int = Field(default=SUFFIX_LENGTH, ge=1)
    retries: int = Field(default=RETRIES, ge=1)
