# (c) Nelen & Schuurmans

import errno
import os
from typing import Union

from pydantic import ValidationError

__all__ = ["NamespaceExhausted", "BadRequest"]


class NamespaceExhausted(FileExistsError):
    """Every candidate name that was tried already existed.

    A subclass of FileExistsError. A single collision is never raised; it is
    retried.
    """

    def __init__(
        self, parent: Union[str, "os.PathLike[str]"], prefix: str, attempts: int
    ):
        super().__init__(errno.EEXIST, "failed to find a vacant name")
        self.parent = parent
        self.prefix = prefix
        self.attempts = attempts

    def __str__(self):
        return f"no vacant name in {self.parent} after {self.attempts} attempts"


class BadRequest(Exception):
    def __init__(self, err_or_msg: ValidationError | str):
        self._internal_error = err_or_msg
        super().__init__(err_or_msg)

    def __str__(self) -> str:
        error = self._internal_error
        if isinstance(error, ValidationError):
            details = error.errors()[0]
            loc = ",".join([str(x) for x in details["loc"]])
            return f"validation error: '{loc}' {details['msg']}"
        return f"validation error: {super().__str__()}"
