# (c) Nelen & Schuurmans

from typing import Annotated

from pydantic import StringConstraints

__all__ = ["Prefix"]


# A prefix ends up in a single path component: no separators, no NUL.
Prefix = Annotated[str, StringConstraints(pattern=r"^[^/\\\x00]*$")]
