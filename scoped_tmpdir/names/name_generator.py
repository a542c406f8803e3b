# (c) Nelen & Schuurmans

import hashlib
import os
from typing import Annotated
from typing import Iterator
from typing import Optional
from typing import Union

from pydantic import StringConstraints

__all__ = [
    "Suffix",
    "SeedState",
    "seed",
    "next_letter",
    "next_name",
    "candidate_names",
]


Suffix = Annotated[str, StringConstraints(pattern="^[a-z]+$")]

# Two 64-bit words of xorshift128+ state
SeedState = tuple[int, int]

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
MASK = (1 << 64) - 1

# xorshift128+ never leaves the all-zero state, so it must not start there
NONZERO_STATE: SeedState = (0x9E3779B97F4A7C15, 0xBF58476D1CE4E5B9)


def seed(
    parent: Union[str, "os.PathLike[str]"], prefix: str, entropy: Optional[int] = None
) -> SeedState:
    """Derive the generator state from a parent directory and a prefix.

    Without ``entropy`` the result only depends on ``parent`` and ``prefix``,
    so that the sequence of names is reproducible. Pass e.g. a few random
    bytes as an integer to get a different sequence on every call.

    The names are not meant to be unguessable, only unlikely to collide.
    """
    key = "\x00".join(
        [os.fspath(parent), prefix, "" if entropy is None else str(entropy)]
    )
    digest = hashlib.blake2b(
        key.encode("utf-8", "surrogateescape"), digest_size=16
    ).digest()
    state = (
        int.from_bytes(digest[:8], "little"),
        int.from_bytes(digest[8:], "little"),
    )
    if state == (0, 0):
        return NONZERO_STATE
    return state


def next_letter(state: SeedState) -> tuple[SeedState, str]:
    x, y = state
    x ^= (x << 23) & MASK
    x ^= x >> 17
    x ^= y ^ (y >> 26)
    return (y, x), ALPHABET[((x + y) & MASK) % len(ALPHABET)]


def next_name(state: SeedState, length: int) -> tuple[SeedState, Suffix]:
    letters = []
    for _ in range(length):
        state, letter = next_letter(state)
        letters.append(letter)
    return state, "".join(letters)


def candidate_names(state: SeedState, length: int) -> Iterator[Suffix]:
    """Yield an endless sequence of lowercase names of the given length."""
    while True:
        state, name = next_name(state, length)
        yield name
