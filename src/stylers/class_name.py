"""Scoping qualifier: the per-block class appended to every selector."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_PREFIX = "l-"
_LENGTH = 6


@dataclass(frozen=True)
class Class:
    """An immutable class identifier such as ``l-3k9x0a``.

    ``name`` is the bare identifier used in markup; :meth:`as_selector`
    gives the ``.name`` fragment spliced into rewritten selectors.
    """

    name: str

    @classmethod
    def from_seed(cls, seed: str) -> Class:
        """Derive a stable class from the unscoped source of a style block.

        The same seed yields the same class across runs. The fingerprint is
        not meant to resist deliberate collisions.
        """
        digest = hashlib.blake2b(seed.encode("utf-8"), digest_size=8).digest()
        value = int.from_bytes(digest, "big")
        chars: list[str] = []
        for _ in range(_LENGTH):
            value, rem = divmod(value, len(_ALPHABET))
            chars.append(_ALPHABET[rem])
        return cls(_PREFIX + "".join(chars))

    def as_selector(self) -> str:
        return "." + self.name

    def __str__(self) -> str:
        return self.name
