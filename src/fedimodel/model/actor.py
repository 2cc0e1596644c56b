"""Addressee references used by ``to``/``cc``."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Final

from pydantic import ConfigDict, RootModel

PUBLIC_COLLECTION: Final[str] = "https://www.w3.org/ns/activitystreams#Public"
_PUBLIC_ALIASES: Final[frozenset[str]] = frozenset({PUBLIC_COLLECTION, "as:Public", "Public"})


class CompoundActorReference(RootModel[str | list[str]]):
    """One actor id or an array of them, re-emitted in the shape it arrived in."""

    model_config = ConfigDict(frozen=True)

    def actor_ids(self) -> list[str]:
        if isinstance(self.root, str):
            return [self.root]
        return list(self.root)

    def matches(self, pattern: str) -> bool:
        """True if any actor id matches the shell-style ``pattern``.

        A pattern without wildcards is an exact comparison.
        """
        return any(fnmatchcase(actor_id, pattern) for actor_id in self.actor_ids())

    @property
    def is_public(self) -> bool:
        return any(actor_id in _PUBLIC_ALIASES for actor_id in self.actor_ids())
