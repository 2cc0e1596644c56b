"""Links and the url reference union.

A ``url``-like property shows up on the wire as a bare URL, one link object,
an array of link objects, an array of bare URLs, or something unusable such as
``""``. Shapes are tried strictly in that order and the first match wins; an
unusable string degrades to :class:`InvalidUrl` instead of failing the document.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Annotated

from pydantic import AnyUrl, ConfigDict, Field, RootModel

from fedimodel.model.entity import EmbeddedEntityModel

log = logging.getLogger(__name__)


class Link(EmbeddedEntityModel):
    href: AnyUrl


class UrlReferenceOps(ABC):
    """Accessors shared by every url reference variant."""

    @abstractmethod
    def as_vec(self) -> list[AnyUrl]: ...

    def any_url(self) -> AnyUrl | None:
        """Return the first URL of the reference; no further ordering is promised."""
        urls = self.as_vec()
        return urls[0] if urls else None


class BareUrl(UrlReferenceOps, RootModel[AnyUrl]):
    model_config = ConfigDict(frozen=True)

    def as_vec(self) -> list[AnyUrl]:
        return [self.root]


class SingleLink(UrlReferenceOps, RootModel[Link]):
    model_config = ConfigDict(frozen=True)

    def as_vec(self) -> list[AnyUrl]:
        return [self.root.href]


class LinkList(UrlReferenceOps, RootModel[list[Link]]):
    model_config = ConfigDict(frozen=True)

    def as_vec(self) -> list[AnyUrl]:
        return [link.href for link in self.root]


class UrlList(UrlReferenceOps, RootModel[list[AnyUrl]]):
    model_config = ConfigDict(frozen=True)

    def as_vec(self) -> list[AnyUrl]:
        return list(self.root)


class InvalidUrl(UrlReferenceOps, RootModel[str]):
    """Raw text no structured shape accepted, kept for diagnostics."""

    model_config = ConfigDict(frozen=True)

    def model_post_init(self, _context: object, /) -> None:
        log.warning("Unrecognized url reference kept as invalid: %r", self.root)

    def as_vec(self) -> list[AnyUrl]:
        return []


UrlReference = Annotated[
    BareUrl | SingleLink | LinkList | UrlList | InvalidUrl,
    Field(union_mode="left_to_right"),
]
