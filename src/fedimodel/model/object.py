"""Objects and references to them.

Most fediverse data entities are represented as objects. The ``url`` of a
PeerTube video, for example, arrives as an array of links::

    "url": [
        {"type": "Link", "mediaType": "text/html", "href": "https://peertube.stream/videos/watch/..."},
        {"type": "Link", "mediaType": "application/x-mpegURL", "href": "https://peertube.stream/static/..."}
    ]
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AnyUrl, ConfigDict, Field, RootModel, SerializeAsAny

from fedimodel.model.actor import CompoundActorReference
from fedimodel.model.entity import Context, EmbeddedEntityModel, Entity
from fedimodel.model.enums import EntityType
from fedimodel.model.link import UrlReference


class Object(EmbeddedEntityModel):
    id: AnyUrl
    name: str | None = None
    url: UrlReference | None = None
    # Usually the public collection; some services leave it unset and address it via ``cc``.
    to: CompoundActorReference | None = None

    @classmethod
    def new_with_entity_type(cls, entity_type: EntityType | str, id: AnyUrl | str) -> Object:  # noqa: A002
        """Create an object of ``entity_type`` with the given ``id``; other properties unset."""
        return cls(entity=Entity.new(entity_type), id=id)

    @classmethod
    def new_with_entity(cls, entity: Entity, id: AnyUrl | str) -> Object:  # noqa: A002
        """Create an object reusing ``entity``; other properties unset."""
        return cls(entity=entity, id=id)

    def object_url(self) -> AnyUrl | None:
        if self.url is None:
            return None
        return self.url.any_url()

    def matches(self, pattern: str) -> bool:
        """True if the primary addressees (``to``) match ``pattern``."""
        if self.to is None:
            return False
        # TODO: match ``cc`` once any-of vs all-of semantics across to/cc are settled
        return self.to.matches(pattern)

    def context(self) -> Context | None:
        return self.entity.context

    def object_id(self) -> AnyUrl:
        return self.id

    def object_id_str(self) -> str:
        return str(self.id)

    def entity_type(self) -> EntityType:
        return self.entity.object_type


class ExtendedObject(Object):
    """Object carrying the extended property set."""

    cc: CompoundActorReference | None = None
    # PeerTube sends an array of tiled storyboard images; kept as bare envelopes.
    preview: Entity | list[Entity] | None = None
    summary: str | None = None


# Encoded through the runtime class so an embedded ExtendedObject keeps its extra properties.
class EmbeddedObject(RootModel[SerializeAsAny[Object]]):
    model_config = ConfigDict(frozen=True)

    def object_id(self) -> AnyUrl:
        return self.root.id


class ObjectUrl(RootModel[AnyUrl]):
    model_config = ConfigDict(frozen=True)

    def object_id(self) -> AnyUrl:
        return self.root


ObjectReference = Annotated[EmbeddedObject | ObjectUrl, Field(union_mode="left_to_right")]
