"""Public model surface."""

from __future__ import annotations

from fedimodel.model.actor import PUBLIC_COLLECTION, CompoundActorReference
from fedimodel.model.entity import ACTIVITYSTREAMS_NAMESPACE, Context, Entity, ObjectLike
from fedimodel.model.enums import EntityType
from fedimodel.model.link import (
    BareUrl,
    InvalidUrl,
    Link,
    LinkList,
    SingleLink,
    UrlList,
    UrlReference,
    UrlReferenceOps,
)
from fedimodel.model.object import (
    EmbeddedObject,
    ExtendedObject,
    Object,
    ObjectReference,
    ObjectUrl,
)

__all__ = [  # noqa: RUF022
    # envelope
    "ACTIVITYSTREAMS_NAMESPACE",
    "Context",
    "Entity",
    "EntityType",
    "ObjectLike",
    # addressing
    "PUBLIC_COLLECTION",
    "CompoundActorReference",
    # links
    "Link",
    "UrlReference",
    "UrlReferenceOps",
    "BareUrl",
    "SingleLink",
    "LinkList",
    "UrlList",
    "InvalidUrl",
    # objects
    "Object",
    "ExtendedObject",
    "ObjectReference",
    "EmbeddedObject",
    "ObjectUrl",
]
