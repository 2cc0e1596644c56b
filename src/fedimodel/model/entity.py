"""
Entity envelope shared by links and objects:
type tag, protocol context and the object identity capability.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Final, Protocol, cast, runtime_checkable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializerFunctionWrapHandler,  # noqa: TC002
    model_serializer,
    model_validator,
)

from fedimodel.model.enums import EntityType

if TYPE_CHECKING:
    from pydantic import AnyUrl

ACTIVITYSTREAMS_NAMESPACE: Final[str] = "https://www.w3.org/ns/activitystreams"


class Context(RootModel[str | list[str | dict[str, Any]] | dict[str, Any]]):
    """JSON-LD ``@context``, kept verbatim (no expansion)."""

    model_config = ConfigDict(frozen=True)

    def uris(self) -> list[str]:
        value = self.root
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [item for item in value if isinstance(item, str)]
        return []

    @property
    def is_activitystreams(self) -> bool:
        return ACTIVITYSTREAMS_NAMESPACE in self.uris()


class EnvelopeModel(BaseModel):
    """Base for wire records: immutable, tolerant of unmodeled keys, absent fields omitted."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = cast(dict[str, Any], handler(self))
        return {key: value for key, value in data.items() if value is not None}


class Entity(EnvelopeModel):
    object_type: EntityType = Field(alias="type")
    context: Context | None = Field(default=None, alias="@context")

    @classmethod
    def new(cls, entity_type: EntityType | str) -> Entity:
        """Build a context-less envelope; raises ``ValueError`` for unknown type tags."""
        return cls(object_type=EntityType(entity_type))


class EmbeddedEntityModel(EnvelopeModel):
    """A record embedding an :class:`Entity` whose keys are flattened into its own on the wire."""

    _ENVELOPE_KEYS: ClassVar[tuple[str, ...]] = ("type", "@context")

    entity: Entity

    @model_validator(mode="before")
    @classmethod
    def _gather_envelope(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        mapping_value = cast(Mapping[str, object], value)
        # Programmatic construction passes the envelope itself and no wire ``type`` key.
        if "entity" in mapping_value and "type" not in mapping_value:
            return mapping_value
        data: dict[str, object] = dict(mapping_value)
        data["entity"] = {key: data.pop(key) for key in cls._ENVELOPE_KEYS if key in data}
        return data

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = cast(dict[str, Any], handler(self))
        envelope = cast(dict[str, Any], data.pop("entity", None) or {})
        merged = {**envelope, **data}
        return {key: value for key, value in merged.items() if value is not None}


@runtime_checkable
class ObjectLike(Protocol):
    """Anything exposing the common ActivityPub object identity."""

    def context(self) -> Context | None: ...

    def object_id(self) -> AnyUrl: ...

    def object_id_str(self) -> str: ...

    def entity_type(self) -> EntityType: ...
