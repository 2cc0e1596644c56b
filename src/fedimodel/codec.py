"""Decode ActivityPub documents into the model and encode them back.

Decoders take already-parsed JSON values (or JSON text for the ``*_json``
variants). Structural failures surface as :class:`DecodeError`; a url-like
property with an unrecognized string value does not fail, it decodes to
:class:`~fedimodel.model.InvalidUrl`.
"""

from __future__ import annotations

from functools import cache
from logging import getLogger
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, ValidationError

from fedimodel.config import get_profile_config
from fedimodel.model import EmbeddedObject, Object, ObjectReference, ObjectUrl, UrlReference

if TYPE_CHECKING:
    from collections.abc import Callable

    from fedimodel.config import ProfileConfig

log = getLogger(__name__)

T = TypeVar("T")

_URL_REFERENCE: TypeAdapter[UrlReference] = TypeAdapter(UrlReference)


def _format_location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


class DecodeError(ValueError):
    """Raised when a document does not have the expected structure."""

    def __init__(self, message: str, *, locations: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.locations = locations

    @classmethod
    def from_validation_error(cls, target: str, error: ValidationError) -> DecodeError:
        locations = tuple(sorted({_format_location(detail["loc"]) for detail in error.errors()}))
        return cls(f"Invalid {target}: {', '.join(locations)}", locations=locations)


def _validate(target: str, validate: Callable[[Any], T], value: Any) -> T:
    try:
        return validate(value)
    except ValidationError as exc:
        log.debug("Failed to decode %s: %s", target, exc)
        raise DecodeError.from_validation_error(target, exc) from exc


def _object_model(profile: ProfileConfig | None) -> type[Object]:
    return (profile or get_profile_config()).object_model


@cache
def _object_reference_adapter(model: type[Object]) -> TypeAdapter[Object | AnyUrl]:
    # Embedded object first, bare URL second.
    return TypeAdapter(Annotated[model | AnyUrl, Field(union_mode="left_to_right")])


def decode_url_reference(value: Any) -> UrlReference:
    return _validate("url reference", _URL_REFERENCE.validate_python, value)


def decode_object(value: Any, *, profile: ProfileConfig | None = None) -> Object:
    model = _object_model(profile)
    return _validate("object", model.model_validate, value)


def decode_object_json(text: str | bytes, *, profile: ProfileConfig | None = None) -> Object:
    model = _object_model(profile)
    return _validate("object", model.model_validate_json, text)


def decode_object_reference(value: Any, *, profile: ProfileConfig | None = None) -> ObjectReference:
    adapter = _object_reference_adapter(_object_model(profile))
    resolved = _validate("object reference", adapter.validate_python, value)
    if isinstance(resolved, Object):
        return EmbeddedObject(resolved)
    return ObjectUrl(resolved)


def encode(value: BaseModel) -> Any:
    """Return the JSON-compatible form of a model, omitting absent properties."""
    return value.model_dump(mode="json", by_alias=True, exclude_none=True)


def encode_json(value: BaseModel) -> str:
    return value.model_dump_json(by_alias=True, exclude_none=True)


__all__ = [
    "DecodeError",
    "decode_object",
    "decode_object_json",
    "decode_object_reference",
    "decode_url_reference",
    "encode",
    "encode_json",
]
