"""Property profile selection for decoded objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from fedimodel.model.object import ExtendedObject, Object

from .env import read_env_flag

EXTENDED_PROPERTIES_ENV: Final[str] = "FEDIMODEL_EXTENDED_PROPERTIES"


@dataclass(frozen=True, slots=True)
class ProfileConfig:
    """Selects which object record the decoders produce.

    With ``extended_properties`` enabled, objects additionally carry ``cc``,
    ``preview`` and ``summary``.
    """

    extended_properties: bool = False

    @property
    def object_model(self) -> type[Object]:
        return ExtendedObject if self.extended_properties else Object


def get_profile_config() -> ProfileConfig:
    return ProfileConfig(extended_properties=read_env_flag(EXTENDED_PROPERTIES_ENV))
