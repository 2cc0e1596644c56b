from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from fedimodel.config import EXTENDED_PROPERTIES_ENV

if TYPE_CHECKING:
    from collections.abc import Callable

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _base_profile(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(EXTENDED_PROPERTIES_ENV, raising=False)


@pytest.fixture(scope="session")
def load_document() -> Callable[[str], dict[str, Any]]:
    def load(name: str) -> dict[str, Any]:
        with (DATA_DIR / f"{name}.json").open() as handle:
            return json.load(handle)

    return load


@pytest.fixture
def peertube_video(load_document: Callable[[str], dict[str, Any]]) -> dict[str, Any]:
    return load_document("peertube_video")


@pytest.fixture
def mastodon_note(load_document: Callable[[str], dict[str, Any]]) -> dict[str, Any]:
    return load_document("mastodon_note")


@pytest.fixture
def blank_url_page(load_document: Callable[[str], dict[str, Any]]) -> dict[str, Any]:
    return load_document("blank_url_page")
