"""Shared test fixtures."""

import asyncio
from typing import Any

import pytest

from image_dialog_search.models import InstanceSettings
from image_dialog_search.signals import SignalEmitter


class FakeApi:
    """In-memory API client recording every fetch."""

    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        errors: dict[str, Exception] | None = None,
        user_name: str = "alice",
    ) -> None:
        self.responses = responses or {}
        self.errors = errors or {}
        self.user_name = user_name
        self.calls: list[tuple[str, dict | None]] = []
        self.gates: dict[str, asyncio.Event] = {}

    async def fetch(self, resource_name: str, params=None) -> Any:
        self.calls.append((resource_name, dict(params) if params is not None else None))
        gate = self.gates.get(resource_name)
        if gate is not None:
            await gate.wait()
        if resource_name in self.errors:
            raise self.errors[resource_name]
        return self.responses.get(resource_name)

    def user(self) -> dict:
        return {"userName": self.user_name}


PICTO_LOOKUPS = {
    "directoryCodeNames": ["news", "sports"],
    "subDirectoryCodeNames": ["local", "world"],
}

ZONES = [{"id": 1, "name": "Montreal"}, {"id": 2, "name": "Quebec"}]


@pytest.fixture
def api() -> FakeApi:
    return FakeApi(
        responses={
            "images/configuration": PICTO_LOOKUPS,
            "zones-for-images": ZONES,
        }
    )


@pytest.fixture
def signals() -> SignalEmitter:
    return SignalEmitter()


def make_settings(api: Any, content_type_ids: list[int] | None = None, **kwargs: Any) -> InstanceSettings:
    """Helper to create InstanceSettings with both sources enabled by default."""
    return InstanceSettings(
        api=api,
        content_type_ids=[19, 20] if content_type_ids is None else content_type_ids,
        **kwargs,
    )
