"""Dialog search controller and the image picker built on it."""

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, Protocol

from image_dialog_search.config import IMAGE_REMOVED_EVENT
from image_dialog_search.models import ApiClient, InstanceSettings, LookupData, SearchFields, SourceDefinition
from image_dialog_search.search.strategy import ImageSearchStrategy
from image_dialog_search.signals import SignalEmitter

logger = logging.getLogger(__name__)


class DialogSearchStrategy(Protocol):
    """Content-specific hooks used by :class:`DialogSearchController`."""

    def default_search_fields(self) -> Any: ...

    def restore_search_fields(self, data: Mapping[str, Any]) -> Any: ...

    def ensure_search_fields(self, fields: Any) -> None: ...

    def api_resource_name(self, fields: Any) -> str: ...

    def build_search_arguments(self, fields: Any) -> dict[str, Any]: ...

    async def load_lookups(self) -> None: ...

    def reconcile_snapshot(self, snapshot: MutableMapping[str, Any]) -> MutableMapping[str, Any]: ...


class DialogSearchController:
    """Search fields, result list and lifecycle of a content search dialog."""

    def __init__(
        self,
        api: ApiClient,
        strategy: DialogSearchStrategy,
        *,
        last_search_snapshot: MutableMapping[str, Any] | None = None,
        is_same: Callable[[Any, Any], bool] | None = None,
        selected: Any = None,
        search_on_display: bool = False,
    ) -> None:
        self.api = api
        self.strategy = strategy
        self.is_same = is_same
        self.selected = selected
        self.search_on_display = search_on_display
        self.items: list[Any] = []
        self.activated = False
        self._disposed = False

        self.last_search_snapshot = last_search_snapshot
        if last_search_snapshot and last_search_snapshot.get("searchFields") is not None:
            snapshot = strategy.reconcile_snapshot(last_search_snapshot)
            self.search_fields = strategy.restore_search_fields(snapshot["searchFields"])
        else:
            self.search_fields = strategy.default_search_fields()

    @property
    def api_resource_name(self) -> str:
        return self.strategy.api_resource_name(self.search_fields)

    async def activate(self) -> None:
        """Load lookups, then search right away if the dialog asks for it."""
        await self.strategy.load_lookups()
        self.activated = True
        if self.search_on_display:
            await self.search()

    async def search(self) -> list[Any]:
        """Run a search with the current fields and replace the result list."""
        self.strategy.ensure_search_fields(self.search_fields)
        arguments = self.strategy.build_search_arguments(self.search_fields)
        resource_name = self.api_resource_name
        logger.debug("Searching %s with %s", resource_name, arguments)
        data = await self.api.fetch(resource_name, params=arguments)
        if isinstance(data, Mapping):
            data = data.get("items") or []
        self.items = list(data or [])

        if self.last_search_snapshot is None:
            self.last_search_snapshot = {}
        self.last_search_snapshot["searchFields"] = self.search_fields.to_snapshot()
        return self.items

    def reset_search_fields(self) -> None:
        self.search_fields = self.strategy.default_search_fields()

    def remove_items(self, predicate: Callable[[Any], bool]) -> list[Any]:
        """Drop matching items and return them."""
        removed = [item for item in self.items if predicate(item)]
        if removed:
            self.items = [item for item in self.items if not predicate(item)]
        return removed

    def is_selected(self, item: Any) -> bool:
        if self.selected is None:
            return False
        if self.is_same is not None:
            return bool(self.is_same(item, self.selected))
        return item == self.selected

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.items = []


class ImageDialogSearch:
    """Search state of the image picker dialog.

    Construct it, ``await activate()`` when the dialog is shown, and call
    ``dispose()`` when it closes. While alive it listens for
    ``image:removed`` on ``signals`` and drops the removed image from the
    results.
    """

    def __init__(
        self,
        settings: InstanceSettings,
        signals: SignalEmitter,
        last_search_snapshot: MutableMapping[str, Any] | None = None,
    ) -> None:
        self.settings = settings
        self.signals = signals
        self.strategy = ImageSearchStrategy(settings)
        self.controller = DialogSearchController(
            settings.api,
            self.strategy,
            last_search_snapshot=last_search_snapshot,
            is_same=settings.is_same,
            selected=settings.selected,
            search_on_display=settings.search_on_display,
        )
        self._disposed = False
        self.signals.add_listener(IMAGE_REMOVED_EVENT, self.on_image_removed)

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        signals: SignalEmitter,
        last_search_snapshot: MutableMapping[str, Any] | None = None,
    ) -> "ImageDialogSearch":
        return cls(InstanceSettings.from_params(params), signals, last_search_snapshot)

    @property
    def search_fields(self) -> SearchFields:
        return self.controller.search_fields

    @property
    def items(self) -> list[Any]:
        return self.controller.items

    @property
    def lookups(self) -> LookupData:
        return self.strategy.lookups

    @property
    def content_types(self) -> list[SourceDefinition]:
        return self.strategy.content_types

    @property
    def api_resource_name(self) -> str:
        return self.controller.api_resource_name

    def get_search_arguments(self) -> dict[str, Any]:
        return self.strategy.build_search_arguments(self.search_fields)

    async def activate(self) -> None:
        await self.controller.activate()

    async def search(self) -> list[Any]:
        return await self.controller.search()

    def on_image_removed(self, id_as_url: str) -> None:
        removed = self.controller.remove_items(
            lambda item: isinstance(item, Mapping) and item.get("idAsUrl") == id_as_url
        )
        if removed:
            logger.debug("Removed %d result(s) for deleted image %s", len(removed), id_as_url)

    def dispose(self) -> None:
        """Tear down; safe to call more than once and after a failed activation."""
        if self._disposed:
            return
        self._disposed = True
        try:
            self.controller.dispose()
        finally:
            self.signals.remove_listener(IMAGE_REMOVED_EVENT, self.on_image_removed)
